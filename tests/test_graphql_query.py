#
# This source file is part of the relayschema open source project.
#
# Copyright 2026-present the relayschema authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#



import unittest  # NOQA

from relayschema import errors
from relayschema.graphql import nodes
from relayschema.testbase import GraphQLTestCase

from . import blog


def gid(type_name, local_id):
    return nodes.to_global_id(type_name, local_id)


class TestGraphQLQuery(GraphQLTestCase):

    VIEWER_ID = '1'

    def get_models(self):
        return blog.make_models()

    def test_graphql_query_get_by_id(self):
        self.assert_graphql_query_result(r"""
            query($id: ID) {
                getPost(id: $id) {
                    id
                    title
                    views
                    tags
                    meta
                    authorId
                }
            }
        """, {
            'getPost': {
                'id': gid('Post', '1'),
                'title': 'Hello',
                'views': 10,
                'tags': ['intro'],
                'meta': {'lang': 'en'},
                'authorId': gid('User', '1'),
            },
        }, variables={'id': gid('Post', '1')})

    def test_graphql_query_get_missing(self):
        self.assert_graphql_query_result(r"""
            query {
                getPost(id: "UG9zdDo5OQ==") {
                    id
                }
                getUser {
                    id
                }
            }
        """, {
            'getPost': None,
            'getUser': None,
        })

    def test_graphql_query_get_invalid_id(self):
        with self.assertRaisesRegex(errors.InvalidGlobalIdError,
                                    'not a valid global id'):
            self.graphql_query(r"""
                query {
                    getPost(id: "garbage!") {
                        id
                    }
                }
            """)

    def test_graphql_query_node(self):
        self.assert_graphql_query_result(r"""
            query($post: ID!, $user: ID!) {
                post: node(id: $post) {
                    __typename
                    id
                    ... on Post {
                        title
                    }
                }
                user: node(id: $user) {
                    __typename
                    ... on User {
                        name
                    }
                }
            }
        """, {
            'post': {
                '__typename': 'Post',
                'id': gid('Post', '2'),
                'title': 'Second',
            },
            'user': {
                '__typename': 'User',
                'name': 'Bob',
            },
        }, variables={'post': gid('Post', '2'), 'user': gid('User', '2')})

    def test_graphql_query_node_without_loader(self):
        context = self.make_context()
        self.assert_graphql_query_result(r"""
            query($id: ID!) {
                node(id: $id) {
                    id
                }
            }
        """, {
            'node': None,
        }, variables={'id': gid('Comment', '1')}, context=context)

        self.assertEqual(context.loaders['Post'].requested, [])

    def test_graphql_query_node_loader_requests(self):
        context = self.make_context()
        self.graphql_query(r"""
            query {
                a: node(id: "UG9zdDox") { id }
                b: node(id: "UG9zdDoz") { id }
            }
        """, context=context)

        self.assertEqual(context.loaders['Post'].requested, ['1', '3'])

    def test_graphql_query_viewer(self):
        self.assert_graphql_query_result(r"""
            query {
                viewer {
                    id
                    user {
                        id
                        name
                    }
                }
            }
        """, {
            'viewer': {
                'id': gid('user', '1'),
                'user': {
                    'id': gid('User', '1'),
                    'name': 'Alice',
                },
            },
        })

    def test_graphql_query_viewer_anonymous(self):
        context = self.make_context()
        context.viewer_id = None

        self.assert_graphql_query_result(r"""
            query {
                viewer {
                    id
                    user {
                        name
                    }
                }
            }
        """, {
            'viewer': {
                'id': gid('user', 'viewer'),
                'user': None,
            },
        }, context=context)

    def test_graphql_query_all_list(self):
        self.assert_graphql_query_result(r"""
            query {
                viewer {
                    allPosts {
                        edges {
                            node {
                                title
                            }
                        }
                    }
                    allUsers {
                        edges {
                            node {
                                name
                            }
                        }
                    }
                }
            }
        """, {
            'viewer': {
                'allPosts': {
                    'edges': [
                        {'node': {'title': 'Hello'}},
                        {'node': {'title': 'Second'}},
                        {'node': {'title': 'Other'}},
                    ],
                },
                'allUsers': {
                    'edges': [
                        {'node': {'name': 'Alice'}},
                        {'node': {'name': 'Bob'}},
                    ],
                },
            },
        })

    def test_graphql_query_pagination(self):
        res = self.graphql_query(r"""
            query {
                viewer {
                    allPosts(first: 2) {
                        edges {
                            cursor
                            node {
                                title
                            }
                        }
                        pageInfo {
                            hasNextPage
                            hasPreviousPage
                            endCursor
                        }
                    }
                }
            }
        """)

        conn = res['viewer']['allPosts']
        self.assertEqual(
            [e['node']['title'] for e in conn['edges']],
            ['Hello', 'Second'])
        self.assertTrue(conn['pageInfo']['hasNextPage'])
        self.assertFalse(conn['pageInfo']['hasPreviousPage'])
        self.assertEqual(
            conn['pageInfo']['endCursor'], conn['edges'][-1]['cursor'])

        self.assert_graphql_query_result(r"""
            query($after: String) {
                viewer {
                    allPosts(first: 2, after: $after) {
                        edges {
                            node {
                                title
                            }
                        }
                        pageInfo {
                            hasNextPage
                        }
                    }
                }
            }
        """, {
            'viewer': {
                'allPosts': {
                    'edges': [{'node': {'title': 'Other'}}],
                    'pageInfo': {'hasNextPage': False},
                },
            },
        }, variables={'after': conn['pageInfo']['endCursor']})

    def test_graphql_query_has_many(self):
        self.assert_graphql_query_result(r"""
            query($id: ID) {
                getUser(id: $id) {
                    name
                    posts {
                        edges {
                            node {
                                title
                            }
                        }
                    }
                }
            }
        """, {
            'getUser': {
                'name': 'Alice',
                'posts': {
                    'edges': [
                        {'node': {'title': 'Hello'}},
                        {'node': {'title': 'Second'}},
                    ],
                },
            },
        }, variables={'id': gid('User', '1')}, sort={
            'posts': {
                'edges': lambda e: e['node']['title'],
            },
        })

    def test_graphql_query_has_one(self):
        self.assert_graphql_query_result(r"""
            query {
                viewer {
                    allPosts(last: 1) {
                        edges {
                            node {
                                title
                                author {
                                    name
                                    posts(first: 1) {
                                        edges {
                                            node {
                                                title
                                            }
                                        }
                                    }
                                }
                            }
                        }
                    }
                }
            }
        """, {
            'viewer': {
                'allPosts': {
                    'edges': [{
                        'node': {
                            'title': 'Other',
                            'author': {
                                'name': 'Bob',
                                'posts': {
                                    'edges': [
                                        {'node': {'title': 'Other'}},
                                    ],
                                },
                            },
                        },
                    }],
                },
            },
        })

    def test_graphql_query_resolver_failure(self):
        # a failing collaborator errors its own field only
        res = self.schema.execute_sync(r"""
            query {
                viewer {
                    allUsers {
                        edges {
                            node {
                                name
                            }
                        }
                    }
                }
                getPost(id: "garbage!") {
                    id
                }
            }
        """, context=self.make_context())

        self.assertEqual(len(res.errors), 1)
        self.assertEqual(res.errors[0].path, ['getPost'])
        self.assertIsInstance(
            res.errors[0].original_error, errors.InvalidGlobalIdError)
        self.assertIsNone(res.data['getPost'])
        self.assertEqual(
            len(res.data['viewer']['allUsers']['edges']), 2)

    def test_graphql_query_default_context(self):
        res = self.schema.execute_sync(r"""
            query {
                node(id: "UG9zdDox") { id }
                viewer { id }
            }
        """)
        self.assertIsNone(res.errors)
        self.assertEqual(res.data, {
            'node': None,
            'viewer': {'id': gid('user', 'viewer')},
        })
