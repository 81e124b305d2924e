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



import asyncio
import unittest

from relayschema import models as rs_models
from relayschema import request
from relayschema.graphql import compiler
from relayschema.graphql import nodes
from relayschema.testbase import MemoryModel, connection_from_list

from . import blog


class AsyncPosts(MemoryModel):

    async def resolve_one(self, params):
        await asyncio.sleep(0)
        return super().resolve_one(params)

    async def resolve_list(self, params):
        await asyncio.sleep(0)
        return connection_from_list(list(self.rows.values()), params.args)

    async def mutate_and_get_payload_create(self, input, info):
        await asyncio.sleep(0)
        return super().mutate_and_get_payload_create(input, info)


class AsyncLoader:

    def __init__(self, model):
        self.model = model

    async def load(self, key):
        await asyncio.sleep(0)
        return self.model.get(key)


class TestAsyncExecution(unittest.IsolatedAsyncioTestCase):

    def setUp(self):
        posts, self.users = blog.make_models()
        self.posts = AsyncPosts(posts.schema, rows=posts.rows.values())
        self.schema = compiler.compile_schema([self.posts, self.users])
        self.context = request.RequestContext(
            loaders={'Post': AsyncLoader(self.posts)},
            viewer_id='1',
        )

    async def test_graphql_async_query(self):
        res = await self.schema.execute(r"""
            query($id: ID!) {
                node(id: $id) {
                    ... on Post {
                        title
                    }
                }
                getPost(id: $id) {
                    title
                }
                viewer {
                    allPosts(first: 1) {
                        edges {
                            node {
                                title
                            }
                        }
                    }
                }
            }
        """, variables={'id': nodes.to_global_id('Post', '2')},
            context=self.context)

        self.assertIsNone(res.errors)
        self.assertEqual(res.data, {
            'node': {'title': 'Second'},
            'getPost': {'title': 'Second'},
            'viewer': {
                'allPosts': {
                    'edges': [{'node': {'title': 'Hello'}}],
                },
            },
        })

    async def test_graphql_async_mutation(self):
        res = await self.schema.execute(r"""
            mutation {
                CreatePost(input: {title: "Async", clientMutationId: "a"}) {
                    errors {
                        message
                    }
                    post {
                        id
                        title
                    }
                    clientMutationId
                }
            }
        """, context=self.context)

        self.assertIsNone(res.errors)
        self.assertEqual(res.data, {
            'CreatePost': {
                'errors': [],
                'post': {
                    'id': nodes.to_global_id('Post', '4'),
                    'title': 'Async',
                },
                'clientMutationId': 'a',
            },
        })

    async def test_graphql_async_custom_id_resolver(self):
        async def ident(source, info):
            await asyncio.sleep(0)
            return source['slug']

        articles = MemoryModel(
            rs_models.ModelSchema(
                name='Article',
                properties={
                    'id': rs_models.PropertyDescriptor.identifier(),
                    'slug': 'string',
                },
                resolvers={'id': ident},
            ),
            rows=[{'id': '1', 'slug': 'hello-world'}],
        )
        schema = compiler.compile_schema([articles])

        res = await schema.execute(r"""
            query {
                getArticle(id: "QXJ0aWNsZTox") {
                    id
                }
            }
        """)
        self.assertIsNone(res.errors)
        self.assertEqual(
            res.data['getArticle']['id'],
            nodes.to_global_id('Article', 'hello-world'))
