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

from graphql import (
    GraphQLBoolean,
    GraphQLFloat,
    GraphQLID,
    GraphQLInt,
    GraphQLNonNull,
    GraphQLString,
)

from relayschema import models as rs_models
from relayschema.graphql import fields as g_fields
from relayschema.graphql import nodes
from relayschema.graphql import types as g_types
from relayschema.testbase import MemoryModel

from . import blog


P = rs_models.PropertyDescriptor


def model(name, **props):
    return MemoryModel(rs_models.ModelSchema(name=name, properties=props))


class FieldCompilerTests(unittest.TestCase):

    def setUp(self):
        self.posts, self.users = blog.make_models()
        self.ctx = blog.make_context(self.posts, self.users)

    def compile(self, pname, owner=None):
        owner = owner or self.posts
        return g_fields.compile_field(
            self.ctx, pname, owner.schema.properties[pname], owner)

    def test_graphql_fields_scalars(self):
        self.assertIs(self.compile('title').type, GraphQLString)
        self.assertIs(self.compile('views').type, GraphQLInt)
        self.assertIs(self.compile('rating').type, GraphQLFloat)
        self.assertIs(self.compile('published').type, GraphQLBoolean)
        self.assertIs(self.compile('meta').type, g_types.GraphQLJSON)
        self.assertIs(self.compile('tags').type, g_types.GraphQLJSON)

        field = self.compile('title')
        self.assertIsNone(field.resolve)

    def test_graphql_fields_own_id(self):
        field = self.compile('id')
        self.assertIsInstance(field.type, GraphQLNonNull)
        self.assertIs(field.type.of_type, GraphQLID)

        self.assertEqual(
            field.resolve({'id': '7'}, None),
            nodes.to_global_id('Post', '7'))
        self.assertIsNone(field.resolve({}, None))

        class Row:
            id = 12

        self.assertEqual(
            nodes.from_global_id(field.resolve(Row(), None)),
            ('Post', '12'))

    def test_graphql_fields_foreign_key(self):
        field = self.compile('authorId')
        self.assertIsInstance(field.type, GraphQLNonNull)
        self.assertEqual(
            nodes.from_global_id(field.resolve({'authorId': '1'}, None)),
            ('User', '1'))

    def test_graphql_fields_dangling_foreign_key(self):
        comment = model('Comment', postId=P.foreign_key('Article'))
        ctx = blog.make_context(comment)

        with self.assertLogs('relayschema.graphql', 'WARNING') as cm:
            field = g_fields.compile_field(
                ctx, 'postId', comment.schema.properties['postId'],
                comment)
        self.assertIn("'Article'", cm.output[0])

        self.assertEqual(
            nodes.from_global_id(field.resolve({'postId': '3'}, None)),
            ('Article', '3'))

    def test_graphql_fields_viewer_pseudo_model(self):
        viewer = model('viewer', id=P.identifier(), ownerId=P.identifier())
        ctx = blog.make_context(viewer)

        for pname in ('id', 'ownerId'):
            field = g_fields.compile_field(
                ctx, pname, viewer.schema.properties[pname], viewer)
            self.assertEqual(
                nodes.from_global_id(field.resolve({pname: '5'}, None)),
                ('user', '5'))

    def test_graphql_fields_unknown_kind(self):
        event = model('Event', when='date')
        ctx = blog.make_context(event)

        with self.assertLogs('relayschema.graphql', 'WARNING') as cm:
            field = g_fields.compile_field(
                ctx, 'when', event.schema.properties['when'], event)
        self.assertIs(field.type, GraphQLString)
        self.assertIn("Event.when has an unknown kind 'date'", cm.output[0])

    def test_graphql_fields_custom_resolver(self):
        def title(source, info):
            return source['title'].upper()

        def ident(source, info):
            return source['slug']

        article = MemoryModel(rs_models.ModelSchema(
            name='Article',
            properties={'id': P.identifier(), 'title': 'string'},
            resolvers={'title': title, 'id': ident},
        ))
        ctx = blog.make_context(article)
        props = article.schema.properties

        field = g_fields.compile_field(ctx, 'title', props['title'], article)
        self.assertIs(field.resolve, title)

        # custom id resolvers supply the local id, which is still encoded
        field = g_fields.compile_field(ctx, 'id', props['id'], article)
        self.assertEqual(
            field.resolve({'id': '1', 'slug': 'hello'}, None),
            nodes.to_global_id('Article', 'hello'))

    def test_graphql_fields_async_custom_id(self):
        async def ident(source, info):
            return source['pk']

        article = MemoryModel(rs_models.ModelSchema(
            name='Article',
            properties={'id': P.identifier()},
            resolvers={'id': ident},
        ))
        ctx = blog.make_context(article)
        field = g_fields.compile_field(
            ctx, 'id', article.schema.properties['id'], article)

        value = asyncio.run(field.resolve({'pk': 9}, None))
        self.assertEqual(value, nodes.to_global_id('Article', 9))

    def test_graphql_fields_input(self):
        props = self.posts.schema.properties

        field = g_fields.compile_input_field('id', props['id'], self.posts)
        self.assertIs(field.type, GraphQLID)

        field = g_fields.compile_input_field(
            'authorId', props['authorId'], self.posts)
        self.assertIs(field.type, GraphQLID)

        field = g_fields.compile_input_field(
            'title', props['title'], self.posts)
        self.assertIs(field.type, GraphQLString)

    def test_graphql_fields_input_unknown_kind(self):
        event = model('Event', when='date')
        field = g_fields.compile_input_field(
            'when', event.schema.properties['when'], event)
        self.assertIs(field.type, GraphQLString)

    def test_graphql_fields_model(self):
        fields = g_fields.compile_model_fields(self.ctx, self.posts)
        self.assertEqual(
            list(fields),
            ['id', 'title', 'views', 'rating', 'published', 'meta', 'tags',
             'authorId', 'author'])
        self.assertIs(fields['author'].type, self.ctx.types.resolve('User'))
