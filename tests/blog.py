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


"""Models of a small blog shared by the test suites."""


from relayschema import models as rs_models
from relayschema.graphql import context as g_context
from relayschema.graphql import registry
from relayschema.testbase import MemoryModel


P = rs_models.PropertyDescriptor


USER_SCHEMA = rs_models.ModelSchema(
    name='User',
    is_viewer=True,
    properties={
        'id': P.identifier(),
        'name': 'string',
        'posts': P.has_many('Post'),
    },
)

POST_SCHEMA = rs_models.ModelSchema(
    name='Post',
    properties={
        'id': P.identifier(),
        'title': 'string',
        'views': 'integer',
        'rating': 'float',
        'published': 'boolean',
        'meta': 'object',
        'tags': 'array',
        'authorId': P.foreign_key('User'),
        'author': P.has_one('User'),
    },
)


def make_models():
    users = MemoryModel(USER_SCHEMA, rows=[
        {'id': '1', 'name': 'Alice'},
        {'id': '2', 'name': 'Bob'},
    ])
    posts = MemoryModel(POST_SCHEMA, required=['title'], rows=[
        {'id': '1', 'title': 'Hello', 'views': 10, 'authorId': '1',
         'tags': ['intro'], 'meta': {'lang': 'en'}},
        {'id': '2', 'title': 'Second', 'views': 3, 'authorId': '1'},
        {'id': '3', 'title': 'Other', 'views': 0, 'authorId': '2'},
    ])
    return [posts, users]


def make_context(*models, config=None):
    """A compilation context with a placeholder for every model."""
    ctx = g_context.CompilationContext(
        config=config or g_context.CompilerConfig(),
        models=rs_models.ModelRegistry(models),
        types=registry.TypeRegistry(),
    )
    for model in models:
        ctx.types.create_placeholder(model.get_name())
    return ctx
