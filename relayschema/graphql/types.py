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


"""GraphQL types shared by every compiled schema."""


from __future__ import annotations
from typing import Any, Dict, List, Mapping, Optional

from graphql import (
    GraphQLBoolean,
    GraphQLField,
    GraphQLFloat,
    GraphQLID,
    GraphQLInt,
    GraphQLList,
    GraphQLNamedType,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLResolveInfo,
    GraphQLScalarType,
    GraphQLString,
)

from relayschema.models import PropertyKind


GraphQLJSON = GraphQLScalarType(
    name="JSON",
    description="The `JSON` scalar type represents arbitrary JSON values.",
)


MODEL_TO_GQL_SCALARS_MAP = {
    PropertyKind.STRING: GraphQLString,
    PropertyKind.BOOLEAN: GraphQLBoolean,
    PropertyKind.INTEGER: GraphQLInt,
    PropertyKind.FLOAT: GraphQLFloat,
    # Structured values are opaque to the schema.
    PropertyKind.OBJECT: GraphQLJSON,
    PropertyKind.ARRAY: GraphQLJSON,
    PropertyKind.ID: GraphQLID,
}


PageInfo = GraphQLObjectType(
    name='PageInfo',
    description='Information about pagination in a connection.',
    fields=lambda: {
        'hasNextPage': GraphQLField(
            GraphQLNonNull(GraphQLBoolean),
            description='When paginating forwards, are there more items?',
        ),
        'hasPreviousPage': GraphQLField(
            GraphQLNonNull(GraphQLBoolean),
            description='When paginating backwards, are there more items?',
        ),
        'startCursor': GraphQLField(
            GraphQLString,
            description='When paginating backwards, the cursor to continue.',
        ),
        'endCursor': GraphQLField(
            GraphQLString,
            description='When paginating forwards, the cursor to continue.',
        ),
    },
)


def _get(obj: Any, key: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(key)
    return getattr(obj, key, None)


def _resolve_error_path(
    error: Any,
    _info: GraphQLResolveInfo,
) -> Optional[List[str]]:
    path = _get(error, 'path')
    if path is not None:
        return [str(p) for p in path]
    field = _get(error, 'field')
    if field is not None:
        return [str(field)]
    return None


MutationError = GraphQLObjectType(
    name='MutationError',
    description='A validation error reported by a mutation.',
    fields=lambda: {
        'field': GraphQLField(
            GraphQLString,
            resolve=lambda error, _info: _get(error, 'field'),
        ),
        'path': GraphQLField(
            GraphQLList(GraphQLNonNull(GraphQLString)),
            resolve=_resolve_error_path,
        ),
        'message': GraphQLField(
            GraphQLNonNull(GraphQLString),
            resolve=lambda error, _info: _get(error, 'message'),
        ),
    },
)


SHARED_TYPES: Dict[str, GraphQLNamedType] = {
    t.name: t for t in (GraphQLJSON, PageInfo, MutationError)
}
