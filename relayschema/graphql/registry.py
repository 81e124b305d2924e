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


'''
Every model is reflected as a GraphQL object type, and any of those may
refer to any other (or to itself) through its fields.  There is no order
in which the types could be built eagerly, so the registry first creates
all of them as placeholders whose fields come from a thunk, and the
compiler fills the field maps in afterwards.  graphql-core only evaluates
the thunks once the schema is being assembled, by which point every
placeholder has been filled.
'''


from __future__ import annotations
from typing import (
    Dict,
    List,
    Optional,
    Sequence,
    Set,
)

from functools import partial
import logging

from graphql import (
    GraphQLField,
    GraphQLInterfaceType,
    GraphQLNamedType,
    GraphQLObjectType,
)

from relayschema import errors


logger = logging.getLogger('relayschema.graphql')


class TypeRegistry:

    _types: Dict[str, GraphQLNamedType]
    _placeholders: Dict[str, GraphQLObjectType]
    _fields: Dict[str, Dict[str, GraphQLField]]
    _reserved: Set[str]

    def __init__(self) -> None:
        self._types = {}
        self._placeholders = {}
        self._fields = {}
        self._reserved = set()

    def _check_name(self, name: str) -> None:
        if name in self._types or name in self._reserved:
            raise errors.DuplicateTypeNameError(
                f'GraphQL type {name!r} is defined more than once')

    def reserve(self, name: str) -> None:
        """Claim a type name that is not kept in the registry."""
        self._check_name(name)
        self._reserved.add(name)

    def add_type(self, gqltype: GraphQLNamedType) -> GraphQLNamedType:
        self._check_name(gqltype.name)
        self._types[gqltype.name] = gqltype
        return gqltype

    def create_placeholder(
        self,
        name: str,
        *,
        interfaces: Sequence[GraphQLInterfaceType] = (),
        description: Optional[str] = None,
    ) -> GraphQLObjectType:
        gqltype = GraphQLObjectType(
            name=name,
            fields=partial(self.get_fields, name),
            interfaces=list(interfaces),
            description=description,
        )
        self.add_type(gqltype)
        self._placeholders[name] = gqltype
        logger.debug('created placeholder type %r', name)
        return gqltype

    def fill_fields(
        self,
        name: str,
        fields: Dict[str, GraphQLField],
    ) -> None:
        if name not in self._placeholders:
            raise errors.UnresolvedReferenceError(
                f'there is no placeholder type {name!r} to fill')
        if name in self._fields:
            raise errors.FieldsAlreadyFilledError(
                f'fields of type {name!r} have already been filled')
        self._fields[name] = dict(fields)

    def is_filled(self, name: str) -> bool:
        return name in self._fields

    def get_fields(self, name: str) -> Dict[str, GraphQLField]:
        try:
            return self._fields[name]
        except KeyError:
            raise errors.FieldsNotFilledError(
                f'fields of type {name!r} were requested before '
                f'they were filled') from None

    def resolve(self, name: Optional[str]) -> Optional[GraphQLObjectType]:
        if name is None:
            return None
        return self._placeholders.get(name)

    def get(self, name: str) -> Optional[GraphQLNamedType]:
        return self._types.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def types(self) -> List[GraphQLNamedType]:
        # a sorted list keeps the schema type order stable
        return sorted(self._types.values(), key=lambda t: t.name)
