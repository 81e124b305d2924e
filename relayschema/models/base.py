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


from __future__ import annotations
from typing import (
    Any,
    Dict,
    List,
    Mapping,
    Optional,
    Protocol,
    Sequence,
    runtime_checkable,
)

import dataclasses

from graphql import (
    GraphQLArgument,
    GraphQLID,
    GraphQLInt,
    GraphQLResolveInfo,
    GraphQLString,
)

from . import descriptors


MUTATION_ACTIONS = ('create', 'update', 'remove')

MUTATE_HANDLER_PREFIX = 'mutate_and_get_payload_'


def mutate_handler_name(action: str) -> str:
    return f'{MUTATE_HANDLER_PREFIX}{action}'


# Every registered model must provide these.
REQUIRED_METHODS = (
    'get_name',
    'is_viewer',
    'get_list_arguments',
    'get_item_arguments',
    'resolve_one',
    'resolve_list',
    'resolve_singleton',
    'resolve_related_list',
) + tuple(mutate_handler_name(action) for action in MUTATION_ACTIONS)


@dataclasses.dataclass(frozen=True)
class ResolveParams:
    """Everything a model resolver gets to see about a field resolution.

    *id* is the already decoded local identifier (for item lookups and
    refetches after a mutation), *property* is the descriptor of the
    relation being followed, if any.
    """

    # Declared ahead of the fields, the "property" field shadows the
    # builtin for the rest of the class body.
    @property
    def context(self) -> Any:
        return self.info.context

    source: Any
    args: Mapping[str, Any]
    info: GraphQLResolveInfo
    id: Optional[str] = None
    property: Optional[descriptors.PropertyDescriptor] = None
    property_name: Optional[str] = None


@dataclasses.dataclass(frozen=True)
class MutationResult:
    """What a mutate handler reports back.

    *result* is None when the mutation failed, otherwise it must carry
    an identifier (an ``id`` key or attribute).  *errors* is a list of
    ``{"field": ..., "path": [...], "message": ...}`` records.
    """

    result: Any = None
    errors: Sequence[Mapping[str, Any]] = ()

    @classmethod
    def coerce(cls, value: Any) -> MutationResult:
        if isinstance(value, cls):
            return value
        elif value is None:
            return cls()
        elif isinstance(value, Mapping):
            return cls(
                result=value.get('result'),
                errors=list(value.get('errors') or ()),
            )
        else:
            return cls(
                result=getattr(value, 'result', None),
                errors=list(getattr(value, 'errors', None) or ()),
            )

    @property
    def result_id(self) -> Optional[Any]:
        result = self.result
        if result is None:
            return None
        elif isinstance(result, Mapping):
            return result.get('id')
        else:
            return getattr(result, 'id', None)


@runtime_checkable
class ModelContract(Protocol):

    schema: descriptors.ModelSchema

    def get_name(self) -> str:
        ...

    def is_viewer(self) -> bool:
        ...

    def get_list_arguments(self) -> Dict[str, GraphQLArgument]:
        ...

    def get_item_arguments(self) -> Dict[str, GraphQLArgument]:
        ...

    def resolve_one(self, params: ResolveParams) -> Any:
        ...

    def resolve_list(self, params: ResolveParams) -> Any:
        ...

    def resolve_singleton(self, params: ResolveParams) -> Any:
        ...

    def resolve_related_list(self, params: ResolveParams) -> Any:
        ...

    def mutate_and_get_payload_create(
        self,
        input: Dict[str, Any],
        info: GraphQLResolveInfo,
    ) -> Any:
        ...

    def mutate_and_get_payload_update(
        self,
        input: Dict[str, Any],
        info: GraphQLResolveInfo,
    ) -> Any:
        ...

    def mutate_and_get_payload_remove(
        self,
        input: Dict[str, Any],
        info: GraphQLResolveInfo,
    ) -> Any:
        ...


def connection_arguments() -> Dict[str, GraphQLArgument]:
    return {
        'first': GraphQLArgument(GraphQLInt),
        'last': GraphQLArgument(GraphQLInt),
        # before and after are supposed to be opaque values
        # serialized to string
        'before': GraphQLArgument(GraphQLString),
        'after': GraphQLArgument(GraphQLString),
    }


class Model:
    """Base class for model implementations.

    Subclasses set ``schema`` and implement the resolvers and mutate
    handlers they support; anything left out raises NotImplementedError
    when the corresponding GraphQL field is resolved.
    """

    schema: descriptors.ModelSchema

    def __init__(
        self,
        schema: Optional[descriptors.ModelSchema] = None,
    ) -> None:
        if schema is not None:
            self.schema = schema
        if getattr(self, 'schema', None) is None:
            raise TypeError(
                f'{type(self).__name__} has no model schema')

    def __repr__(self) -> str:
        name = getattr(self.schema, 'name', None)
        return f'<{type(self).__name__} {name!r}>'

    def get_name(self) -> str:
        return self.schema.name

    def is_viewer(self) -> bool:
        return self.schema.is_viewer

    def get_filter_arguments(self) -> Dict[str, GraphQLArgument]:
        return {}

    def get_list_arguments(self) -> Dict[str, GraphQLArgument]:
        args = connection_arguments()
        args.update(self.get_filter_arguments())
        return args

    def get_item_arguments(self) -> Dict[str, GraphQLArgument]:
        return {'id': GraphQLArgument(GraphQLID)}

    def _not_implemented(self, what: str) -> NotImplementedError:
        return NotImplementedError(
            f'{type(self).__name__} does not implement {what}')

    def resolve_one(self, params: ResolveParams) -> Any:
        raise self._not_implemented('resolve_one')

    def resolve_list(self, params: ResolveParams) -> Any:
        raise self._not_implemented('resolve_list')

    def resolve_singleton(self, params: ResolveParams) -> Any:
        raise self._not_implemented('resolve_singleton')

    def resolve_related_list(self, params: ResolveParams) -> Any:
        raise self._not_implemented('resolve_related_list')

    def mutate_and_get_payload_create(
        self,
        input: Dict[str, Any],
        info: GraphQLResolveInfo,
    ) -> Any:
        raise self._not_implemented('create mutations')

    def mutate_and_get_payload_update(
        self,
        input: Dict[str, Any],
        info: GraphQLResolveInfo,
    ) -> Any:
        raise self._not_implemented('update mutations')

    def mutate_and_get_payload_remove(
        self,
        input: Dict[str, Any],
        info: GraphQLResolveInfo,
    ) -> Any:
        raise self._not_implemented('remove mutations')


def missing_methods(model: Any) -> List[str]:
    return [
        name for name in REQUIRED_METHODS
        if not callable(getattr(model, name, None))
    ]
