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
from typing import Any, NamedTuple, Optional, Tuple

import logging

from graphql import (
    GraphQLField,
    GraphQLList,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLResolveInfo,
    GraphQLString,
)

from relayschema import errors
from relayschema import models as rs_models
from relayschema.common import string as rs_string

from . import context as g_context
from . import types as g_types


logger = logging.getLogger('relayschema.graphql')


class Connection(NamedTuple):

    edge: GraphQLObjectType
    connection: GraphQLObjectType


def connection_type_names(
    owner_context: str,
    element_name: str,
) -> Tuple[str, str]:
    # The owner context keeps two relations targeting the same type
    # from producing the same type names.
    prefix = f'{owner_context}_{element_name}'
    return f'{prefix}Edge', f'{prefix}Connection'


def relation_owner_context(owner: str, property_name: str) -> str:
    return f'{owner}_{property_name}'


def _register(
    ctx: g_context.CompilationContext,
    gqltype: GraphQLObjectType,
    source: str,
) -> None:
    try:
        ctx.types.add_type(gqltype)
    except errors.DuplicateTypeNameError as e:
        other = ctx.connection_sources.get(gqltype.name)
        if other is None:
            raise errors.DuplicateTypeNameError(
                f'connection type {gqltype.name!r} of {source} clashes '
                f'with another type') from e
        raise errors.DuplicateTypeNameError(
            f'connection type {gqltype.name!r} of {source} clashes '
            f'with the one of {other}',
            hint='rename one of the two relations') from e
    ctx.connection_sources[gqltype.name] = source


def wrap_as_connection(
    ctx: g_context.CompilationContext,
    element_type: GraphQLObjectType,
    owner_context: str,
    *,
    source: Optional[str] = None,
) -> Connection:
    edge_name, conn_name = connection_type_names(
        owner_context, element_type.name)
    if source is None:
        source = owner_context

    edge = GraphQLObjectType(
        name=edge_name,
        description=f'An edge in a connection of {element_type.name}.',
        fields=lambda: {
            'cursor': GraphQLField(GraphQLNonNull(GraphQLString)),
            'node': GraphQLField(element_type),
        },
    )

    connection = GraphQLObjectType(
        name=conn_name,
        description=f'A connection to a list of {element_type.name}.',
        fields=lambda: {
            'edges': GraphQLField(GraphQLList(edge)),
            'pageInfo': GraphQLField(g_types.PageInfo),
        },
    )

    _register(ctx, edge, source)
    _register(ctx, connection, source)
    logger.debug('created connection %r', conn_name)

    return Connection(edge=edge, connection=connection)


def _get_ref(
    ctx: g_context.CompilationContext,
    owner: str,
    property_name: str,
    pdef: rs_models.PropertyDescriptor,
) -> Tuple[rs_models.ModelContract, GraphQLObjectType]:
    assert pdef.ref is not None
    model = ctx.models.get(pdef.ref)
    target = ctx.types.resolve(pdef.ref)
    if model is None or target is None:
        raise errors.UnresolvedReferenceError(
            f'{owner}.{property_name} refers to an unknown model '
            f'{pdef.ref!r}',
            model=owner)
    return model, target


def make_list_field(
    ctx: g_context.CompilationContext,
    model: rs_models.ModelContract,
) -> GraphQLField:
    """A connection of all entities of *model*, hung off the viewer root."""
    element = ctx.types.resolve(model.get_name())
    assert element is not None
    conn = wrap_as_connection(
        ctx, element, ctx.config.viewer_field_name,
        source=f'{ctx.config.viewer_type_name}.{list_field_name(model)}')

    def resolve(source: Any, info: GraphQLResolveInfo, **args: Any) -> Any:
        return model.resolve_list(
            rs_models.ResolveParams(source=source, args=args, info=info))

    return GraphQLField(
        conn.connection,
        args=model.get_list_arguments(),
        resolve=resolve,
    )


def list_field_name(model: rs_models.ModelContract) -> str:
    name = model.get_name()
    return f'all{rs_string.capfirst(rs_string.pluralize(name))}'


def compile_relation(
    ctx: g_context.CompilationContext,
    owner: str,
    property_name: str,
    pdef: rs_models.PropertyDescriptor,
) -> Optional[GraphQLField]:
    model, target = _get_ref(ctx, owner, property_name, pdef)
    description = pdef.description

    if pdef.relation is rs_models.Relation.HAS_MANY:
        conn = wrap_as_connection(
            ctx, target, relation_owner_context(owner, property_name),
            source=f'{owner}.{property_name}')

        def resolve_many(
            source: Any,
            info: GraphQLResolveInfo,
            **args: Any,
        ) -> Any:
            return model.resolve_related_list(
                rs_models.ResolveParams(
                    source=source,
                    args=args,
                    info=info,
                    property=pdef,
                    property_name=property_name,
                )
            )

        return GraphQLField(
            conn.connection,
            args=model.get_list_arguments(),
            resolve=resolve_many,
            description=description,
        )

    elif pdef.relation is rs_models.Relation.HAS_ONE:

        def resolve_one(source: Any, info: GraphQLResolveInfo) -> Any:
            return model.resolve_one(
                rs_models.ResolveParams(
                    source=source,
                    args={},
                    info=info,
                    property=pdef,
                    property_name=property_name,
                )
            )

        return GraphQLField(
            target,
            resolve=resolve_one,
            description=description,
        )

    else:
        return None
