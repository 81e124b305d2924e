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


"""Global object identification.

A global id is the base64 encoding of ``"<type name>:<local id>"``.
Type names are GraphQL names and never contain a colon, so splitting on
the first one recovers the pair exactly.
"""


from __future__ import annotations
from typing import TYPE_CHECKING, Any, Optional, Tuple

import dataclasses
import logging

from graphql import (
    GraphQLAbstractType,
    GraphQLObjectType,
    GraphQLResolveInfo,
)
import graphql_relay as relay

from relayschema import errors
from relayschema import request
from relayschema.common import debug

if TYPE_CHECKING:
    from . import context as g_context


logger = logging.getLogger('relayschema.graphql')


def to_global_id(type_name: str, local_id: Any) -> str:
    return relay.to_global_id(type_name, str(local_id))


def from_global_id(global_id: str) -> Tuple[str, str]:
    if not isinstance(global_id, str):
        raise errors.InvalidGlobalIdError(
            f'{global_id!r} is not a valid global id')

    resolved = relay.from_global_id(global_id)
    # Undecodable input and a missing type name both come back with an
    # empty type.
    if not resolved.type:
        raise errors.InvalidGlobalIdError(
            f'{global_id!r} is not a valid global id')

    return resolved.type, resolved.id


@dataclasses.dataclass(frozen=True)
class ViewerRoot:
    """Source value of the viewer root object."""

    id: str


class NodeResolver:

    def __init__(self, ctx: g_context.CompilationContext) -> None:
        self._ctx = ctx

    def resolve_node(
        self,
        global_id: str,
        info: GraphQLResolveInfo,
    ) -> Any:
        type_name, local_id = from_global_id(global_id)

        loader = request.get_loader(info.context, type_name)
        if debug.flags.graphql_nodes:
            debug.print(
                f'node {global_id!r} -> ({type_name!r}, {local_id!r}), '
                f'loader: {loader!r}')

        if loader is None:
            # Unknown types are not an error, there's just nothing there.
            logger.debug('no loader for node type %r', type_name)
            return None

        load = getattr(loader, 'load', loader)
        return load(local_id)

    def resolve_type(self, entity: Any) -> Optional[GraphQLObjectType]:
        if isinstance(entity, ViewerRoot):
            return self._ctx.viewer_type

        name = self._ctx.config.entity_model_name(entity)
        return self._ctx.types.resolve(name)


def make_node_definitions(
    resolver: NodeResolver,
) -> relay.GraphQLNodeDefinitions:

    def _type_resolver(
        obj: Any,
        info: GraphQLResolveInfo,
        _t: GraphQLAbstractType,
    ) -> Optional[str]:
        gqltype = resolver.resolve_type(obj)
        return gqltype.name if gqltype is not None else None

    return relay.node_definitions(resolver.resolve_node, _type_resolver)
