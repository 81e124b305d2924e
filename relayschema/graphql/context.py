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
    Callable,
    Dict,
    Mapping,
    Optional,
)

import dataclasses

from graphql import (
    GraphQLField,
    GraphQLInterfaceType,
    GraphQLObjectType,
    GraphQLResolveInfo,
)

from relayschema import models as rs_models
from relayschema import request

from . import nodes
from . import registry


def default_entity_model_name(entity: Any) -> Optional[str]:
    if isinstance(entity, Mapping):
        name = entity.get('__typename')
    else:
        name = getattr(entity, '__model_name__', None)
    return name if isinstance(name, str) else None


@dataclasses.dataclass(frozen=True)
class CompilerConfig:

    # Name of the singleton root object type and of its Query field.
    viewer_type_name: str = 'Viewer'
    viewer_field_name: str = 'viewer'

    # Identifiers of a model with this name are encoded with
    # *viewer_id_type*, as are the ids of the viewer root itself.
    viewer_pseudo_model: str = 'viewer'
    viewer_id_type: str = 'user'

    # Name of the field of the viewer root exposing the viewer model.
    viewer_model_field: str = 'user'

    # Property treated as the server-assigned primary identifier.
    primary_key: str = 'id'

    # Maps a runtime entity to the name of its model, used to resolve
    # the concrete type of Node interface values.
    entity_model_name: Callable[[Any], Optional[str]] = \
        default_entity_model_name


@dataclasses.dataclass
class CompilationContext:
    """State threaded through every phase of a single compilation."""

    config: CompilerConfig
    models: rs_models.ModelRegistry
    types: registry.TypeRegistry
    viewer_model: Optional[rs_models.ModelContract] = None
    node_interface: Optional[GraphQLInterfaceType] = None
    node_field: Optional[GraphQLField] = None
    nodes: Optional[nodes.NodeResolver] = None
    viewer_type: Optional[GraphQLObjectType] = None
    # Connection type name -> the field it was generated for.
    connection_sources: Dict[str, str] = dataclasses.field(
        default_factory=dict)

    def id_type_name(self, owner: str) -> str:
        if owner == self.config.viewer_pseudo_model:
            return self.config.viewer_id_type
        return owner

    def make_viewer_root(self, info: GraphQLResolveInfo) -> nodes.ViewerRoot:
        viewer_id = request.get_viewer_id(info.context)
        if viewer_id is None:
            viewer_id = self.config.viewer_field_name
        return nodes.ViewerRoot(id=viewer_id)
