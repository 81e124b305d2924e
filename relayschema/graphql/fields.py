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
from typing import Any, Callable, Dict, Optional

import logging

from graphql import (
    GraphQLField,
    GraphQLID,
    GraphQLInputField,
    GraphQLNonNull,
    GraphQLOutputType,
    GraphQLResolveInfo,
    GraphQLString,
    get_nullable_type,
)

from relayschema import models as rs_models

from . import connections
from . import context as g_context
from . import nodes
from . import types as g_types
from . import utils


logger = logging.getLogger('relayschema.graphql')


def _id_type_name(
    ctx: g_context.CompilationContext,
    owner: str,
    property_name: str,
    pdef: rs_models.PropertyDescriptor,
) -> str:
    if pdef.foreign_key_for is not None:
        if pdef.foreign_key_for not in ctx.models:
            logger.warning(
                '%s.%s is a foreign key for %r, which is not a '
                'registered model',
                owner, property_name, pdef.foreign_key_for)
        return pdef.foreign_key_for

    return ctx.id_type_name(owner)


def _global_id_resolver(
    type_name: str,
    property_name: str,
    custom: Optional[Callable[..., Any]],
) -> Callable[..., Any]:

    def encode(local_id: Any) -> Optional[str]:
        if local_id is None:
            return None
        return nodes.to_global_id(type_name, local_id)

    def resolve(source: Any, info: GraphQLResolveInfo, **args: Any) -> Any:
        if custom is not None:
            return utils.then(custom(source, info, **args), encode)
        return encode(utils.get_value(source, property_name))

    return resolve


def get_output_type(
    owner: str,
    property_name: str,
    pdef: rs_models.PropertyDescriptor,
    *,
    warn: bool = True,
) -> GraphQLOutputType:
    kind = pdef.known_kind

    if kind is rs_models.PropertyKind.ID:
        return GraphQLNonNull(GraphQLID)

    if kind is None:
        if warn:
            logger.warning(
                '%s.%s has an unknown kind %r, exposing it as a String',
                owner, property_name, pdef.kind)
        return GraphQLString

    return g_types.MODEL_TO_GQL_SCALARS_MAP[kind]


def compile_field(
    ctx: g_context.CompilationContext,
    property_name: str,
    pdef: rs_models.PropertyDescriptor,
    model: rs_models.ModelContract,
) -> GraphQLField:
    owner = model.get_name()
    target = get_output_type(owner, property_name, pdef)
    custom = model.schema.get_resolver(property_name)

    if pdef.is_identifier:
        type_name = _id_type_name(ctx, owner, property_name, pdef)
        return GraphQLField(
            target,
            description=pdef.description,
            resolve=_global_id_resolver(type_name, property_name, custom),
        )

    return GraphQLField(
        target,
        description=pdef.description,
        resolve=custom,
    )


def compile_input_field(
    property_name: str,
    pdef: rs_models.PropertyDescriptor,
    model: rs_models.ModelContract,
) -> GraphQLInputField:
    target = get_output_type(
        model.get_name(), property_name, pdef, warn=False)
    # Requiredness is left to the model's own validation.
    return GraphQLInputField(
        get_nullable_type(target),  # type: ignore
        description=pdef.description,
    )


def compile_model_fields(
    ctx: g_context.CompilationContext,
    model: rs_models.ModelContract,
) -> Dict[str, GraphQLField]:
    fields: Dict[str, GraphQLField] = {}
    owner = model.get_name()

    for pname, pdef in model.schema.properties.items():
        if pdef.is_relation:
            field = connections.compile_relation(ctx, owner, pname, pdef)
            if field is not None:
                fields[pname] = field
        else:
            fields[pname] = compile_field(ctx, pname, pdef, model)

    return fields
