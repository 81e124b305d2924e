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
Every model gets a create, update and remove mutation.  They follow the
Relay mutation shape: a single ``input`` argument of an input object
type, a payload object type as the result, and a ``clientMutationId``
passed through from the input to the payload.

The compiler only wires things up.  Validation and persistence are the
job of the model's ``mutate_and_get_payload_<action>`` handler, which
reports back the affected entity and a list of validation errors.
'''


from __future__ import annotations
from typing import Any, Dict, List, Mapping, Optional

import dataclasses
import logging

from graphql import (
    GraphQLArgument,
    GraphQLField,
    GraphQLInputField,
    GraphQLInputObjectType,
    GraphQLList,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLResolveInfo,
    GraphQLString,
)

from relayschema import errors
from relayschema import models as rs_models
from relayschema.common import debug
from relayschema.common import string as rs_string

from . import context as g_context
from . import fields as g_fields
from . import types as g_types
from . import utils


logger = logging.getLogger('relayschema.graphql')


CLIENT_MUTATION_ID = 'clientMutationId'


@dataclasses.dataclass(frozen=True)
class MutationPayload:

    result: Any
    errors: List[Mapping[str, Any]]
    client_mutation_id: Optional[str]
    result_id: Optional[Any]


def mutation_name(action: str, model: rs_models.ModelContract) -> str:
    return rs_string.capfirst(
        action + rs_string.capfirst(model.get_name()))


def entity_field_name(model: rs_models.ModelContract) -> str:
    return rs_string.lowerfirst(model.get_name())


def get_input_fields(
    ctx: g_context.CompilationContext,
    action: str,
    model: rs_models.ModelContract,
) -> Dict[str, GraphQLInputField]:
    fields = {
        pname: g_fields.compile_input_field(pname, pdef, model)
        for pname, pdef in model.schema.scalar_properties()
    }

    if action == 'create':
        # The primary identifier is assigned by the server.
        fields.pop(ctx.config.primary_key, None)

    fields[CLIENT_MUTATION_ID] = GraphQLInputField(GraphQLString)
    return fields


def _resolve_entity(model: rs_models.ModelContract):

    def resolve(payload: MutationPayload, info: GraphQLResolveInfo) -> Any:
        if payload.result is None or payload.result_id in (None, ''):
            return None

        return model.resolve_one(
            rs_models.ResolveParams(
                source=payload,
                args={},
                info=info,
                id=str(payload.result_id),
            )
        )

    return resolve


def _resolve_removed_id(
    payload: MutationPayload,
    _info: GraphQLResolveInfo,
) -> Optional[str]:
    if payload.result_id is None:
        return None
    return str(payload.result_id)


def get_output_fields(
    ctx: g_context.CompilationContext,
    action: str,
    model: rs_models.ModelContract,
) -> Dict[str, GraphQLField]:
    fields = {
        'errors': GraphQLField(
            GraphQLNonNull(GraphQLList(GraphQLNonNull(g_types.MutationError))),
            resolve=lambda payload, _info: payload.errors,
        ),
    }

    if action == 'remove':
        fields['removedId'] = GraphQLField(
            GraphQLString,
            resolve=_resolve_removed_id,
        )
    else:
        target = ctx.types.resolve(model.get_name())
        assert target is not None
        fields[entity_field_name(model)] = GraphQLField(
            target,
            resolve=_resolve_entity(model),
        )

    if ctx.viewer_type is not None:
        fields[ctx.config.viewer_field_name] = GraphQLField(
            ctx.viewer_type,
            resolve=lambda _payload, info: ctx.make_viewer_root(info),
        )

    fields[CLIENT_MUTATION_ID] = GraphQLField(
        GraphQLString,
        resolve=lambda payload, _info: payload.client_mutation_id,
    )

    return fields


def _mutate_resolver(action: str, model: rs_models.ModelContract):
    handler = getattr(model, rs_models.mutate_handler_name(action))
    name = mutation_name(action, model)

    def mutate(
        _root: Any,
        info: GraphQLResolveInfo,
        input: Dict[str, Any],
    ) -> Any:
        data = dict(input)
        client_mutation_id = data.pop(CLIENT_MUTATION_ID, None)

        if debug.flags.graphql_mutations:
            debug.header(f'Mutation {name}')
            debug.print(data)

        def make_payload(value: Any) -> MutationPayload:
            outcome = rs_models.MutationResult.coerce(value)
            if debug.flags.graphql_mutations:
                debug.print(f'{name} -> {outcome!r}')
            return MutationPayload(
                result=outcome.result,
                errors=list(outcome.errors),
                client_mutation_id=client_mutation_id,
                result_id=outcome.result_id,
            )

        return utils.then(handler(data, info), make_payload)

    return mutate


def build_crud_mutation(
    ctx: g_context.CompilationContext,
    action: str,
    model: rs_models.ModelContract,
) -> GraphQLField:
    name = mutation_name(action, model)

    input_type = GraphQLInputObjectType(
        name=f'{name}Input',
        fields=get_input_fields(ctx, action, model),
    )
    payload_type = GraphQLObjectType(
        name=f'{name}Payload',
        fields=get_output_fields(ctx, action, model),
    )

    for gqltype in (input_type, payload_type):
        try:
            ctx.types.add_type(gqltype)
        except errors.DuplicateTypeNameError as e:
            raise errors.DuplicateMutationNameError(
                f'mutation {name!r} of model {model.get_name()!r} '
                f'clashes with another type: {e}',
                model=model.get_name(),
            ) from e

    logger.debug('built mutation %r', name)

    return GraphQLField(
        payload_type,
        args={
            'input': GraphQLArgument(GraphQLNonNull(input_type)),
        },
        resolve=_mutate_resolver(action, model),
    )


def build_mutations(
    ctx: g_context.CompilationContext,
) -> Dict[str, GraphQLField]:
    fields: Dict[str, GraphQLField] = {}

    for model in ctx.models:
        for action in rs_models.MUTATION_ACTIONS:
            name = mutation_name(action, model)
            if name in fields:
                raise errors.DuplicateMutationNameError(
                    f'mutation {name!r} is generated for more than '
                    f'one model',
                    model=model.get_name())
            fields[name] = build_crud_mutation(ctx, action, model)

    return fields
