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
    Iterable,
    Mapping,
    Optional,
    Union,
)

import logging

from graphql import (
    ExecutionResult,
    GraphQLField,
    GraphQLID,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLResolveInfo,
    GraphQLSchema,
    graphql,
    graphql_sync,
    print_schema,
    validate_schema,
)

from relayschema import errors
from relayschema import models as rs_models
from relayschema import request
from relayschema.common import debug
from relayschema.common import string as rs_string

from . import connections
from . import context as g_context
from . import fields as g_fields
from . import mutations
from . import nodes
from . import registry
from . import types as g_types


logger = logging.getLogger('relayschema.graphql')


TOP_LEVEL_TYPES = ('Query', 'Mutation')


ModelsArg = Union[
    rs_models.ModelRegistry,
    Iterable[rs_models.ModelContract],
    Mapping[str, rs_models.ModelContract],
]


def _add_field(
    fields: Dict[str, GraphQLField],
    owner: str,
    name: str,
    field: GraphQLField,
) -> None:
    if name in fields:
        raise errors.DuplicateFieldError(
            f'field {name!r} of type {owner!r} is generated more than once')
    fields[name] = field


class CompiledSchema:

    _gql_schema: GraphQLSchema
    _ctx: g_context.CompilationContext

    def __init__(
        self,
        models: ModelsArg,
        *,
        config: Optional[g_context.CompilerConfig] = None,
    ) -> None:
        '''Compile a GraphQL schema out of the registered models.'''

        if config is None:
            config = g_context.CompilerConfig()

        if not isinstance(models, rs_models.ModelRegistry):
            models = rs_models.ModelRegistry(models)

        if not len(models):
            raise errors.NoModelsError(
                'cannot compile a schema without any models')

        self._ctx = ctx = g_context.CompilationContext(
            config=config,
            models=models,
            types=registry.TypeRegistry(),
        )

        if debug.flags.graphql_compile:
            debug.header('GraphQL Schema Compilation')

        for name in TOP_LEVEL_TYPES:
            ctx.types.reserve(name)

        ctx.nodes = nodes.NodeResolver(ctx)
        node_defs = nodes.make_node_definitions(ctx.nodes)
        ctx.node_interface = node_defs.node_interface
        ctx.node_field = node_defs.node_field
        ctx.types.add_type(ctx.node_interface)
        for gqltype in g_types.SHARED_TYPES.values():
            ctx.types.add_type(gqltype)

        self._define_placeholders()
        ctx.viewer_model = models.get_viewer_model()
        self._define_viewer()

        for model in models:
            ctx.types.fill_fields(
                model.get_name(), g_fields.compile_model_fields(ctx, model))
        logger.debug('filled the fields of %d model types', len(models))

        ctx.types.fill_fields(config.viewer_type_name, self._viewer_fields())

        query = GraphQLObjectType(
            name='Query',
            fields=self._query_fields(),
        )
        mutation = GraphQLObjectType(
            name='Mutation',
            fields=mutations.build_mutations(ctx),
        )

        try:
            self._gql_schema = GraphQLSchema(
                query=query,
                mutation=mutation,
                types=ctx.types.types(),
            )
        except TypeError as e:
            # graphql-core wraps exceptions raised by the field thunks
            if isinstance(e.__cause__, errors.RelaySchemaError):
                raise e.__cause__ from None
            raise

        problems = validate_schema(self._gql_schema)
        if problems:
            raise errors.InvalidSchemaError(
                'compiled schema is invalid: ' +
                '; '.join(p.message for p in problems))

        if debug.flags.graphql_compile:
            debug.dump_sdl(self._gql_schema)

        logger.info(
            'compiled GraphQL schema: %d models, %d types, viewer model: %s',
            len(models), len(ctx.types.types()),
            ctx.viewer_model.get_name() if ctx.viewer_model else None)

    def _implements_node(self, model: rs_models.ModelContract) -> bool:
        pdef = model.schema.properties.get(self._ctx.config.primary_key)
        return (
            pdef is not None
            and pdef.is_identifier
            and not pdef.is_foreign_key
        )

    def _define_placeholders(self) -> None:
        ctx = self._ctx
        assert ctx.node_interface is not None

        for model in ctx.models:
            interfaces = []
            if self._implements_node(model):
                interfaces.append(ctx.node_interface)
            ctx.types.create_placeholder(
                model.get_name(),
                interfaces=interfaces,
                description=model.schema.description,
            )

    def _define_viewer(self) -> None:
        ctx = self._ctx
        assert ctx.node_interface is not None

        interfaces = []
        if ctx.viewer_model is not None:
            interfaces.append(ctx.node_interface)

        ctx.viewer_type = ctx.types.create_placeholder(
            ctx.config.viewer_type_name,
            interfaces=interfaces,
            description='The root of everything visible to the viewer.',
        )

    def _viewer_fields(self) -> Dict[str, GraphQLField]:
        ctx = self._ctx
        config = ctx.config
        owner = config.viewer_type_name
        fields: Dict[str, GraphQLField] = {}

        viewer_model = ctx.viewer_model
        if viewer_model is not None:
            fields['id'] = GraphQLField(
                GraphQLNonNull(GraphQLID),
                resolve=lambda root, _info: nodes.to_global_id(
                    config.viewer_id_type, root.id),
            )

            target = ctx.types.resolve(viewer_model.get_name())

            def resolve_user(root: Any, info: GraphQLResolveInfo) -> Any:
                return viewer_model.resolve_singleton(
                    rs_models.ResolveParams(source=root, args={}, info=info))

            _add_field(
                fields, owner, config.viewer_model_field,
                GraphQLField(target, resolve=resolve_user))

        for model in ctx.models:
            _add_field(
                fields, owner, connections.list_field_name(model),
                connections.make_list_field(ctx, model))

        return fields

    def _make_get_field(
        self,
        model: rs_models.ModelContract,
    ) -> GraphQLField:
        target = self._ctx.types.resolve(model.get_name())

        def resolve(source: Any, info: GraphQLResolveInfo, **args: Any) -> Any:
            global_id = args.pop('id', None)
            local_id = None
            if global_id is not None:
                type_name, local_id = nodes.from_global_id(global_id)
                if debug.flags.graphql_nodes:
                    debug.print(
                        f'get{model.get_name()} {global_id!r} -> '
                        f'({type_name!r}, {local_id!r})')

            return model.resolve_one(
                rs_models.ResolveParams(
                    source=source,
                    args=args,
                    info=info,
                    id=local_id,
                )
            )

        return GraphQLField(
            target,
            args=model.get_item_arguments(),
            resolve=resolve,
        )

    def _query_fields(self) -> Dict[str, GraphQLField]:
        ctx = self._ctx
        assert ctx.node_field is not None

        fields: Dict[str, GraphQLField] = {
            'node': ctx.node_field,
        }

        for model in ctx.models:
            name = f'get{rs_string.capfirst(model.get_name())}'
            _add_field(fields, 'Query', name, self._make_get_field(model))

        _add_field(
            fields, 'Query', ctx.config.viewer_field_name,
            GraphQLField(
                ctx.viewer_type,
                resolve=lambda _root, info: ctx.make_viewer_root(info),
            )
        )

        return fields

    @property
    def graphql_schema(self) -> GraphQLSchema:
        return self._gql_schema

    @property
    def registry(self) -> registry.TypeRegistry:
        return self._ctx.types

    @property
    def models(self) -> rs_models.ModelRegistry:
        return self._ctx.models

    @property
    def viewer_model(self) -> Optional[rs_models.ModelContract]:
        return self._ctx.viewer_model

    @property
    def config(self) -> g_context.CompilerConfig:
        return self._ctx.config

    def print_schema(self) -> str:
        return print_schema(self._gql_schema)

    async def execute(
        self,
        source: str,
        *,
        variables: Optional[Dict[str, Any]] = None,
        context: Any = None,
        root_value: Any = None,
        operation_name: Optional[str] = None,
    ) -> ExecutionResult:
        if context is None:
            context = request.RequestContext()
        return await graphql(
            self._gql_schema,
            source,
            root_value=root_value,
            context_value=context,
            variable_values=variables,
            operation_name=operation_name,
        )

    def execute_sync(
        self,
        source: str,
        *,
        variables: Optional[Dict[str, Any]] = None,
        context: Any = None,
        root_value: Any = None,
        operation_name: Optional[str] = None,
    ) -> ExecutionResult:
        if context is None:
            context = request.RequestContext()
        return graphql_sync(
            self._gql_schema,
            source,
            root_value=root_value,
            context_value=context,
            variable_values=variables,
            operation_name=operation_name,
        )


def compile_schema(
    models: ModelsArg,
    *,
    config: Optional[g_context.CompilerConfig] = None,
) -> CompiledSchema:
    return CompiledSchema(models, config=config)
