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


"""In-memory models for tests and examples.

A :class:`MemoryModel` keeps its entities as plain dicts tagged with a
``__typename`` key, which is what the default entity-to-model mapping
of the compiler reads.  Local ids are strings.
"""


from __future__ import annotations
from typing import (
    Any,
    Dict,
    Iterable,
    List,
    Mapping,
    Optional,
    Sequence,
)

import itertools

from graphql_relay import connection_from_array

from relayschema import errors
from relayschema import models as rs_models
from relayschema import request
from relayschema.graphql import nodes
from relayschema.graphql import utils as g_utils


def connection_from_list(
    items: Sequence[Any],
    args: Mapping[str, Any],
) -> Dict[str, Any]:
    """Slice *items* according to the relay pagination arguments.

    Edges and page info come back as plain dicts keyed by their GraphQL
    field names.
    """
    return connection_from_array(
        items,
        args,
        connection_type=dict,
        edge_type=dict,
        page_info_type=dict,
    )


def _error(field: str, message: str) -> Dict[str, Any]:
    return {'field': field, 'path': [field], 'message': message}


class MemoryModel(rs_models.Model):
    """A model backed by an ordered dict of entities.

    *required* names the properties a create mutation must supply.
    Identifier properties arrive as global ids in mutation input and are
    stored as local ids.
    """

    def __init__(
        self,
        schema: rs_models.ModelSchema,
        *,
        rows: Iterable[Mapping[str, Any]] = (),
        required: Sequence[str] = (),
    ) -> None:
        super().__init__(schema)
        self.required = tuple(required)
        self.rows: Dict[str, Dict[str, Any]] = {}
        self._ids = itertools.count(1)
        for row in rows:
            self.insert(row)

    def insert(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        row = dict(data)
        if row.get('id') is None:
            row['id'] = str(next(self._ids))
            while row['id'] in self.rows:
                row['id'] = str(next(self._ids))
        else:
            row['id'] = str(row['id'])
        row['__typename'] = self.get_name()
        self.rows[row['id']] = row
        return row

    def get(self, local_id: Optional[str]) -> Optional[Dict[str, Any]]:
        if local_id is None:
            return None
        return self.rows.get(str(local_id))

    def _decode_input(
        self,
        input: Mapping[str, Any],
    ) -> Dict[str, Any]:
        data = {}
        for pname, value in input.items():
            pdef = self.schema.properties.get(pname)
            if pdef is not None and pdef.is_identifier and value is not None:
                _, value = nodes.from_global_id(value)
            data[pname] = value
        return data

    def resolve_one(self, params: rs_models.ResolveParams) -> Any:
        if params.property_name is not None:
            # hasOne: the source holds the target id in "<property>Id"
            fk = g_utils.get_value(
                params.source, f'{params.property_name}Id')
            return self.get(fk)
        return self.get(params.id)

    def resolve_list(self, params: rs_models.ResolveParams) -> Any:
        return connection_from_list(list(self.rows.values()), params.args)

    def resolve_singleton(self, params: rs_models.ResolveParams) -> Any:
        return self.get(request.get_viewer_id(params.context))

    def resolve_related_list(self, params: rs_models.ResolveParams) -> Any:
        owner = params.info.parent_type.name
        owner_id = g_utils.get_value(params.source, 'id')
        keys = [
            pname for pname, pdef in self.schema.properties.items()
            if pdef.foreign_key_for == owner
        ]
        if not keys:
            raise errors.ResolutionError(
                f'{self.get_name()} has no foreign key for {owner}',
                model=self.get_name())

        related = [
            row for row in self.rows.values()
            if any(row.get(k) == owner_id for k in keys)
        ]
        return connection_from_list(related, params.args)

    def mutate_and_get_payload_create(self, input, info):
        data = self._decode_input(input)
        missing = [p for p in self.required if data.get(p) in (None, '')]
        if missing:
            return {
                'result': None,
                'errors': [_error(p, f'{p} is required') for p in missing],
            }
        data.pop('id', None)
        return {'result': self.insert(data), 'errors': []}

    def mutate_and_get_payload_update(self, input, info):
        data = self._decode_input(input)
        row = self.get(data.pop('id', None))
        if row is None:
            return {'result': None, 'errors': [_error('id', 'not found')]}

        errs: List[Dict[str, Any]] = [
            _error(p, f'{p} cannot be empty')
            for p in self.required
            if p in data and data[p] in (None, '')
        ]
        if errs:
            return {'result': None, 'errors': errs}

        row.update(data)
        return {'result': row, 'errors': []}

    def mutate_and_get_payload_remove(self, input, info):
        data = self._decode_input(input)
        row = self.rows.pop(str(data.get('id')), None)
        if row is None:
            return {'result': None, 'errors': [_error('id', 'not found')]}
        return {'result': row, 'errors': []}


class MemoryLoader:
    """Per-request loader reading entities out of a :class:`MemoryModel`.

    Keeps a record of requested keys, handy for asserting lookups.
    """

    def __init__(self, model: MemoryModel) -> None:
        self.model = model
        self.requested: List[str] = []

    def load(self, key: str) -> Optional[Dict[str, Any]]:
        self.requested.append(key)
        return self.model.get(key)


def make_request_context(
    models: Iterable[MemoryModel],
    *,
    viewer_id: Optional[str] = None,
) -> request.RequestContext:
    return request.RequestContext(
        loaders={m.get_name(): MemoryLoader(m) for m in models},
        viewer_id=viewer_id,
    )
