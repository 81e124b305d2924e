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
from typing import Any, Dict, List, Optional

import unittest

from relayschema import request
from relayschema.graphql import compiler

from . import memory


def sort_results(results: Any, sort: Any) -> None:
    if sort is True:
        sort = lambda x: x
    # don't bother sorting empty things
    if results:
        # sort can be either a key function or a dict
        if isinstance(sort, dict):
            # the keys in the dict indicate the fields that
            # actually must be sorted
            for key, val in sort.items():
                # '.' is a special key referring to the base object
                if key == '.':
                    sort_results(results, val)
                elif isinstance(results, list):
                    for r in results:
                        sort_results(r[key], val)
                else:
                    sort_results(results[key], val)
        else:
            results.sort(key=sort)


class GraphQLTestCase(unittest.TestCase):
    """Runs queries against a schema compiled from in-memory models.

    Subclasses implement :meth:`get_models`; every test gets freshly
    built models, so mutations never leak between tests.
    """

    VIEWER_ID: Optional[str] = None

    models: List[memory.MemoryModel]
    schema: compiler.CompiledSchema

    def get_models(self) -> List[memory.MemoryModel]:
        raise NotImplementedError

    def setUp(self) -> None:
        super().setUp()
        self.models = self.get_models()
        self.schema = compiler.compile_schema(self.models)

    def make_context(self) -> request.RequestContext:
        return memory.make_request_context(
            self.models, viewer_id=self.VIEWER_ID)

    def get_model(self, name: str) -> memory.MemoryModel:
        for model in self.models:
            if model.get_name() == name:
                return model
        raise LookupError(name)

    def graphql_query(
        self,
        query: str,
        *,
        operation_name: Optional[str] = None,
        variables: Optional[Dict[str, Any]] = None,
        context: Any = None,
    ) -> Dict[str, Any]:
        if context is None:
            context = self.make_context()

        res = self.schema.execute_sync(
            query,
            variables=variables,
            context=context,
            operation_name=operation_name,
        )

        if res.errors:
            err = res.errors[0]
            if err.original_error is not None:
                raise err.original_error
            raise AssertionError(
                f'query failed: {err.message}\n  Query: {query}')

        assert res.data is not None
        return res.data

    def assert_graphql_query_result(
        self,
        query: str,
        result: Any,
        *,
        msg: Optional[str] = None,
        sort: Any = None,
        operation_name: Optional[str] = None,
        variables: Optional[Dict[str, Any]] = None,
        context: Any = None,
    ) -> Dict[str, Any]:
        res = self.graphql_query(
            query,
            operation_name=operation_name,
            variables=variables,
            context=context,
        )

        if sort is not None:
            # The data is in the top-level fields, so that's what
            # needs to be sorted.
            for r in res.values():
                sort_results(r, sort)

        self.assertEqual(res, result, msg)
        return res
