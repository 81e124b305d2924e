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
from typing import Any, Callable, Mapping

import inspect


def then(value: Any, fn: Callable[[Any], Any]) -> Any:
    """Apply *fn* to *value*, awaiting it first if it is awaitable.

    Model collaborators may be synchronous or asynchronous; the
    generated resolvers stay synchronous whenever the collaborator is.
    """
    if inspect.isawaitable(value):
        async def _await_then() -> Any:
            return fn(await value)
        return _await_then()

    return fn(value)


def get_value(source: Any, name: str) -> Any:
    if isinstance(source, Mapping):
        return source.get(name)
    return getattr(source, name, None)
