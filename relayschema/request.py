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


"""Per-request state read by the generated resolvers.

The compiled schema never holds on to loaders; every lookup reads them
from the execution context, so one fresh set of loaders per request
(usually built by the transport layer) scopes batching and caching to
that request.  Any object with ``loaders`` / ``viewer_id`` attributes
or a mapping with those keys can serve as the context.
"""


from __future__ import annotations
from typing import Any, Mapping, Optional, Protocol

import dataclasses


class Loader(Protocol):

    def load(self, key: str) -> Any:
        ...


@dataclasses.dataclass
class RequestContext:

    loaders: Mapping[str, Loader] = dataclasses.field(default_factory=dict)
    viewer_id: Optional[str] = None


def _lookup(context: Any, name: str) -> Any:
    if context is None:
        return None
    elif isinstance(context, Mapping):
        return context.get(name)
    else:
        return getattr(context, name, None)


def get_loaders(context: Any) -> Optional[Mapping[str, Loader]]:
    return _lookup(context, 'loaders')


def get_loader(context: Any, type_name: str) -> Optional[Loader]:
    loaders = get_loaders(context)
    if not loaders:
        return None
    return loaders.get(type_name)


def get_viewer_id(context: Any) -> Optional[str]:
    viewer_id = _lookup(context, 'viewer_id')
    return None if viewer_id is None else str(viewer_id)
