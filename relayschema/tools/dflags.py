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

from relayschema.common import debug
from relayschema.tools.rs import relayschemacommands


@relayschemacommands.command('dflags')
def dflags():
    """Print available debug flags."""

    for flag in debug.flags:
        print(f'env {debug.ENV_PREFIX}{flag.name.upper()}=1')
        print(f'    {flag.doc}\n')
