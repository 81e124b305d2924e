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



import pytest

from relayschema.common import debug


def pytest_addoption(parser):
    parser.addoption(
        "--relayschema-debug", dest="relayschema_debug", action="append",
        help="enable debug flags, e.g. --relayschema-debug=graphql_compile")


def pytest_configure(config):
    sd = config.getvalue('relayschema_debug')
    if sd:
        names = []
        for d in sd:
            names.extend(d.split(","))

        for name in names:
            name = name.strip().lower()
            if not hasattr(debug.flags, name):
                raise pytest.UsageError(f'unknown debug flag: {name!r}')
            setattr(debug.flags, name, True)
