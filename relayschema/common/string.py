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

import re

import inflection


_GQL_NAME_RE = re.compile(r'^[_A-Za-z][_0-9A-Za-z]*$')


def capfirst(s: str) -> str:
    # Unlike str.capitalize() the tail of the string is left alone,
    # so "blogPost" becomes "BlogPost".
    return s[:1].upper() + s[1:]


def lowerfirst(s: str) -> str:
    return s[:1].lower() + s[1:]


def pluralize(s: str) -> str:
    return inflection.pluralize(s)


def is_valid_name(s: str) -> bool:
    return bool(_GQL_NAME_RE.match(s)) and not s.startswith('__')
