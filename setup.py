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



import pathlib

import setuptools


ROOT_PATH = pathlib.Path(__file__).parent.resolve()


RUNTIME_DEPS = [
    'graphql-core~=3.2.3',
    'graphql-relay~=3.2.0',
    'click~=8.1',
    'inflection~=0.5.1',
]

TEST_DEPS = [
    'pytest>=7.4',
]


def _get_version() -> str:
    init = (ROOT_PATH / 'relayschema' / '__init__.py').read_text()
    for line in init.splitlines():
        if line.startswith('__version__'):
            return line.split('=', 1)[1].strip().strip("'\"")
    raise RuntimeError('cannot determine the relayschema version')


setuptools.setup(
    name='relayschema',
    version=_get_version(),
    description=(
        'Compile declarative models into a Relay-style GraphQL schema'),
    license='Apache License, Version 2.0',
    python_requires='>=3.9',
    packages=setuptools.find_packages(
        include=['relayschema', 'relayschema.*']),
    include_package_data=True,
    install_requires=RUNTIME_DEPS,
    extras_require={
        'test': TEST_DEPS,
    },
    entry_points={
        'console_scripts': [
            'relayschema = relayschema.tools:relayschemacommands',
        ],
    },
)
