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
from typing import Any

import importlib
import logging

import click

from relayschema import errors
from relayschema import models as rs_models
from relayschema.graphql import compiler
from relayschema.tools.rs import relayschemacommands


logger = logging.getLogger('relayschema.tools')


def load_models(spec: str) -> Any:
    modname, sep, attr = spec.partition(':')
    if not sep or not modname or not attr:
        raise click.BadParameter(
            f'expected MODULE:ATTR, got {spec!r}', param_hint='MODELS')

    try:
        mod = importlib.import_module(modname)
    except ImportError as e:
        raise click.BadParameter(
            f'cannot import {modname!r}: {e}', param_hint='MODELS') from e

    try:
        models = getattr(mod, attr)
    except AttributeError:
        raise click.BadParameter(
            f'module {modname!r} has no attribute {attr!r}',
            param_hint='MODELS') from None

    # A factory returning the models is accepted as well.
    if callable(models) and not isinstance(models, rs_models.ModelRegistry):
        models = models()

    logger.debug('loaded models from %s', spec)
    return models


@relayschemacommands.command('print-schema')
@click.argument('models', metavar='MODULE:ATTR')
@click.option('-o', '--output', type=click.File('w'), default='-',
              help='write the SDL into this file instead of stdout')
def print_schema(models: str, output):
    """Compile the models found at MODULE:ATTR and print the SDL."""

    try:
        schema = compiler.compile_schema(load_models(models))
    except errors.RelaySchemaError as e:
        raise click.ClickException(f'{type(e).__name__}: {e}') from e

    click.echo(schema.print_schema(), file=output)
