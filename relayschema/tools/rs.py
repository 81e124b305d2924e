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

import click

from relayschema.common import logsetup


@click.group(
    context_settings=dict(help_option_names=['-h', '--help']))
@click.option('-l', '--log-level',
              type=click.Choice(sorted(logsetup.LOG_LEVELS),
                                case_sensitive=False),
              default='warn',
              help='logging level for the compiler')
@click.pass_context
def relayschemacommands(ctx, log_level: str):
    logsetup.setup_logging(log_level)


# Import at the end of the file so that
# "relayschema.tools.rs.relayschemacommands" is defined for all of the
# below modules when they try to import it.
from . import dflags  # noqa
from . import print_schema  # noqa
