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

import logging
import sys
import warnings


LOG_LEVELS = {
    'S': 'SILENT',
    'D': 'DEBUG',
    'I': 'INFO',
    'E': 'ERROR',
    'W': 'WARNING',
    'WARN': 'WARNING',
    'WARNING': 'WARNING',
    'ERROR': 'ERROR',
    'CRITICAL': 'CRITICAL',
    'INFO': 'INFO',
    'DEBUG': 'DEBUG',
    'SILENT': 'SILENT'
}

LOG_FORMAT = '{levelname} {asctime} {name}: {message}'


class RelaySchemaLogFormatter(logging.Formatter):

    default_time_format = '%Y-%m-%dT%H:%M:%S'
    default_msec_format = '%s.%03d'


IGNORE_DEPRECATIONS_IN = {
    'graphql',
}


def _make_handler(log_destination: str) -> logging.Handler:
    handler: logging.Handler
    if log_destination == 'stderr':
        handler = logging.StreamHandler(sys.stderr)
    elif log_destination == 'stdout':
        handler = logging.StreamHandler(sys.stdout)
    else:
        handler = logging.FileHandler(log_destination)

    handler.setFormatter(RelaySchemaLogFormatter(LOG_FORMAT, style='{'))
    return handler


def _drop_handlers(logger: logging.Logger) -> None:
    # Repeated setup replaces the handlers rather than stacking them.
    for handler in list(logger.handlers):
        if isinstance(handler.formatter, RelaySchemaLogFormatter):
            logger.removeHandler(handler)
            handler.close()


def setup_logging(log_level: str, log_destination: str = 'stderr') -> None:
    log_level = log_level.upper()
    try:
        log_level = LOG_LEVELS[log_level]
    except KeyError:
        raise RuntimeError('Invalid logging level {!r}'.format(log_level))

    logger = logging.getLogger('relayschema')
    _drop_handlers(logger)

    if log_level == 'SILENT':
        logger.disabled = True
        logger.setLevel(logging.CRITICAL)
        return

    logger.disabled = False
    logger.setLevel(log_level)
    logger.addHandler(_make_handler(log_destination))

    # Channel warnings into logging system
    logging.captureWarnings(True)

    # Show DeprecationWarnings by default ...
    warnings.simplefilter('default', category=DeprecationWarning)
    # ... except for some third-party modules.
    for ignored_module in IGNORE_DEPRECATIONS_IN:
        warnings.filterwarnings('ignore', category=DeprecationWarning,
                                module=ignored_module)
