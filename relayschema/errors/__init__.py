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

# flake8: noqa


from __future__ import annotations

from .base import *


__all__ = base.__all__ + (  # type: ignore
    'InternalError',
    'ConfigurationError',
    'InvalidPropertyError',
    'ModelContractError',
    'DuplicateModelError',
    'NoModelsError',
    'ViewerConflictError',
    'UnresolvedReferenceError',
    'DuplicateTypeNameError',
    'DuplicateMutationNameError',
    'DuplicateFieldError',
    'InvalidSchemaError',
    'FieldsAlreadyFilledError',
    'FieldsNotFilledError',
    'ResolutionError',
    'InvalidGlobalIdError',
)


class InternalError(RelaySchemaError):
    _code = 0x_01_00_00_00


class ConfigurationError(RelaySchemaError):
    _code = 0x_02_00_00_00


class InvalidPropertyError(ConfigurationError):
    _code = 0x_02_01_00_00


class ModelContractError(ConfigurationError):
    _code = 0x_02_02_00_00


class DuplicateModelError(ConfigurationError):
    _code = 0x_02_03_00_00


class NoModelsError(ConfigurationError):
    _code = 0x_02_04_00_00


class ViewerConflictError(ConfigurationError):
    _code = 0x_02_05_00_00


class UnresolvedReferenceError(ConfigurationError):
    _code = 0x_02_06_00_00


class DuplicateTypeNameError(ConfigurationError):
    _code = 0x_02_07_00_00


class DuplicateMutationNameError(DuplicateTypeNameError):
    _code = 0x_02_07_00_01


class FieldsAlreadyFilledError(ConfigurationError):
    _code = 0x_02_08_00_00


class FieldsNotFilledError(ConfigurationError):
    _code = 0x_02_08_00_01


class DuplicateFieldError(ConfigurationError):
    _code = 0x_02_07_00_02


class InvalidSchemaError(ConfigurationError):
    _code = 0x_02_09_00_00


class ResolutionError(RelaySchemaError):
    _code = 0x_03_00_00_00


class InvalidGlobalIdError(ResolutionError):
    _code = 0x_03_01_00_00
