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

from typing import Optional, Type, Dict


__all__ = (
    'RelaySchemaError',
)


class RelaySchemaErrorMeta(type):
    _error_map: Dict[int, Type[RelaySchemaError]] = {}
    _name_map: Dict[str, Type[RelaySchemaError]] = {}

    def __new__(mcls, name, bases, dct):
        cls = super().__new__(mcls, name, bases, dct)

        assert name not in mcls._name_map
        mcls._name_map[name] = cls

        code = dct.get('_code')
        if code is not None:
            assert code not in mcls._error_map, \
                f'duplicate error code {code:#x} for {name}'
            mcls._error_map[code] = cls

        return cls

    def __init__(cls, name, bases, dct):
        if cls._code is None and cls.__module__ != __name__:
            # Every concrete error is addressable by its code.
            raise RuntimeError(
                'direct subclassing of RelaySchemaError is prohibited; '
                'subclass one of its subclasses in relayschema.errors')

    @classmethod
    def get_error_class_from_code(
        mcls,
        code: int,
    ) -> Type[RelaySchemaError]:
        return mcls._error_map[code]

    @classmethod
    def get_error_class_from_name(
        mcls,
        name: str,
    ) -> Type[RelaySchemaError]:
        return mcls._name_map[name]


class RelaySchemaError(Exception, metaclass=RelaySchemaErrorMeta):

    _code: Optional[int] = None

    def __init__(
        self,
        msg: Optional[str] = None,
        *,
        hint: Optional[str] = None,
        details: Optional[str] = None,
        model: Optional[str] = None,
    ):
        if type(self) is RelaySchemaError:
            raise RuntimeError(
                'RelaySchemaError is not supposed to be instantiated '
                'directly')

        self._hint = hint
        self._details = details
        self._model = model

        super().__init__(msg)

    @classmethod
    def get_code(cls) -> int:
        if cls._code is None:
            raise RuntimeError(
                f'error code is not set (type: {cls.__name__})')
        return cls._code

    @property
    def hint(self) -> Optional[str]:
        return self._hint

    @property
    def details(self) -> Optional[str]:
        return self._details

    @property
    def model(self) -> Optional[str]:
        return self._model

    def to_json(self):
        err_dct = {
            'message': str(self),
            'type': str(type(self).__name__),
            'code': self.get_code(),
        }
        if self._hint is not None:
            err_dct['hint'] = self._hint
        if self._details is not None:
            err_dct['details'] = self._details
        if self._model is not None:
            err_dct['model'] = self._model

        return err_dct
