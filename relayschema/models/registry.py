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
from typing import (
    Any,
    Dict,
    Iterable,
    Iterator,
    Mapping,
    Optional,
    Union,
)

import logging

from relayschema import errors

from . import base
from . import descriptors


logger = logging.getLogger('relayschema.models')


ModelsSpec = Union[
    Iterable[base.ModelContract],
    Mapping[str, base.ModelContract],
]


class ModelRegistry:
    """An ordered, explicitly populated set of models.

    Registration order is preserved and determines the order in which
    types and root fields are generated.
    """

    _models: Dict[str, base.ModelContract]

    def __init__(self, models: Optional[ModelsSpec] = None) -> None:
        self._models = {}

        if models is None:
            return

        if isinstance(models, Mapping):
            for key, model in models.items():
                self.register(model, key=key)
        else:
            for model in models:
                self.register(model)

    def register(
        self,
        model: base.ModelContract,
        *,
        key: Optional[str] = None,
    ) -> base.ModelContract:
        missing = base.missing_methods(model)
        if missing:
            raise errors.ModelContractError(
                f'{model!r} does not implement the model contract',
                details=f'missing: {", ".join(missing)}')

        schema = getattr(model, 'schema', None)
        if not isinstance(schema, descriptors.ModelSchema):
            raise errors.ModelContractError(
                f'{model!r} has no ModelSchema in its "schema" attribute')

        name = model.get_name()
        if name != schema.name:
            raise errors.ModelContractError(
                f'model name {name!r} does not match its schema name '
                f'{schema.name!r}',
                model=name)

        if key is not None and key != name:
            raise errors.ModelContractError(
                f'model {name!r} is registered under a different '
                f'name {key!r}',
                model=name)

        if name in self._models:
            raise errors.DuplicateModelError(
                f'model {name!r} is already registered',
                model=name)

        self._models[name] = model
        logger.debug('registered model %r', name)
        return model

    def __contains__(self, name: Any) -> bool:
        return name in self._models

    def __iter__(self) -> Iterator[base.ModelContract]:
        return iter(self._models.values())

    def __len__(self) -> int:
        return len(self._models)

    def names(self) -> Iterator[str]:
        return iter(self._models)

    def get(self, name: str) -> Optional[base.ModelContract]:
        return self._models.get(name)

    def get_viewer_model(self) -> Optional[base.ModelContract]:
        viewers = [m for m in self._models.values() if m.is_viewer()]
        if len(viewers) > 1:
            names = ', '.join(repr(m.get_name()) for m in viewers)
            raise errors.ViewerConflictError(
                f'more than one model is flagged as the viewer: {names}',
                hint='at most one model may be the viewer model')

        return viewers[0] if viewers else None
