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


"""Declarative model descriptors.

A model is described by a :class:`ModelSchema`: a name and an ordered
mapping of property names to :class:`PropertyDescriptor` objects.  The
descriptors are deliberately loose about the property kind: anything
that isn't one of the known kinds is accepted and later compiled into a
String field.
"""


from __future__ import annotations
from typing import (
    Any,
    Callable,
    Dict,
    Iterator,
    Mapping,
    Optional,
    Tuple,
    Union,
)

import dataclasses
import types

from relayschema import errors
from relayschema.common import enum as rs_enum
from relayschema.common import string as rs_string


class PropertyKind(rs_enum.StrEnum):
    STRING = 'string'
    BOOLEAN = 'boolean'
    INTEGER = 'integer'
    FLOAT = 'float'
    OBJECT = 'object'
    ARRAY = 'array'
    ID = 'id'


class Relation(rs_enum.StrEnum):
    NONE = 'none'
    HAS_ONE = 'hasOne'
    HAS_MANY = 'hasMany'


# Alternative spellings accepted in model definitions.
KIND_ALIASES: Dict[Any, PropertyKind] = {
    str: PropertyKind.STRING,
    bool: PropertyKind.BOOLEAN,
    int: PropertyKind.INTEGER,
    float: PropertyKind.FLOAT,
    dict: PropertyKind.OBJECT,
    list: PropertyKind.ARRAY,
    'str': PropertyKind.STRING,
    'bool': PropertyKind.BOOLEAN,
    'int': PropertyKind.INTEGER,
    'number': PropertyKind.INTEGER,
    'Float': PropertyKind.FLOAT,
    'json': PropertyKind.OBJECT,
    'identifier': PropertyKind.ID,
}


def normalize_kind(kind: Any) -> str:
    known = KIND_ALIASES.get(kind) if _hashable(kind) else None
    if known is not None:
        return str(known)
    if isinstance(kind, PropertyKind):
        return str(kind)
    if isinstance(kind, type):
        return kind.__name__
    return str(kind)


def _hashable(obj: Any) -> bool:
    try:
        hash(obj)
    except TypeError:
        return False
    return True


@dataclasses.dataclass(frozen=True)
class PropertyDescriptor:

    kind: str = str(PropertyKind.STRING)
    relation: Relation = Relation.NONE
    ref: Optional[str] = None
    foreign_key_for: Optional[str] = None
    description: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, 'kind', normalize_kind(self.kind))

        relation = Relation.lookup(self.relation)
        if relation is None:
            raise errors.InvalidPropertyError(
                f'unknown relation {self.relation!r}',
                hint=f'use one of: '
                     f'{", ".join(str(r) for r in Relation)}')
        object.__setattr__(self, 'relation', relation)

        if relation is not Relation.NONE and not self.ref:
            raise errors.InvalidPropertyError(
                f'{relation} relation requires a target model in "ref"')

        if relation is Relation.NONE and self.ref:
            raise errors.InvalidPropertyError(
                f'"ref" {self.ref!r} is only valid on a relation')

        if self.foreign_key_for is not None:
            if (
                self.known_kind is not PropertyKind.ID
                or relation is not Relation.NONE
            ):
                raise errors.InvalidPropertyError(
                    f'"foreign_key_for" is only valid on an id property '
                    f'without a relation')

    @classmethod
    def identifier(cls, **kwargs) -> PropertyDescriptor:
        return cls(kind=PropertyKind.ID, **kwargs)

    @classmethod
    def foreign_key(cls, model: str, **kwargs) -> PropertyDescriptor:
        return cls(kind=PropertyKind.ID, foreign_key_for=model, **kwargs)

    @classmethod
    def has_one(cls, model: str, **kwargs) -> PropertyDescriptor:
        return cls(relation=Relation.HAS_ONE, ref=model, **kwargs)

    @classmethod
    def has_many(cls, model: str, **kwargs) -> PropertyDescriptor:
        return cls(relation=Relation.HAS_MANY, ref=model, **kwargs)

    @classmethod
    def coerce(cls, value: Any) -> PropertyDescriptor:
        if isinstance(value, cls):
            return value
        elif isinstance(value, Mapping):
            kwargs = dict(value)
            # Accept the camelCase spelling of model definition files.
            if 'foreignKeyFor' in kwargs:
                kwargs['foreign_key_for'] = kwargs.pop('foreignKeyFor')
            if 'type' in kwargs and 'kind' not in kwargs:
                kwargs['kind'] = kwargs.pop('type')
            try:
                return cls(**kwargs)
            except TypeError as e:
                raise errors.InvalidPropertyError(
                    f'invalid property definition: {e}') from e
        else:
            return cls(kind=value)

    @property
    def known_kind(self) -> Optional[PropertyKind]:
        return PropertyKind.lookup(self.kind)

    @property
    def is_relation(self) -> bool:
        return self.relation is not Relation.NONE

    @property
    def is_identifier(self) -> bool:
        return (
            self.known_kind is PropertyKind.ID
            and self.relation is Relation.NONE
        )

    @property
    def is_foreign_key(self) -> bool:
        return self.is_identifier and self.foreign_key_for is not None


Resolver = Callable[..., Any]


@dataclasses.dataclass(frozen=True)
class ModelSchema:

    name: str
    properties: Mapping[str, PropertyDescriptor]
    resolvers: Mapping[str, Resolver] = dataclasses.field(
        default_factory=dict)
    is_viewer: bool = False
    description: Optional[str] = None

    def __post_init__(self) -> None:
        if not rs_string.is_valid_name(self.name):
            raise errors.ModelContractError(
                f'{self.name!r} is not a valid model name',
                model=self.name)

        props: Dict[str, PropertyDescriptor] = {}
        for pname, pdef in self.properties.items():
            if not rs_string.is_valid_name(pname):
                raise errors.InvalidPropertyError(
                    f'{pname!r} is not a valid property name',
                    model=self.name)
            try:
                props[pname] = PropertyDescriptor.coerce(pdef)
            except errors.InvalidPropertyError as e:
                raise errors.InvalidPropertyError(
                    f'{self.name}.{pname}: {e}',
                    hint=e.hint,
                    model=self.name,
                ) from e

        for pname in self.resolvers:
            if pname not in props:
                raise errors.InvalidPropertyError(
                    f'resolver for unknown property {self.name}.{pname}',
                    model=self.name)

        object.__setattr__(self, 'properties', types.MappingProxyType(props))
        object.__setattr__(
            self, 'resolvers', types.MappingProxyType(dict(self.resolvers)))

    def scalar_properties(self) -> Iterator[Tuple[str, PropertyDescriptor]]:
        for pname, pdef in self.properties.items():
            if not pdef.is_relation:
                yield pname, pdef

    def relation_properties(
        self,
    ) -> Iterator[Tuple[str, PropertyDescriptor]]:
        for pname, pdef in self.properties.items():
            if pdef.is_relation:
                yield pname, pdef

    def get_resolver(self, pname: str) -> Optional[Resolver]:
        return self.resolvers.get(pname)


PropertySpec = Union[PropertyDescriptor, Mapping[str, Any], type, str]
