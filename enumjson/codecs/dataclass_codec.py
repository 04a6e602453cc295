# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
This codec maps a dataclass to a JSON object keyed by field name, in field declaration order.

It is the host's record support: the end-to-end use of the enum codecs is a dataclass with enum fields. Missing keys
fall back to the field default when there is one, unknown keys are ignored.
"""

from __future__ import annotations

from dataclasses import MISSING, fields, is_dataclass
from typing import TYPE_CHECKING, Any, TypeVar, get_type_hints

from typing_extensions import Self, override

from enumjson.codecs.json_codec import JsonCodec
from enumjson.exception import EnumJsonError, MalformedValue

if TYPE_CHECKING:
    from _typeshed import DataclassInstance

    from enumjson.serializer import JsonSerializerOptions

D = TypeVar('D', bound='DataclassInstance')


class DataclassCodec(JsonCodec[D]):
    __slots__ = ('_fields', '_class', '_defaulted')
    _fields: dict[str, JsonCodec]
    _class: type[D]
    _defaulted: frozenset[str]

    def __init__(self, fields_: dict[str, JsonCodec], class_: type[D], defaulted: frozenset[str] = frozenset()):
        self._fields = fields_
        self._class = class_
        self._defaulted = defaulted

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, options: JsonSerializerOptions) -> Self:
        if not isinstance(type_, type) or not is_dataclass(type_):
            raise TypeError('expected a dataclass')
        # XXX: resolves string annotations, like the ones produced by `from __future__ import annotations`
        type_hints = get_type_hints(type_)
        values: dict[str, JsonCodec] = {}
        defaulted: set[str] = set()
        for field in fields(type_):
            if not field.init:
                continue
            values[field.name] = options.get_codec(type_hints[field.name])
            if field.default is not MISSING or field.default_factory is not MISSING:
                defaulted.add(field.name)
        return cls(values, type_, frozenset(defaulted))

    @override
    def _check_value(self, value: D, /, *, deep: bool) -> None:
        if not isinstance(value, self._class):
            raise TypeError(f'expected {self._class.__name__} instance')
        if deep:
            for field_name, field_codec in self._fields.items():
                field_codec._check_value(getattr(value, field_name), deep=True)

    @override
    def _json_to_value(self, json_value: JsonCodec.Json, /) -> D:
        if not isinstance(json_value, dict):
            raise MalformedValue(f'expected object for {self._class.__name__}', value=json_value)
        kwargs: dict[str, Any] = {}
        for field_name, field_codec in self._fields.items():
            try:
                if field_name not in json_value:
                    if field_name in self._defaulted:
                        continue
                    raise MalformedValue('missing required field', value=None)
                kwargs[field_name] = field_codec.json_to_value(json_value[field_name])
            except EnumJsonError as e:
                e.add_path(field_name)
                raise
        return self._class(**kwargs)

    @override
    def _value_to_json(self, value: D) -> JsonCodec.Json:
        return {
            field_name: field_codec.value_to_json(getattr(value, field_name))
            for field_name, field_codec in self._fields.items()
        }
