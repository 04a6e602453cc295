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

from __future__ import annotations

from enum import Enum
from typing import Optional, TypeVar

from typing_extensions import override

from enumjson.codecs.enum_codec import EnumCodec
from enumjson.codecs.json_codec import JsonCodec
from enumjson.conf.settings import EnumJsonSettings
from enumjson.exception import MalformedValue

E = TypeVar('E', bound=Enum)


class OptionalEnumCodec(JsonCodec[Optional[E]]):
    """ Represents an enum field that may be absent (`None`).

    Absent is written as `null`. Both `null` and `""` are read as absent: some producers send an empty string to mean
    "no value", that is a defined success path and never an unknown member. Any other string goes through the wrapped
    `EnumCodec`, any other token kind is a `MalformedValue`.

    The empty string rule can be turned off, and a whitespace-only rule turned on, through `EnumJsonSettings`.
    """

    __slots__ = ('_value', '_settings')

    _value: EnumCodec[E]
    _settings: EnumJsonSettings

    def __init__(self, enum_codec: EnumCodec[E], *, settings: EnumJsonSettings) -> None:
        self._value = enum_codec
        self._settings = settings

    @property
    def enum_class(self) -> type[E]:
        return self._value.enum_class

    @override
    def _check_value(self, value: Optional[E], /, *, deep: bool) -> None:
        if value is None:
            return
        self._value._check_value(value, deep=deep)

    @override
    def _json_to_value(self, json_value: JsonCodec.Json, /) -> Optional[E]:
        if json_value is None:
            return None
        if not isinstance(json_value, str):
            raise MalformedValue(
                f'expected str or null for {self.enum_class.__name__}, got {type(json_value).__name__}',
                value=json_value,
            )
        if self._settings.is_absent_string(json_value):
            return None
        return self._value.json_to_value(json_value)

    @override
    def _value_to_json(self, value: Optional[E], /) -> JsonCodec.Json:
        if value is None:
            return None
        else:
            return self._value.value_to_json(value)
