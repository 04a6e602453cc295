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
from typing import TYPE_CHECKING, Any, TypeVar

from typing_extensions import Self, override

from enumjson.codecs.json_codec import JsonCodec
from enumjson.exception import MalformedValue

if TYPE_CHECKING:
    from enumjson.serializer import JsonSerializerOptions

E = TypeVar('E', bound=Enum)


class EnumValueCodec(JsonCodec[E]):
    """ The host's default for enum types no converter factory claims: members are written as their value."""

    __slots__ = ('enum_class',)

    def __init__(self, enum_class: type[E]) -> None:
        self.enum_class = enum_class

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, options: JsonSerializerOptions) -> Self:
        if not isinstance(type_, type) or not issubclass(type_, Enum):
            raise TypeError('expected Enum subclass')
        return cls(type_)

    @override
    def _check_value(self, value: E, /, *, deep: bool) -> None:
        if not isinstance(value, self.enum_class):
            raise TypeError(f'expected {self.enum_class.__name__}')

    @override
    def _json_to_value(self, json_value: JsonCodec.Json, /) -> E:
        if isinstance(json_value, (dict, list)) or json_value is None:
            raise MalformedValue(f'expected a scalar for {self.enum_class.__name__}', value=json_value)
        try:
            return self.enum_class(json_value)
        except ValueError:
            raise MalformedValue(f'invalid {self.enum_class.__name__} value: {json_value!r}', value=json_value)

    @override
    def _value_to_json(self, value: E, /) -> JsonCodec.Json:
        return value.value
