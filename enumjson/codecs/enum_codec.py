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
from typing import TypeVar

from typing_extensions import override

from enumjson.codecs.json_codec import JsonCodec
from enumjson.codecs.name_table import NameTable
from enumjson.exception import MalformedValue, UnknownEnumMember

E = TypeVar('E', bound=Enum)


class EnumCodec(JsonCodec[E]):
    """ Represents a required enum field, written as the exact name of the member.

    Reading only accepts a JSON string holding one of the member names, case-sensitive. Any other token kind is a
    `MalformedValue`, a string that is not a member name (the empty string included) is an `UnknownEnumMember`.
    """

    __slots__ = ('_name_table',)

    _name_table: NameTable[E]

    def __init__(self, name_table: NameTable[E]) -> None:
        self._name_table = name_table

    @property
    def enum_class(self) -> type[E]:
        return self._name_table.enum_class

    @override
    def _check_value(self, value: E, /, *, deep: bool) -> None:
        if not isinstance(value, self.enum_class):
            raise TypeError(f'expected {self.enum_class.__name__} member')

    @override
    def _json_to_value(self, json_value: JsonCodec.Json, /) -> E:
        if not isinstance(json_value, str):
            raise MalformedValue(
                f'expected str for {self.enum_class.__name__}, got {type(json_value).__name__}',
                value=json_value,
            )
        member = self._name_table.get_member(json_value)
        if member is None:
            raise UnknownEnumMember(self.enum_class, json_value)
        return member

    @override
    def _value_to_json(self, value: E, /) -> JsonCodec.Json:
        return self._name_table.get_name(value)
