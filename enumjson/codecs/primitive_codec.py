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

from typing import TYPE_CHECKING, Any

from typing_extensions import Self, override

from enumjson.codecs.json_codec import JsonCodec
from enumjson.exception import MalformedValue

if TYPE_CHECKING:
    from enumjson.serializer import JsonSerializerOptions


class StrCodec(JsonCodec[str]):
    """ Represents builtin `str` values.
    """

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, options: JsonSerializerOptions) -> Self:
        if type_ is not str:
            raise TypeError('expected str type')
        return cls()

    @override
    def _check_value(self, value: str, /, *, deep: bool) -> None:
        if not isinstance(value, str):
            raise TypeError('expected str type')

    @override
    def _json_to_value(self, json_value: JsonCodec.Json, /) -> str:
        if not isinstance(json_value, str):
            raise MalformedValue('expected str', value=json_value)
        return json_value

    @override
    def _value_to_json(self, value: str, /) -> JsonCodec.Json:
        return value


class BoolCodec(JsonCodec[bool]):
    """ Represents builtin `bool` values.
    """

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, options: JsonSerializerOptions) -> Self:
        if type_ is not bool:
            raise TypeError('expected bool type')
        return cls()

    @override
    def _check_value(self, value: bool, /, *, deep: bool) -> None:
        if not isinstance(value, bool):
            raise TypeError('expected bool type')

    @override
    def _json_to_value(self, json_value: JsonCodec.Json, /) -> bool:
        if not isinstance(json_value, bool):
            raise MalformedValue('expected bool', value=json_value)
        return json_value

    @override
    def _value_to_json(self, value: bool, /) -> JsonCodec.Json:
        return value


class IntCodec(JsonCodec[int]):
    """ Represents builtin `int` values, `bool` is not accepted even though it is a subclass of `int`.
    """

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, options: JsonSerializerOptions) -> Self:
        if type_ is not int:
            raise TypeError('expected int type')
        return cls()

    @override
    def _check_value(self, value: int, /, *, deep: bool) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError('expected int type')

    @override
    def _json_to_value(self, json_value: JsonCodec.Json, /) -> int:
        if isinstance(json_value, bool) or not isinstance(json_value, int):
            raise MalformedValue('expected int', value=json_value)
        return json_value

    @override
    def _value_to_json(self, value: int, /) -> JsonCodec.Json:
        return int(value)


class FloatCodec(JsonCodec[float]):
    """ Represents builtin `float` values, JSON integers are accepted and converted.
    """

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, options: JsonSerializerOptions) -> Self:
        if type_ is not float:
            raise TypeError('expected float type')
        return cls()

    @override
    def _check_value(self, value: float, /, *, deep: bool) -> None:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError('expected float type')

    @override
    def _json_to_value(self, json_value: JsonCodec.Json, /) -> float:
        if isinstance(json_value, bool) or not isinstance(json_value, (int, float)):
            raise MalformedValue('expected number', value=json_value)
        return float(json_value)

    @override
    def _value_to_json(self, value: float, /) -> JsonCodec.Json:
        return float(value)
