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

from types import NoneType
from typing import TYPE_CHECKING, Any, TypeVar, get_args

from typing_extensions import Self, override

from enumjson.codecs.json_codec import JsonCodec

if TYPE_CHECKING:
    from enumjson.serializer import JsonSerializerOptions

V = TypeVar('V')


class OptionalCodec(JsonCodec[V | None]):
    """ Represents a value that is either `V` or `None`, with `None` written as `null`.

    This is the host's generic optional, optional enums are normally claimed first by `EnumConverterFactory`.
    """

    __slots__ = ('_value',)

    _value: JsonCodec[V]

    def __init__(self, codec: JsonCodec[V]) -> None:
        self._value = codec

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, options: JsonSerializerOptions) -> Self:
        args = get_args(type_)
        if len(args) != 2 or NoneType not in args:
            raise TypeError('type must be either `None | T` or `T | None`')
        not_none_type, = (arg for arg in args if arg is not NoneType)
        return cls(options.get_codec(not_none_type))

    @override
    def _check_value(self, value: V | None, /, *, deep: bool) -> None:
        if value is None:
            return
        if deep:
            self._value._check_value(value, deep=True)

    @override
    def _json_to_value(self, json_value: JsonCodec.Json, /) -> V | None:
        if json_value is None:
            return None
        else:
            return self._value.json_to_value(json_value)

    @override
    def _value_to_json(self, value: V | None, /) -> JsonCodec.Json:
        if value is None:
            return None
        else:
            return self._value.value_to_json(value)
