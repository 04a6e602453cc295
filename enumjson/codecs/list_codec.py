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

from typing import TYPE_CHECKING, Any, TypeVar, get_args

from typing_extensions import Self, override

from enumjson.codecs.json_codec import JsonCodec
from enumjson.exception import EnumJsonError, MalformedValue

if TYPE_CHECKING:
    from enumjson.serializer import JsonSerializerOptions

T = TypeVar('T')


class ListCodec(JsonCodec[list[T]]):
    """ Represents builtin `list` values, written as JSON arrays.
    """

    __slots__ = ('_item',)

    _item: JsonCodec[T]

    def __init__(self, item_codec: JsonCodec[T], /) -> None:
        self._item = item_codec

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, options: JsonSerializerOptions) -> Self:
        args = get_args(type_)
        if not args or len(args) != 1:
            raise TypeError('expected list[<type>]')
        return cls(options.get_codec(args[0]))

    @override
    def _check_value(self, value: list[T], /, *, deep: bool) -> None:
        if not isinstance(value, list):
            raise TypeError('expected list type')
        if deep:
            for item in value:
                self._item._check_value(item, deep=True)

    @override
    def _json_to_value(self, json_value: JsonCodec.Json, /) -> list[T]:
        if not isinstance(json_value, list):
            raise MalformedValue('expected list', value=json_value)
        items: list[T] = []
        for index, json_item in enumerate(json_value):
            try:
                items.append(self._item.json_to_value(json_item))
            except EnumJsonError as e:
                e.add_path(index)
                raise
        return items

    @override
    def _value_to_json(self, value: list[T], /) -> JsonCodec.Json:
        return [self._item.value_to_json(item) for item in value]
