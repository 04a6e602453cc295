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
Type-driven JSON engine hosting the codecs.

For each declared type the options pick a codec once: registered converter factories are asked first, in order, then
the builtin type map is used. The codec is cached and reused for every value of that type.

>>> from dataclasses import dataclass
>>> from enum import IntEnum
>>> from enumjson.conf.settings import EnumJsonSettings
>>> class AccessType(IntEnum):
...     Read = 0
...     Write = 1
>>> @dataclass
... class Grant:
...     access: AccessType
...     fallback: AccessType | None
>>> options = JsonSerializerOptions([EnumConverterFactory(settings=EnumJsonSettings())])
>>> serialize(Grant(AccessType.Write, None), options=options)
'{"access":"Write","fallback":null}'
>>> deserialize('{"access":"Read","fallback":""}', Grant, options=options)
Grant(access=<AccessType.Read: 0>, fallback=None)
"""

import threading
from collections.abc import Iterable
from typing import Any, Optional, TypeVar

from enumjson.codecs import DEFAULT_TYPE_TO_CODEC_MAP, ConverterFactory, EnumConverterFactory, JsonCodec
from enumjson.codecs.utils import TypeToCodecMap
from enumjson.utils.json import json_dumps, json_loads

T = TypeVar('T')

__all__ = [
    'EnumConverterFactory',
    'JsonSerializerOptions',
    'deserialize',
    'serialize',
]


class JsonSerializerOptions:
    """ Holds the converter factories and the type map used to pick codecs, and caches the codecs it picks.
    """

    __slots__ = ('converters', 'type_map', '_codecs', '_lock')

    def __init__(
        self,
        converters: Iterable[ConverterFactory] = (),
        *,
        type_map: Optional[TypeToCodecMap] = None,
    ) -> None:
        self.converters: list[ConverterFactory] = list(converters)
        self.type_map: TypeToCodecMap = type_map if type_map is not None else DEFAULT_TYPE_TO_CODEC_MAP
        self._codecs: dict[Any, JsonCodec] = {}
        # XXX: reentrant because building a compound codec gets the codecs of its inner types
        self._lock = threading.RLock()

    def get_codec(self, type_: Any, /) -> JsonCodec:
        """ Return the codec for the given declared type, raises TypeError if no codec supports it."""
        codec = self._codecs.get(type_)
        if codec is None:
            with self._lock:
                codec = self._codecs.get(type_)
                if codec is None:
                    codec = self._make_codec(type_)
                    self._codecs[type_] = codec
        return codec

    def _make_codec(self, type_: Any) -> JsonCodec:
        for converter in self.converters:
            if not converter.can_handle(type_):
                continue
            codec = converter.resolve(type_)
            if codec is not None:
                return codec
        return JsonCodec.from_type(type_, options=self)


def serialize(value: Any, type_: Any = None, /, *, options: Optional[JsonSerializerOptions] = None) -> str:
    """ Convert a value to compact JSON text, `type_` defaults to the type of the value.
    """
    if options is None:
        options = JsonSerializerOptions()
    codec = options.get_codec(type_ if type_ is not None else type(value))
    return json_dumps(codec.value_to_json(value))


def deserialize(data: str | bytes, type_: type[T], /, *, options: Optional[JsonSerializerOptions] = None) -> T:
    """ Parse JSON text into a value of the given type.

    Raises `json.JSONDecodeError` for text that is not JSON, and an `EnumJsonError` for JSON that does not fit the type.
    """
    if options is None:
        options = JsonSerializerOptions()
    codec = options.get_codec(type_)
    return codec.json_to_value(json_loads(data))
