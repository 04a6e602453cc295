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
Enum name codecs for JSON.

Enums are written by member name, and optional enums read both `null` and `""` as absent:

    options = JsonSerializerOptions([EnumConverterFactory()])
    serialize(value, options=options)
    deserialize(data, SomeDataclass, options=options)
"""

from enumjson.codecs import EnumCodec, EnumConverterFactory, NameTable, NameTableRegistry, OptionalEnumCodec
from enumjson.exception import EnumJsonError, MalformedValue, UnknownEnumMember
from enumjson.serializer import JsonSerializerOptions, deserialize, serialize
from enumjson.version import __version__

__all__ = [
    'EnumCodec',
    'EnumConverterFactory',
    'EnumJsonError',
    'JsonSerializerOptions',
    'MalformedValue',
    'NameTable',
    'NameTableRegistry',
    'OptionalEnumCodec',
    'UnknownEnumMember',
    'deserialize',
    'serialize',
    '__version__',
]
