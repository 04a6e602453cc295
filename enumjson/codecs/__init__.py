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

from dataclasses import dataclass
from enum import Enum
from types import UnionType

from enumjson.codecs.converter_factory import ConverterFactory, EnumConverterFactory
from enumjson.codecs.dataclass_codec import DataclassCodec
from enumjson.codecs.enum_codec import EnumCodec
from enumjson.codecs.enum_value_codec import EnumValueCodec
from enumjson.codecs.json_codec import JsonCodec
from enumjson.codecs.list_codec import ListCodec
from enumjson.codecs.name_table import NameTable, NameTableRegistry
from enumjson.codecs.optional_codec import OptionalCodec
from enumjson.codecs.optional_enum_codec import OptionalEnumCodec
from enumjson.codecs.primitive_codec import BoolCodec, FloatCodec, IntCodec, StrCodec
from enumjson.codecs.utils import TypeToCodecMap, get_optional_enum_class, is_enum_class

__all__ = [
    'DEFAULT_TYPE_TO_CODEC_MAP',
    'BoolCodec',
    'ConverterFactory',
    'DataclassCodec',
    'EnumCodec',
    'EnumConverterFactory',
    'EnumValueCodec',
    'FloatCodec',
    'IntCodec',
    'JsonCodec',
    'ListCodec',
    'NameTable',
    'NameTableRegistry',
    'OptionalCodec',
    'OptionalEnumCodec',
    'StrCodec',
    'TypeToCodecMap',
    'get_optional_enum_class',
    'is_enum_class',
]

# Mapping between types and the host's builtin codec classes, `Enum` and `dataclass` stand for any enum class and any
# dataclass respectively.
DEFAULT_TYPE_TO_CODEC_MAP: TypeToCodecMap = {
    # builtin types:
    bool: BoolCodec,
    float: FloatCodec,
    int: IntCodec,
    list: ListCodec,
    str: StrCodec,
    # other Python types:
    UnionType: OptionalCodec,
    Enum: EnumValueCodec,
    dataclass: DataclassCodec,
}
