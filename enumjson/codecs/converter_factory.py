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

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Optional

from structlog import get_logger
from typing_extensions import override

from enumjson.codecs.enum_codec import EnumCodec
from enumjson.codecs.json_codec import JsonCodec
from enumjson.codecs.name_table import NameTableRegistry
from enumjson.codecs.optional_enum_codec import OptionalEnumCodec
from enumjson.codecs.utils import get_optional_enum_class, is_enum_class, pretty_type
from enumjson.conf.settings import EnumJsonSettings

logger = get_logger()


class ConverterFactory(ABC):
    """ A pluggable source of codecs.

    Factories registered in `JsonSerializerOptions` are asked, in order, about each distinct type before the builtin
    type map is used. The options cache whatever codec is returned.
    """

    @abstractmethod
    def can_handle(self, type_: Any, /) -> bool:
        """ Whether this factory produces codecs for the given declared type."""
        raise NotImplementedError

    @abstractmethod
    def resolve(self, type_: Any, /) -> Optional[JsonCodec]:
        """ Build a codec for the given declared type, or return None if the type is not handled."""
        raise NotImplementedError


class EnumConverterFactory(ConverterFactory):
    """ Writes enums by member name.

    A plain enum type gets an `EnumCodec`, an optional enum type (`E | None`, `Optional[E]`) gets an `OptionalEnumCodec`
    wrapping one. The decision is made from the declared type alone. Every other type is left to the host.
    """

    def __init__(
        self,
        *,
        registry: Optional[NameTableRegistry] = None,
        settings: Optional[EnumJsonSettings] = None,
    ) -> None:
        if settings is None:
            from enumjson.conf.get_settings import get_global_settings
            settings = get_global_settings()
        self.log = logger.new()
        self.settings = settings
        self.registry = registry if registry is not None else NameTableRegistry(settings=settings)

    @override
    def can_handle(self, type_: Any, /) -> bool:
        return is_enum_class(type_) or get_optional_enum_class(type_) is not None

    @override
    def resolve(self, type_: Any, /) -> Optional[JsonCodec]:
        codec: JsonCodec
        if is_enum_class(type_):
            codec = self._make_enum_codec(type_)
        elif (enum_class := get_optional_enum_class(type_)) is not None:
            codec = OptionalEnumCodec(self._make_enum_codec(enum_class), settings=self.settings)
        else:
            return None
        self.log.debug('codec resolved', type=pretty_type(type_), codec=type(codec).__name__)
        return codec

    def _make_enum_codec(self, enum_class: type[Enum]) -> EnumCodec:
        return EnumCodec(self.registry.get(enum_class))
