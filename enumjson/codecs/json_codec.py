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
from typing import TYPE_CHECKING, Any, Generic, TypeAlias, TypeVar, final

from typing_extensions import Self

from enumjson.codecs.utils import get_usable_origin_type

if TYPE_CHECKING:
    from enumjson.serializer import JsonSerializerOptions

T = TypeVar('T')


class JsonCodec(ABC, Generic[T]):
    """ This class models how values of a known type are converted to and from JSON.

    A codec never touches JSON text, it works on the values that `json.loads` produces and `json.dumps` consumes, the
    host engine (see `enumjson.serializer`) deals with parsing and formatting. Compound codecs (optionals, lists and
    dataclasses) hold the codecs of their inner types, which they get from the `JsonSerializerOptions` that is building
    them, that way converter factories registered in the options also apply to nested types.

    Codecs are stateless once built, so a single instance can be shared between threads and reused for every value.
    """

    # These are all the values that can be observed when parsing a JSON with the builtin json module
    # See: https://docs.python.org/3/library/json.html#encoders-and-decoders
    Json: TypeAlias = dict | list | str | int | float | bool | None

    # XXX: subclasses must override this if they need any properties
    __slots__ = ()

    @final
    @staticmethod
    def from_type(type_: Any, /, *, options: JsonSerializerOptions) -> JsonCodec:
        """ Instantiate a JsonCodec from a type signature using the builtin type map of the given options.

        Converter factories are not consulted here, use `JsonSerializerOptions.get_codec` for that.
        """
        usable_origin = get_usable_origin_type(type_, type_map=options.type_map)
        codec_class = options.type_map[usable_origin]
        return codec_class._from_type(type_, options=options)

    @classmethod
    def _from_type(cls, type_: Any, /, *, options: JsonSerializerOptions) -> Self:
        """ Instantiate a JsonCodec instance from a type signature.

        The implementation is expected to inspect the given type's origin and args to check for compatibility, compound
        codecs use `options.get_codec` for their inner types.
        """
        # XXX: a codec that is only built by a converter factory does not need to implement _from_type
        raise TypeError(f'{cls} is not compatible with use in a type map')

    @final
    def check_value(self, value: T, /) -> None:
        """ Raise a TypeError if the value is not compatible with this codec, compound values are checked deeply.
        """
        # XXX: subclasses must implement JsonCodec._check_value, not JsonCodec.check_value
        self._check_value(value, deep=True)

    @final
    def json_to_value(self, json_value: Json, /) -> T:
        """ Use this to convert a value that comes out from `json.load` into the value that this class expects.

        Will raise an EnumJsonError (which is a ValueError) if the given `json_value` is not compatible.
        """
        # XXX: subclasses must implement JsonCodec._json_to_value, not JsonCodec.json_to_value
        value = self._json_to_value(json_value)
        self._check_value(value, deep=False)
        return value

    @final
    def value_to_json(self, value: T, /) -> Json:
        """ Use this to convert a value to an object compatible with `json.dump`.

        Will raise a TypeError if the given `value` is not compatible.
        """
        # XXX: subclasses must implement JsonCodec._value_to_json, not JsonCodec.value_to_json
        self._check_value(value, deep=False)
        return self._value_to_json(value)

    @abstractmethod
    def _check_value(self, value: T, /, *, deep: bool) -> None:
        """ Inner implementation of `JsonCodec.check_value`, should raise a TypeError if the value is not valid.

        Compound values should use `JsonCodec._check_value` on the inner codec(s) and pass the appropriate deep
        argument.
        """
        raise NotImplementedError

    @abstractmethod
    def _json_to_value(self, json_value: Json, /) -> T:
        """ Inner implementation of `JsonCodec.json_to_value`."""
        raise NotImplementedError

    @abstractmethod
    def _value_to_json(self, value: T, /) -> Json:
        """ Inner implementation of `JsonCodec.value_to_json`, the value has already been "shallow checked"."""
        raise NotImplementedError
