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

from collections.abc import Mapping
from dataclasses import dataclass, is_dataclass
from enum import Enum, Flag
from types import NoneType, UnionType
from typing import TYPE_CHECKING, Any, Optional, TypeAlias, Union, get_args, get_origin

from typing_extensions import TypeGuard

if TYPE_CHECKING:
    from enumjson.codecs.json_codec import JsonCodec

TypeToCodecMap: TypeAlias = Mapping[Any, type['JsonCodec']]


def is_enum_class(type_: Any, /) -> TypeGuard[type[Enum]]:
    """ Whether the given type is an enum whose members can be written by name.

    Flag enums are left out, a combination of flags has no single member name.

    >>> from enum import IntEnum, IntFlag
    >>> class AccessType(IntEnum):
    ...     Read = 0
    >>> class Permission(IntFlag):
    ...     X = 1
    >>> is_enum_class(AccessType)
    True
    >>> is_enum_class(Permission)
    False
    >>> is_enum_class(AccessType | None)
    False
    >>> is_enum_class(int)
    False
    """
    return isinstance(type_, type) and issubclass(type_, Enum) and not issubclass(type_, Flag)


def get_optional_enum_class(type_: Any, /) -> Optional[type[Enum]]:
    """ Unwrap the enum from an optional enum type, returns None if the type does not have that shape.

    >>> from enum import Enum
    >>> class Color(Enum):
    ...     Red = 'r'
    >>> get_optional_enum_class(Color | None)
    <enum 'Color'>
    >>> get_optional_enum_class(None | Color)
    <enum 'Color'>
    >>> get_optional_enum_class(Optional[Color])
    <enum 'Color'>
    >>> get_optional_enum_class(Color) is None
    True
    >>> get_optional_enum_class(Color | int) is None
    True
    >>> get_optional_enum_class(str | None) is None
    True
    """
    if get_origin(type_) not in (Union, UnionType):
        return None
    args = get_args(type_)
    if len(args) != 2 or NoneType not in args:
        return None
    not_none_type, = (arg for arg in args if arg is not NoneType)
    return not_none_type if is_enum_class(not_none_type) else None


def pretty_type(type_: Any) -> str:
    """ Shows a cleaner string representation for a type.

    >>> pretty_type(int)
    'int'
    >>> pretty_type(None)
    'None'
    >>> pretty_type(list[int])
    'list[int]'
    """
    if type_ is NoneType or type_ is None:
        return 'None'
    elif hasattr(type_, '__args__'):
        return str(type_)
    else:
        return getattr(type_, '__name__', repr(type_))


def get_usable_origin_type(type_: Any, /, *, type_map: TypeToCodecMap) -> Any:
    """ Map a given type into a key that is usable in the given type map.

    Generic aliases use their origin (`list[int]` becomes `list`), `typing.Union` becomes `types.UnionType`, enum
    classes use the `Enum` key and dataclasses use the `dataclass` key. If the type cannot be used in the given map a
    TypeError is raised.

    >>> from enumjson.codecs import DEFAULT_TYPE_TO_CODEC_MAP as type_map
    >>> get_usable_origin_type(list[str], type_map=type_map)
    <class 'list'>
    >>> get_usable_origin_type(Optional[int], type_map=type_map) is UnionType
    True
    """
    if isinstance(type_, str):
        raise NotImplementedError('string annotations are not currently supported')

    origin_type = get_origin(type_) or type_
    # XXX: special case, typing.Union and types.UnionType are handled by the same codec
    if origin_type is Union:
        origin_type = UnionType

    if origin_type in type_map:
        return origin_type

    if isinstance(origin_type, type):
        if issubclass(origin_type, Enum) and Enum in type_map:
            return Enum
        if is_dataclass(origin_type) and dataclass in type_map:
            return dataclass

    raise TypeError(f'type {pretty_type(type_)} is not supported by any codec')
