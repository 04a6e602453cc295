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

import threading
from collections.abc import Iterator, Mapping
from enum import Enum
from types import MappingProxyType as mappingproxy
from typing import Generic, Optional, TypeVar

from structlog import get_logger
from typing_extensions import Self

from enumjson.codecs.utils import is_enum_class
from enumjson.conf.settings import EnumJsonSettings

logger = get_logger()

E = TypeVar('E', bound=Enum)


class NameTable(Generic[E]):
    """ Bidirectional lookup between the member names of an enum and its members.

    Only canonical members are included, aliases (a second name bound to an existing value) are left out, so every
    member has exactly one name and every name exactly one member. Names are compared exactly, there is no case folding
    or any other normalization.

    >>> from enum import IntEnum
    >>> class AccessType(IntEnum):
    ...     Read = 0
    ...     Write = 1
    ...     Admin = 2
    ...     Root = 2
    >>> table = NameTable.build(AccessType)
    >>> table.get_member('Write')
    <AccessType.Write: 1>
    >>> table.get_member('write') is None
    True
    >>> table.get_member('Root') is None
    True
    >>> table.get_name(AccessType.Admin)
    'Admin'
    >>> list(table)
    ['Read', 'Write', 'Admin']
    """

    __slots__ = ('_enum_class', '_members_by_name', '_names_by_member')

    _enum_class: type[E]
    _members_by_name: Mapping[str, E]
    _names_by_member: Mapping[E, str]

    def __init__(self, enum_class: type[E], members_by_name: Mapping[str, E]) -> None:
        self._enum_class = enum_class
        self._members_by_name = mappingproxy(dict(members_by_name))
        self._names_by_member = mappingproxy({member: name for name, member in members_by_name.items()})
        assert len(self._members_by_name) == len(self._names_by_member), 'names and members must be unique'

    @classmethod
    def build(cls, enum_class: type[E]) -> Self:
        """ Build the table from the exhaustive list of members of `enum_class`, in definition order.
        """
        if not is_enum_class(enum_class):
            raise TypeError(f'expected a non-flag Enum subclass, got {enum_class!r}')
        # XXX: iterating an enum class skips aliases, __members__ would include them
        return cls(enum_class, {member.name: member for member in enum_class})

    @property
    def enum_class(self) -> type[E]:
        return self._enum_class

    def get_member(self, name: str) -> Optional[E]:
        """ Return the member with exactly the given name, or None if there is no such member."""
        return self._members_by_name.get(name)

    def get_name(self, member: E) -> str:
        """ Return the name of the given member, it must be a member of this table's enum."""
        return self._names_by_member[member]

    def __iter__(self) -> Iterator[str]:
        return iter(self._members_by_name)

    def __len__(self) -> int:
        return len(self._members_by_name)

    def __repr__(self) -> str:
        return f'NameTable({self._enum_class.__name__}, {list(self._members_by_name)!r})'


class NameTableRegistry:
    """ Build-once cache of name tables, keyed by enum class.

    A table is built the first time its enum is looked up and the same instance is returned afterwards. Concurrent
    first lookups from several threads are serialized so that each table is built exactly once. Entries are never
    evicted, enums are defined once per process so the registry is bounded by the number of enum classes in use.

    The registry is owned by whoever builds the codecs (usually an `EnumConverterFactory`), tests can create one per
    case to keep them isolated.
    """

    def __init__(self, *, settings: Optional[EnumJsonSettings] = None) -> None:
        if settings is None:
            from enumjson.conf.get_settings import get_global_settings
            settings = get_global_settings()
        self.log = logger.new()
        self._cache_enabled = settings.CACHE_NAME_TABLES
        self._tables: dict[type[Enum], NameTable] = {}
        self._lock = threading.Lock()

    def get(self, enum_class: type[E]) -> NameTable[E]:
        """ Return the name table of the given enum, building it if needed."""
        if not self._cache_enabled:
            return NameTable.build(enum_class)

        table = self._tables.get(enum_class)
        if table is None:
            with self._lock:
                table = self._tables.get(enum_class)
                if table is None:
                    table = NameTable.build(enum_class)
                    self._tables[enum_class] = table
                    self.log.debug('name table built', enum=enum_class.__name__, members=len(table))
        return table

    def __contains__(self, enum_class: object) -> bool:
        return enum_class in self._tables

    def __len__(self) -> int:
        return len(self._tables)
