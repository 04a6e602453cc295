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

from typing import Any


class EnumJsonError(ValueError):
    """Base class for errors raised while converting JSON values.

    The `path` lists the field names (or list indexes) leading to the offending value, outermost first. It is filled
    in by compound codecs as the error propagates up, the error object itself is re-raised unchanged.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
        self.path: list[str | int] = []

    def add_path(self, segment: str | int) -> None:
        """Prepend a field name or list index to the error path."""
        self.path.insert(0, segment)

    def format_path(self) -> str:
        """Render the path like `items[2].access`.

        >>> e = EnumJsonError('bad')
        >>> e.add_path('access')
        >>> e.add_path(2)
        >>> e.add_path('items')
        >>> e.format_path()
        'items[2].access'
        >>> str(e)
        'bad (at items[2].access)'
        """
        parts: list[str] = []
        for segment in self.path:
            if isinstance(segment, int):
                parts.append(f'[{segment}]')
            elif parts:
                parts.append(f'.{segment}')
            else:
                parts.append(segment)
        return ''.join(parts)

    def __str__(self) -> str:
        if not self.path:
            return self.message
        return f'{self.message} (at {self.format_path()})'


class MalformedValue(EnumJsonError):
    """The JSON token kind is not one the codec accepts, like a number where a string was expected."""

    def __init__(self, message: str, *, value: Any) -> None:
        super().__init__(message)
        self.value = value


class UnknownEnumMember(EnumJsonError):
    """A string was given but it does not match any member name of the enum."""

    def __init__(self, enum_class: type, name: str) -> None:
        super().__init__(f'unknown {enum_class.__name__} member: {name!r}')
        self.enum_class = enum_class
        self.name = name
