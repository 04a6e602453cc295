from dataclasses import dataclass, field
from enum import Enum, IntEnum, IntFlag
from typing import Optional


class AccessType(IntEnum):
    Read = 0
    Write = 1
    Admin = 2


class Color(Enum):
    Red = 'r'
    Green = 'g'
    Blue = 'b'
    # alias of Red, it has no name of its own on the wire
    Crimson = 'r'


class Permission(IntFlag):
    Execute = 1
    Write = 2
    Read = 4


@dataclass(frozen=True)
class NonNullEnum:
    Access1: AccessType
    Access2: AccessType
    Access3: AccessType


@dataclass(frozen=True)
class NullableEnum:
    Access1: AccessType | None
    Access2: Optional[AccessType]
    Access3: None | AccessType


@dataclass(frozen=True)
class Grant:
    user: str
    access: AccessType
    colors: list[Color] = field(default_factory=list)
    fallback: AccessType | None = None
    weight: float = 1.0
    active: bool = True


@dataclass(frozen=True)
class Policy:
    name: str
    grants: list[Grant]
    level: int | None = None
