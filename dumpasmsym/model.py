"""Core data types shared by the symbol readers, writers and command line."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SymbolError(Exception):
    """Raised when symbols cannot be read, merged or written."""


@dataclass(frozen=True)
class Symbol:
    """A named symbol value."""

    name: str
    value: int


def _parse_choice(enum_cls, text, label):
    """Return the member of ``enum_cls`` whose value is ``text``, ignoring case."""
    try:
        return enum_cls(text.lower())
    except ValueError:
        raise SymbolError(f'Invalid {label} "{text}"') from None


class ValueType(Enum):
    """How symbol values are interpreted in text output."""

    UNSIGNED32 = "u32"
    UNSIGNED64 = "u64"
    SIGNED32 = "s32"
    SIGNED64 = "s64"

    @classmethod
    def parse(cls, text):
        """Return the value type named by ``text``, ignoring case."""
        return _parse_choice(cls, text, "value type")

    @property
    def signed(self) -> bool:
        return self in (ValueType.SIGNED32, ValueType.SIGNED64)

    @property
    def bits(self) -> int:
        return 32 if self in (ValueType.UNSIGNED32, ValueType.SIGNED32) else 64


class NumberBase(Enum):
    """Numerical system used for values in text output."""

    HEX = "hex"
    DECIMAL = "dec"
    BINARY = "bin"

    @classmethod
    def parse(cls, text):
        """Return the number base named by ``text``, ignoring case."""
        return _parse_choice(cls, text, "numerical system")


class OutputMode(Enum):
    """Kind of output file to produce."""

    BINARY = "bin"
    ASM = "asm"
    C = "c"

    @classmethod
    def parse(cls, text):
        """Return the output mode named by ``text``, ignoring case."""
        return _parse_choice(cls, text, "output mode")