"""Rendering of symbol values for text output."""

from __future__ import annotations

from .model import NumberBase, ValueType

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def format_value(value, hex_prefix, bin_prefix, value_type, number_base):
    """Render ``value`` as text according to the value type and number base.

    Signed types get a leading ``-`` or a space; 32-bit types are truncated
    to their low 32 bits before rendering.
    """
    sign = ""
    if value_type.signed:
        if value < 0:
            sign = "-"
            value = -value
        else:
            sign = " "

    if value_type.bits == 32:
        value &= _MASK32

    if number_base is NumberBase.HEX:
        return f"{sign}{hex_prefix}{value & _MASK64:X}"
    if number_base is NumberBase.DECIMAL:
        return f"{sign}{value}"

    width = value_type.bits
    mask = _MASK32 if width == 32 else _MASK64
    return f"{sign}{bin_prefix}{value & mask:0{width}b}"


__all__ = ["format_value", "ValueType", "NumberBase"]