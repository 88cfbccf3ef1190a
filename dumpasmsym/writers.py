"""Writers for the binary, assembly and C symbol output formats."""

from __future__ import annotations

from .formatting import format_value
from .model import SymbolError

_ENCODING = "latin-1"
_DASHES = "-" * 78
_SIGNATURE = b"BSYM"


def _cannot_write(path, exc: OSError) -> SymbolError:
    error = SymbolError(f'Cannot open "{path}" for writing.')
    error.__cause__ = exc
    return error


def name_column_width(symbols) -> int:
    """Return the padded column width that fits every symbol name.

    The longest name is rounded down to a multiple of 8 and a full tab
    stop of 8 is added, so there is always room after the name.
    """
    longest = max((len(symbol.name) for symbol in symbols), default=0)
    return (longest & ~7) + 8


def _string_field(text) -> bytes:
    raw = str(text).encode(_ENCODING, errors="replace")
    size = len(raw) & 0xFF
    return bytes([size]) + raw[:size]


def _number_field(value: int, size: int) -> bytes:
    return (value & ((1 << (size * 8)) - 1)).to_bytes(size, "little")


def write_binary(path, symbols, input_files) -> None:
    """Write symbols and the names of their source files in the BSYM format."""
    symbols = list(symbols)
    input_files = list(input_files)

    parts = [_SIGNATURE, _number_field(len(symbols), 4)]
    for symbol in symbols:
        parts.append(_string_field(symbol.name))
        parts.append(_number_field(symbol.value, 8))
    parts.append(_number_field(len(input_files), 4))
    parts.extend(_string_field(name) for name in input_files)

    try:
        with open(path, "wb") as handle:
            handle.write(b"".join(parts))
    except OSError as exc:
        raise _cannot_write(path, exc) from exc


def _render(symbols, input_files, comment, line_for) -> str:
    rule = f"{comment} {_DASHES}"
    if not input_files:
        return f"{rule}\n{comment} No valid symbol files found\n{rule}"

    width = name_column_width(symbols)
    lines = [rule, f"{comment} Symbols extracted from"]
    lines.extend(f"{comment} {name}" for name in input_files)
    lines.extend([rule, ""])
    lines.extend(line_for(symbol, width) for symbol in symbols)
    lines.extend(["", rule])
    return "\n".join(lines)


def _write_text(path, text: str) -> None:
    try:
        with open(path, "w", encoding=_ENCODING, errors="replace") as handle:
            handle.write(text)
    except OSError as exc:
        raise _cannot_write(path, exc) from exc


def write_asm(path, symbols, input_files, value_type, number_base) -> None:
    """Write symbols as assembler ``equ`` definitions."""
    symbols = list(symbols)
    input_files = [str(name) for name in input_files]

    def line_for(symbol, width):
        value = format_value(symbol.value, "$", "%", value_type, number_base)
        return f"{symbol.name.ljust(width)}equ {value}"

    _write_text(path, _render(symbols, input_files, ";", line_for))


def write_c(path, symbols, input_files, value_type, number_base) -> None:
    """Write symbols as C preprocessor ``#define`` lines."""
    symbols = list(symbols)
    input_files = [str(name) for name in input_files]

    def line_for(symbol, width):
        value = format_value(symbol.value, "0x", "0b", value_type, number_base)
        return f"#define {symbol.name.ljust(width)} ({value})"

    _write_text(path, _render(symbols, input_files, "//", line_for))