"""Readers for the supported symbol file formats.

Each reader returns the symbols it found, in file order, or ``None`` when the
file is not in its format.
"""

from __future__ import annotations

import io
import re
from pathlib import Path

from .model import Symbol, SymbolError

_ENCODING = "latin-1"
_UINT64_LIMIT = 1 << 64

_NUMBER_PATTERNS = {
    2: re.compile(r"\s*([+-]?)([01]+)"),
    10: re.compile(r"\s*([+-]?)([0-9]+)"),
    16: re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]+)"),
}


def _open_error(path) -> SymbolError:
    return SymbolError(f'Cannot open "{path}" for reading.')


def _load_bytes(path) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise _open_error(path) from exc


def _load_lines(path) -> list[str]:
    try:
        with open(path, encoding=_ENCODING) as handle:
            return handle.read().split("\n")
    except OSError as exc:
        raise _open_error(path) from exc


def _take(stream: io.BytesIO, count: int) -> bytes:
    data = stream.read(count)
    if not data:
        raise SymbolError("Reached end of file prematurely.")
    return data


def _text(data: bytes) -> str:
    return data.split(b"\0", 1)[0].decode(_ENCODING)


def _counted_string(stream: io.BytesIO) -> str:
    length = _take(stream, 1)[0]
    return _text(_take(stream, length))


def _to_int64(value: int) -> int:
    value %= _UINT64_LIMIT
    return value - _UINT64_LIMIT if value >= 1 << 63 else value


def _parse_unsigned(text: str, base: int) -> int | None:
    """Parse the leading number of ``text`` like an unsigned 64-bit conversion."""
    match = _NUMBER_PATTERNS[base].match(text)
    if match is None:
        return None
    magnitude = int(match.group(2), base)
    if magnitude >= _UINT64_LIMIT:
        return None
    if match.group(1) == "-":
        magnitude = -magnitude
    return _to_int64(magnitude)


def read_binary(path) -> list[Symbol] | None:
    """Read a binary symbol file as produced by this tool."""
    data = _load_bytes(path)
    if not data:
        return None
    stream = io.BytesIO(data)
    if _take(stream, 4) != b"BSYM":
        return None

    count = int.from_bytes(_take(stream, 4), "little")
    symbols = []
    for _ in range(count):
        name = _counted_string(stream)
        value = int.from_bytes(_take(stream, 8).ljust(8, b"\0"), "little", signed=True)
        symbols.append(Symbol(name, value))
    return symbols


def read_psyq(path) -> list[Symbol] | None:
    """Read a Psy-Q symbol file."""
    data = _load_bytes(path)
    if not data:
        return None
    stream = io.BytesIO(data)
    if _take(stream, 3) != b"MND":
        return None
    if _take(stream, 1) != b"\x01":
        return None

    stream.seek(8)
    symbols = []
    while stream.tell() < len(data):
        raw = _take(stream, 4).ljust(4, b"\0")
        value = int.from_bytes(raw, "little", signed=True)
        kind = _take(stream, 1)[0]
        name = _counted_string(stream)
        if kind in (1, 2):
            symbols.append(Symbol(name, value))
    return symbols


def read_vasm_lst(path) -> list[Symbol] | None:
    """Read the "Symbols by value" section of a vasm listing file."""
    lines = iter(_load_lines(path))
    if next(lines, "") != "Sections:":
        return None
    if not any(line == "Symbols by value:" for line in lines):
        return None

    symbols = []
    for line in lines:
        if not line:
            continue
        value_text, space, name = line.partition(" ")
        if not space or not value_text or not name:
            return None
        value = _parse_unsigned(value_text, 16)
        if value is None:
            return None
        symbols.append(Symbol(name, value))
    return symbols


def _vobj_number(stream: io.BytesIO, signed: bool = False) -> int:
    first = _take(stream, 1)[0]
    if first <= 0x7F:
        return first
    count = first - 0x80
    if count == 0:
        return 0
    if count > 8:
        raise SymbolError(f"Too many bytes specified for number ({count})")
    raw = _take(stream, count).ljust(count, b"\0")
    return int.from_bytes(raw, "little", signed=signed)


def _vobj_string(stream: io.BytesIO) -> str:
    chars = bytearray()
    while (byte := _take(stream, 1)) != b"\0":
        chars += byte
    return chars.decode(_ENCODING)


def read_vasm_vobj(path) -> list[Symbol] | None:
    """Read the absolute symbols of a vasm VOBJ object file."""
    data = _load_bytes(path)
    if not data:
        return None
    stream = io.BytesIO(data)
    if _take(stream, 4) != b"VOBJ":
        return None
    stream.seek(1, io.SEEK_CUR)

    _vobj_number(stream)  # bits per byte
    _vobj_number(stream)  # bytes per address
    _vobj_string(stream)  # cpu name
    _vobj_number(stream)  # section count
    count = _vobj_number(stream)

    symbols = []
    for _ in range(count):
        name = _vobj_string(stream)
        kind = _vobj_number(stream)
        _vobj_number(stream)  # flags
        _vobj_number(stream)  # section index
        value = _vobj_number(stream, signed=True)
        _vobj_number(stream)  # size
        if kind == 3:
            symbols.append(Symbol(name, value))
    return symbols


def read_vlink_sym(path) -> list[Symbol] | None:
    """Read a vlink symbol file in its default ``value:name`` format."""
    symbols = []
    for line in _load_lines(path):
        if not line:
            continue
        value_text, colon, name = line.partition(":")
        if not colon or not value_text or not name:
            return None
        if "0x" in value_text:
            value = _parse_unsigned(value_text, 16)
        elif "0b" in value_text:
            value = _parse_unsigned(value_text, 2)
        else:
            value = _parse_unsigned(value_text, 10)
        if value is None:
            return None
        symbols.append(Symbol(name, value))
    return symbols