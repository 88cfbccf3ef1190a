import pytest

from dumpasmsym.formatting import format_value
from dumpasmsym.model import NumberBase, Symbol, SymbolError, ValueType
from dumpasmsym.readers import read_binary
from dumpasmsym.writers import name_column_width, write_asm, write_binary, write_c

SYMBOLS = [Symbol("start", 0x100), Symbol("a_much_longer_name", -4), Symbol("x", 0)]


def test_column_width_of_no_symbols():
    assert name_column_width([]) == 8


@pytest.mark.parametrize("length", range(0, 30))
def test_column_width_invariants(length):
    width = name_column_width([Symbol("n" * length, 0), Symbol("y", 1)])
    longest = max(length, 1)
    assert width % 8 == 0
    assert longest < width <= longest + 8


def test_binary_round_trip(tmp_path):
    path = tmp_path / "out.bsym"
    write_binary(path, SYMBOLS, ["one.sym", "two.sym"])
    assert path.read_bytes().startswith(b"BSYM")
    assert read_binary(path) == SYMBOLS


def test_binary_ends_with_input_file_names(tmp_path):
    path = tmp_path / "out.bsym"
    write_binary(path, SYMBOLS, ["one.sym"])
    data = path.read_bytes()
    assert data.endswith(bytes([len("one.sym")]) + b"one.sym")


def test_binary_empty(tmp_path):
    path = tmp_path / "empty.bsym"
    write_binary(path, [], [])
    assert path.read_bytes() == b"BSYM" + bytes(8)
    assert read_binary(path) == []


def test_asm_without_inputs(tmp_path):
    path = tmp_path / "out.asm"
    write_asm(path, [], [], ValueType.UNSIGNED32, NumberBase.HEX)
    lines = path.read_text(encoding="latin-1").split("\n")
    assert lines[1] == "; No valid symbol files found"
    assert lines[0] == lines[2]
    assert lines[0].startswith("; ---")


def test_asm_lines(tmp_path):
    path = tmp_path / "out.asm"
    write_asm(path, SYMBOLS, ["in.sym"], ValueType.SIGNED32, NumberBase.HEX)
    text = path.read_text(encoding="latin-1")
    lines = text.split("\n")
    width = name_column_width(SYMBOLS)
    assert lines[1] == "; Symbols extracted from"
    assert lines[2] == "; in.sym"
    for symbol in SYMBOLS:
        expected = symbol.name.ljust(width) + "equ " + format_value(
            symbol.value, "$", "%", ValueType.SIGNED32, NumberBase.HEX
        )
        assert expected in lines
    assert lines[-1] == lines[0]
    assert not text.endswith("\n")


def test_c_lines(tmp_path):
    path = tmp_path / "out.h"
    write_c(path, SYMBOLS, ["in.sym"], ValueType.UNSIGNED64, NumberBase.BINARY)
    lines = path.read_text(encoding="latin-1").split("\n")
    width = name_column_width(SYMBOLS)
    assert lines[1] == "// Symbols extracted from"
    assert lines[2] == "// in.sym"
    for symbol in SYMBOLS:
        value = format_value(symbol.value, "0x", "0b", ValueType.UNSIGNED64, NumberBase.BINARY)
        assert f"#define {symbol.name.ljust(width)} ({value})" in lines


def test_c_without_inputs(tmp_path):
    path = tmp_path / "out.h"
    write_c(path, SYMBOLS, [], ValueType.UNSIGNED32, NumberBase.HEX)
    lines = path.read_text(encoding="latin-1").split("\n")
    assert lines[1] == "// No valid symbol files found"
    assert lines[0] == lines[2]


@pytest.mark.parametrize("writer", ["binary", "asm", "c"])
def test_unwritable_path(tmp_path, writer):
    with pytest.raises(SymbolError, match="for writing"):
        if writer == "binary":
            write_binary(tmp_path, SYMBOLS, [])
        elif writer == "asm":
            write_asm(tmp_path, SYMBOLS, [], ValueType.UNSIGNED32, NumberBase.HEX)
        else:
            write_c(tmp_path, SYMBOLS, [], ValueType.UNSIGNED32, NumberBase.HEX)