import pytest

from dumpasmsym.model import NumberBase, OutputMode, Symbol, SymbolError, ValueType


@pytest.mark.parametrize(
    "text, expected",
    [
        ("u32", ValueType.UNSIGNED32),
        ("U64", ValueType.UNSIGNED64),
        ("s32", ValueType.SIGNED32),
        ("S64", ValueType.SIGNED64),
    ],
)
def test_value_type_parse(text, expected):
    assert ValueType.parse(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [("hex", NumberBase.HEX), ("DEC", NumberBase.DECIMAL), ("Bin", NumberBase.BINARY)],
)
def test_number_base_parse(text, expected):
    assert NumberBase.parse(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [("bin", OutputMode.BINARY), ("ASM", OutputMode.ASM), ("c", OutputMode.C)],
)
def test_output_mode_parse(text, expected):
    assert OutputMode.parse(text) is expected


def test_invalid_value_type_message_keeps_original_text():
    with pytest.raises(SymbolError, match='Invalid value type "X16"'):
        ValueType.parse("X16")


def test_invalid_number_base():
    with pytest.raises(SymbolError, match='Invalid numerical system "oct"'):
        NumberBase.parse("oct")


def test_invalid_output_mode():
    with pytest.raises(SymbolError, match='Invalid output mode "elf"'):
        OutputMode.parse("elf")


@pytest.mark.parametrize(
    "text, signed, bits",
    [("u32", False, 32), ("u64", False, 64), ("s32", True, 32), ("s64", True, 64)],
)
def test_value_type_properties(text, signed, bits):
    value_type = ValueType.parse(text)
    assert value_type.signed is signed
    assert value_type.bits == bits


def test_symbol_fields_and_immutability():
    symbol = Symbol("start", 5)
    assert (symbol.name, symbol.value) == ("start", 5)
    assert symbol == Symbol("start", 5)
    assert symbol != Symbol("start", 6)
    with pytest.raises(AttributeError):
        symbol.value = 6
    assert symbol.value == 5