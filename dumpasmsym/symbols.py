"""Symbol collection: filtering, merging from input files and output."""

from __future__ import annotations

from dataclasses import dataclass, field

from . import readers, writers
from .model import OutputMode, Symbol, SymbolError

_READERS = (
    readers.read_binary,
    readers.read_psyq,
    readers.read_vasm_lst,
    readers.read_vasm_vobj,
    readers.read_vlink_sym,
)


@dataclass
class SymbolFilter:
    """Include and exclude rules deciding which symbol names are kept."""

    symbol_includes: list[str] = field(default_factory=list)
    prefix_includes: list[str] = field(default_factory=list)
    suffix_includes: list[str] = field(default_factory=list)
    symbol_excludes: list[str] = field(default_factory=list)
    prefix_excludes: list[str] = field(default_factory=list)
    suffix_excludes: list[str] = field(default_factory=list)

    def accepts(self, name) -> bool:
        """Return whether ``name`` passes the rules.

        Later rules override earlier ones: prefix and suffix includes, then
        prefix and suffix excludes, then exact includes, then exact excludes.
        """
        keep = not (self.symbol_includes or self.prefix_includes or self.suffix_includes)
        if any(name.startswith(prefix) for prefix in self.prefix_includes):
            keep = True
        if any(name.endswith(suffix) for suffix in self.suffix_includes):
            keep = True
        if any(name.startswith(prefix) for prefix in self.prefix_excludes):
            keep = False
        if any(name.endswith(suffix) for suffix in self.suffix_excludes):
            keep = False
        if name in self.symbol_includes:
            keep = True
        if name in self.symbol_excludes:
            keep = False
        return keep


class SymbolTable:
    """Symbols merged from any number of input files."""

    def __init__(self, symbol_filter: SymbolFilter | None = None):
        self.filter = symbol_filter if symbol_filter is not None else SymbolFilter()
        self.input_files: list[str] = []
        self._symbols: dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._symbols)

    def __contains__(self, name) -> bool:
        return name in self._symbols

    def add(self, name, value) -> None:
        """Add a symbol if the filter keeps it; conflicting values are an error."""
        if not self.filter.accepts(name):
            return
        existing = self._symbols.setdefault(name, value)
        if existing != value:
            raise SymbolError(f'Multiple definitions of symbol "{name}" detected.')

    def load(self, path) -> None:
        """Read symbols from ``path``, detecting its format."""
        self.input_files.append(str(path))
        for reader in _READERS:
            found = reader(path)
            if found is not None:
                for symbol in found:
                    self.add(symbol.name, symbol.value)
                return
        raise SymbolError(f'"{path}" is not a valid file.')

    def sorted_symbols(self) -> list[Symbol]:
        """Return the symbols ordered by value."""
        symbols = [Symbol(name, value) for name, value in self._symbols.items()]
        return sorted(symbols, key=lambda symbol: symbol.value)

    def write(self, path, value_type, number_base, output_mode) -> None:
        """Write the sorted symbols to ``path`` in the chosen output mode."""
        symbols = self.sorted_symbols()
        if output_mode is OutputMode.BINARY:
            writers.write_binary(path, symbols, self.input_files)
        elif output_mode is OutputMode.ASM:
            writers.write_asm(path, symbols, self.input_files, value_type, number_base)
        else:
            writers.write_c(path, symbols, self.input_files, value_type, number_base)