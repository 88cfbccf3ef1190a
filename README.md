# dumpasmsym

Collects symbols from the output of assemblers and linkers and writes them
out again as a compact binary file, an assembly include file or a C header.

Recognised input formats, detected automatically and tried in this order:

- binary symbol files written by this tool (`BSYM` signature)
- Psy-Q symbol files (`MND` signature, version 1; symbol types 1 and 2 are kept)
- vasm listing files (the lines after "Symbols by value:")
- vasm vobj object files (`VOBJ` signature; absolute symbols only)
- vlink symbol files (default `value:name` format only)

## Installation

```
pip install .
```

## Usage

```
dumpasmsym -o OUTPUT [-m MODE] [-v TYPE] [-b BASE]
           [-iy SYMBOL] [-xy SYMBOL] [-ip PREFIX] [-xp PREFIX]
           [-is SUFFIX] [-xs SUFFIX] INPUT...
```

| Option        | Meaning                                                          |
|---------------|------------------------------------------------------------------|
| `-o OUTPUT`   | Output file (required, may be given only once)                   |
| `-m MODE`     | `bin` (default), `asm` or `c`                                    |
| `-v TYPE`     | Value type for text output: `u32` (default), `u64`, `s32`, `s64` |
| `-b BASE`     | Number base for text output: `hex` (default), `dec`, `bin`       |
| `-iy SYMBOL`  | Include only this symbol                                         |
| `-xy SYMBOL`  | Exclude this symbol                                              |
| `-ip PREFIX`  | Include only symbols starting with the prefix                    |
| `-xp PREFIX`  | Exclude symbols starting with the prefix                         |
| `-is SUFFIX`  | Include only symbols ending with the suffix                      |
| `-xs SUFFIX`  | Exclude symbols ending with the suffix                           |

Mode, type and base names are not case sensitive. The filter options may be
repeated; `-m`, `-v` and `-b` may be given again, the last one wins. Any other
argument is taken as an input file.

Filter rules are applied in order, each later rule overriding the earlier
ones: prefix and suffix includes, prefix and suffix excludes, exact includes,
exact excludes. With no include rules at all, every symbol is kept unless
excluded.

Symbols are written sorted by value. A symbol that appears more than once
with different values is an error. In signed text output a positive value is
preceded by a space and a negative one by `-`; 32-bit types keep only the low
32 bits. Assembly output uses `$` and `%` prefixes, C output `0x` and `0b`.

Run with no arguments, the command prints its usage. On any error it prints
`Error: <message>` and exits with status -1 (255 on most systems).

Example: write the symbols starting with `Obj` from two vasm listings as
signed 32-bit hexadecimal constants in an assembly include file:

```
dumpasmsym -o objects.inc -m asm -v s32 -ip Obj main.lst sub.lst
```

Each symbol becomes a line such as:

```
ObjPlayer       equ  $FF0000
```

The binary output (`-m bin`) holds the symbols followed by the names of the
input files; it can be read back in as an input file.

## Library use

```python
from dumpasmsym.model import NumberBase, OutputMode, ValueType
from dumpasmsym.symbols import SymbolFilter, SymbolTable

table = SymbolTable(SymbolFilter(prefix_includes=["Obj"]))
table.load("program.lst")
for symbol in table.sorted_symbols():
    print(symbol.name, symbol.value)
table.write("symbols.h", ValueType.UNSIGNED32, NumberBase.HEX, OutputMode.C)
```

- `dumpasmsym.readers` has one function per input format (`read_binary`,
  `read_psyq`, `read_vasm_lst`, `read_vasm_vobj`, `read_vlink_sym`); each
  returns a list of `Symbol` or `None` when the file is not in its format.
- `dumpasmsym.writers` has `write_binary`, `write_asm` and `write_c`.
- `dumpasmsym.formatting.format_value` renders a single value as text.
- `dumpasmsym.cli.parse_args` and `dumpasmsym.cli.main` implement the command.

Errors in input, options or symbol definitions are raised as
`dumpasmsym.model.SymbolError`.