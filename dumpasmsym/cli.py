"""Command line entry point."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field

from .model import NumberBase, OutputMode, SymbolError, ValueType
from .symbols import SymbolFilter, SymbolTable

USAGE = """\
Usage: dumpasmsym -o [output] <-m [mode]> <-v [type]> <-b [base]> <-iy [symbol]> <-xy [symbol]>
                  <-ip [prefix]> <-xp [prefix]> <-is [suffix]> <-xs [suffix]> [input files]

           -o [output]     - Output file
           <-m [mode]>     - Output mode
                             bin - Binary (default)
                             asm - Assembly
                             c   - C
           <-v [type]>     - Value type (TEXT OUTPUT MODE ONLY)
                             u32 - Unsigned 32-bit (default)
                             u64 - Unsigned 64-bit
                             s32 - Signed 32-bit
                             s64 - Signed 64-bit
           <-b [base]>     - Numerical system (TEXT OUTPUT MODE ONLY)
                             hex - Hexadecimal (default)
                             dec - Decimal
                             bin - Binary
           <-iy [symbol]>  - Only include symbol
           <-xy [symbol]>  - Exclude symbol
           <-ip [prefix]>  - Only include symbols with prefix
           <-xp [prefix]>  - Exclude symbols with prefix
           <-is [suffix]>  - Only include symbols with suffix
           <-xs [suffix]>  - Exclude symbols with suffix
           [input files]   - List of input files

Valid input file formats:

           Binary file generated from this tool
           Psy-Q symbol file
           vasm vobj file
           vasm vlink symbol file (default format only)
"""

_FILTER_OPTIONS = {
    "iy": "symbol_includes",
    "xy": "symbol_excludes",
    "ip": "prefix_includes",
    "xp": "prefix_excludes",
    "is": "suffix_includes",
    "xs": "suffix_excludes",
}
_OPTIONS = {"o", "m", "v", "b", *_FILTER_OPTIONS}


@dataclass
class _Options:
    input_files: list[str] = field(default_factory=list)
    output_file: str = ""
    output_mode: OutputMode = OutputMode.BINARY
    value_type: ValueType = ValueType.UNSIGNED32
    number_base: NumberBase = NumberBase.HEX
    filter: SymbolFilter = field(default_factory=SymbolFilter)


def parse_args(argv):
    """Parse command line arguments into options; raises SymbolError on misuse."""
    options = _Options()
    args = iter(argv)
    for arg in args:
        option = arg[1:] if arg.startswith("-") else None
        if option not in _OPTIONS:
            options.input_files.append(arg)
            continue

        try:
            param = next(args)
        except StopIteration:
            raise SymbolError(f'Missing parameter for "-{option}"') from None

        if option == "o":
            if options.output_file:
                raise SymbolError("Output file already defined.")
            options.output_file = param
        elif option == "m":
            options.output_mode = OutputMode.parse(param)
        elif option == "v":
            options.value_type = ValueType.parse(param)
        elif option == "b":
            options.number_base = NumberBase.parse(param)
        else:
            getattr(options.filter, _FILTER_OPTIONS[option]).append(param)

    if not options.input_files:
        raise SymbolError("Input symbol files not defined.")
    if not options.output_file:
        raise SymbolError("Output symbol file not defined.")
    return options


def main(argv=None) -> int:
    """Run the tool; returns the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        print(USAGE)
        return -1

    try:
        options = parse_args(argv)
        table = SymbolTable(options.filter)
        for input_file in options.input_files:
            table.load(input_file)
        table.write(options.output_file, options.value_type, options.number_base, options.output_mode)
    except (SymbolError, OSError) as exc:
        print(f"Error: {exc}")
        return -1
    return 0


if __name__ == "__main__":
    sys.exit(main())