"""Read assembler and linker symbol files and write them as binary, assembly or C definitions."""

__version__ = "1.0.0"
__all__ = ["cli", "formatting", "model", "readers", "symbols", "writers"]