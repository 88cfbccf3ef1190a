[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dumpasmsym"
version = "1.0.0"
description = "Extract symbols from assembler and linker output files and emit them as binary, assembly or C definitions"
requires-python = ">=3.10"
dependencies = []
keywords = ["assembler", "symbols", "vasm", "vlink", "psy-q", "linker", "retro"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Assemblers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dumpasmsym = "dumpasmsym.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dumpasmsym"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
