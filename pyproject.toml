[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsp56k-tables"
version = "0.1.0"
description = "DSP56300 opcode tables, field decoding and small container utilities for emulators"
requires-python = ">=3.10"
dependencies = []
keywords = ["dsp56k", "dsp56300", "emulator", "opcode", "disassembler", "ring buffer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dsp56k_tables"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
