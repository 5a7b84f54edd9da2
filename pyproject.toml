[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "innoutil"
version = "0.1.0"
description = "Low-level helpers for installer data: byte order, enum flag sets, ANSI escape parsing and output formatting"
requires-python = ">=3.10"
dependencies = []
keywords = ["endianness", "flags", "enum", "ansi", "escape-sequences", "binary", "formatting"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["innoutil"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
