# innoutil

A small library of helpers for decoding installer metadata and showing it to
people. It needs nothing beyond the standard library.

## Modules

- `innoutil.endian` covers fixed-size integers in a chosen byte order.
  - The `Endian` enum has the members `LITTLE` and `BIG`, and `native_order()`
    returns the order of the running machine.
  - `byteswap(value, size, signed)` reverses the bytes of a `size`-byte
    integer.
  - `load(buffer, size, order, signed)` and
    `load_array(buffer, size, count, order, signed)` read integers. They raise
    `ValueError` when the buffer is too short.
  - `store(value, size, order)` and `store_array(values, size, order)` write
    integers. Negative values are written in two's complement. A value that
    does not fit raises `OverflowError`.
- `innoutil.flags` covers sets of enum members.
  - `FlagSet(enum_type, members)` is an immutable set of members of one enum.
    It supports `|`, `&`, `^` and `~`, as well as `has`, `has_all`, `len`, `in`
    and truth testing. Iterating over it yields members in the order the enum
    declares them. `FlagSet.all(enum_type)` holds every member.
  - Combining flags of different enum types raises `TypeError`.
  - `format_enum(value, enum_type)` returns the member name, or
    `(unknown:N)` when the value is not a member.
  - `format_flags(flags)` returns the names of the set flags joined by `", "`,
    or `(none)` when the set is empty.
- `innoutil.ansi` parses CSI escape sequences incrementally.
  - To use `AnsiConsoleParser`, subclass it and implement `handle_text(text)`
    and `handle_command(command, codes)`.
  - `write(data)` takes bytes. A sequence may be split across calls to
    `write`. Both ESC `[` and the UTF-8 CSI (`\xc2\x9b`) are recognised.
  - `command` is a `CommandType` member when the final character is known,
    and otherwise the final character as a string.
  - `read_codes(codes)` splits the `;`-separated codes. An empty code counts
    as `0`. A code that is not a number becomes `None`.
- `innoutil.output` formats values as text.
  - `quoted(text)` puts the text in double quotes and shows control characters
    other than tab, CR and LF as `<xx>`.
  - `if_not_empty(name, value)`, `if_not_equal(name, value, excluded)` and
    `if_not_zero(name, value)` return a `name: value` line, or an empty string.
    `if_not_empty` gives the size instead when the value is longer than 100
    bytes.
  - `print_hex(value)` gives `0x` followed by lower-case hex digits.
  - `print_hex_string(data)` gives two hex digits for each byte.
  - `print_bytes(value, precision)` gives a size with a binary unit, from `B`
    up to `YiB`.

## Example

```python
from enum import Enum

from innoutil.ansi import AnsiConsoleParser, read_codes
from innoutil.endian import Endian, load, store
from innoutil.flags import FlagSet, format_flags
from innoutil.output import print_bytes, quoted

assert load(b"\x01\x02", 2, Endian.LITTLE, False) == 0x0201
assert store(0x0201, 2, Endian.BIG) == b"\x02\x01"

class Option(Enum):
    HIDDEN = 0
    READONLY = 1
    SYSTEM = 2

opts = FlagSet(Option, [Option.SYSTEM, Option.HIDDEN])
print(format_flags(opts))        # HIDDEN, SYSTEM
print(print_bytes(1536, 3))      # 1.5 KiB
print(quoted("a\x01b"))          # "a<01>b"

class Collect(AnsiConsoleParser):
    def __init__(self):
        super().__init__()
        self.events = []

    def handle_text(self, text):
        self.events.append(text)

    def handle_command(self, command, codes):
        self.events.append((command, read_codes(codes)))

parser = Collect()
parser.write(b"plain \x1b[1;3")
parser.write(b"1mred")
# parser.events: [b"plain ", (CommandType.SGR, [1, 31]), b"red"]
```

## What it does not do

This package only works on bytes and values that are already in memory. It
does not read packed enums, bitfields or character sets from a binary stream.
It does not offer general integer helpers such as rotation, alignment checks
or rounded division. It has no command-line program.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```