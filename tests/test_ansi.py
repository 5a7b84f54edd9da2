import pytest

from innoutil.ansi import AnsiConsoleParser, CommandType, read_codes


class Recorder(AnsiConsoleParser):
    def __init__(self):
        super().__init__()
        self.events = []

    def handle_text(self, text):
        if self.events and self.events[-1][0] == "text":
            self.events[-1] = ("text", self.events[-1][1] + text)
        else:
            self.events.append(("text", text))

    def handle_command(self, command, codes):
        self.events.append(("cmd", command, codes))


def test_plain_text_passes_through():
    parser = Recorder()
    assert AnsiConsoleParser.write(parser, b"hello") == 5
    assert parser.events == [("text", b"hello")]


def test_sgr_sequence_between_text():
    parser = Recorder()
    data = b"a\x1b[1;31mb"
    assert AnsiConsoleParser.write(parser, data) == len(data)
    assert parser.events == [
        ("text", b"a"),
        ("cmd", CommandType.SGR, b"1;31"),
        ("text", b"b"),
    ]
    assert read_codes(parser.events[1][2]) == [1, 31]


def test_sequence_split_across_writes():
    parser = Recorder()
    for chunk in (b"a\x1b[1", b";3", b"2mb"):
        AnsiConsoleParser.write(parser, chunk)
    assert parser.events == [
        ("text", b"a"),
        ("cmd", CommandType.SGR, b"1;32"),
        ("text", b"b"),
    ]
    assert read_codes(parser.events[1][2]) == [1, 32]


def test_split_right_after_escape():
    parser = Recorder()
    AnsiConsoleParser.write(parser, b"x\x1b")
    AnsiConsoleParser.write(parser, b"[2Jy")
    assert parser.events == [
        ("text", b"x"),
        ("cmd", CommandType.ED, b"2"),
        ("text", b"y"),
    ]


def test_utf8_csi():
    parser = Recorder()
    AnsiConsoleParser.write(parser, b"\xc2\x9b2J")
    assert parser.events == [("cmd", CommandType.ED, b"2")]
    assert read_codes(parser.events[0][2]) == [2]


def test_utf8_lead_byte_that_is_not_csi_is_text():
    parser = Recorder()
    AnsiConsoleParser.write(parser, b"\xc2\xa9 x")
    assert parser.events == [("text", b"\xc2\xa9 x")]


def test_escape_without_csi_is_dropped():
    parser = Recorder()
    AnsiConsoleParser.write(parser, b"x\x1bMy")
    assert parser.events == [("text", b"xy")]


def test_unknown_command_char():
    parser = Recorder()
    AnsiConsoleParser.write(parser, b"\x1b[5z")
    assert parser.events == [("cmd", "z", b"5")]
    assert read_codes(parser.events[0][2]) == [5]


def test_command_without_codes():
    parser = Recorder()
    AnsiConsoleParser.write(parser, b"\x1b[H")
    assert parser.events == [("cmd", CommandType.CUP, b"")]
    assert read_codes(parser.events[0][2]) == [0]


@pytest.mark.parametrize(
    "codes, expected",
    [
        (b"1;31", [1, 31]),
        (b"", [0]),
        (b";5", [0, 5]),
        (b"7;", [7, 0]),
        (b"x", [None]),
    ],
)
def test_read_codes(codes, expected):
    assert read_codes(codes) == expected


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        AnsiConsoleParser()