from __future__ import annotations

import io
from typing import Tuple

import pytest

from jbshell.editor import (
    ERASE_SEQUENCE,
    InputBuffer,
    LineEditor,
    ReadOutcome,
)
from jbshell.keys import ERASE_EVENT, IGNORED_EVENT, KeyEvent
from jbshell.terminal import CodePointSource, prepare_stream


def make_editor(keys: str) -> Tuple[LineEditor, io.StringIO]:
    output = io.StringIO()
    editor = LineEditor(CodePointSource(io.StringIO(keys)), output)
    return editor, output


def expected_line(keys: str) -> str:
    """Reference model: printables appended, erases pop, left to right."""

    line: list[str] = []
    for char in keys:
        if char in "\b\x7f":
            if line:
                line.pop()
        else:
            line.append(char)
    return "".join(line)


def test_submit_returns_typed_line() -> None:
    editor, output = make_editor("ls -la\r")

    result = editor.edit_loop()

    assert result.outcome is ReadOutcome.OK
    assert result.text == "ls -la"
    assert output.getvalue() == "ls -la\r\n"


def test_line_feed_also_submits() -> None:
    editor, _ = make_editor("pwd\n")

    assert editor.edit_loop().text == "pwd"


def test_erase_removes_last_code_point_and_rubs_out() -> None:
    editor, output = make_editor("abc\x7f\x7fd\r")

    result = editor.edit_loop()

    assert result.text == "ad"
    assert output.getvalue() == "abc" + ERASE_SEQUENCE * 2 + "d\r\n"


def test_erase_on_empty_buffer_is_silent() -> None:
    editor, output = make_editor("\x7f\b\r")

    result = editor.edit_loop()

    assert result.text == ""
    assert output.getvalue() == "\r\n"


@pytest.mark.parametrize(
    "keys",
    [
        "hello",
        "helo\x7flo",
        "\x7fabc\b\b\bxyz",
        "a b\x7f\x7f\x7f\x7fc",
        "x\x7f",
    ],
)
def test_line_matches_printables_minus_erases(keys: str) -> None:
    editor, _ = make_editor(keys + "\r")

    assert editor.edit_loop().text == expected_line(keys)


def test_interrupt_discards_partial_line() -> None:
    editor, output = make_editor("rm -rf\x03")

    result = editor.edit_loop()

    assert result.outcome is ReadOutcome.INTERRUPTED
    assert result.text == ""
    assert output.getvalue() == "rm -rf"
    assert len(editor.buffer) == 0


def test_read_after_interrupt_starts_empty() -> None:
    editor, _ = make_editor("abc\x03xy\r")

    first = editor.edit_loop()
    second = editor.edit_loop()

    assert first.outcome is ReadOutcome.INTERRUPTED
    assert second.outcome is ReadOutcome.OK
    assert second.text == "xy"


def test_arrow_keys_and_tab_do_not_reach_the_line() -> None:
    editor, output = make_editor("a\x1b[Ab\x1b[D\tc\r")

    result = editor.edit_loop()

    assert result.text == "abc"
    assert output.getvalue() == "abc\r\n"


def test_end_of_input_is_io_error() -> None:
    editor, output = make_editor("partial")

    result = editor.edit_loop()

    assert result.outcome is ReadOutcome.IO_ERROR
    assert result.text == ""
    assert result.error is not None and result.error.eof
    assert output.getvalue() == "partial"


def test_end_of_input_inside_escape_is_io_error() -> None:
    editor, _ = make_editor("ab\x1b[")

    assert editor.edit_loop().outcome is ReadOutcome.IO_ERROR


def test_invalid_utf8_byte_becomes_replacement_char() -> None:
    stream = io.TextIOWrapper(io.BytesIO(b"ab\xffc\r"), encoding="utf-8")
    prepare_stream(stream)
    output = io.StringIO()
    editor = LineEditor(CodePointSource(stream), output)

    result = editor.edit_loop()

    assert result.outcome is ReadOutcome.OK
    assert result.text == "ab\ufffdc"
    assert output.getvalue() == "ab\ufffdc\r\n"


def test_carriage_return_is_not_held_for_newline_translation() -> None:
    stream = io.TextIOWrapper(io.BytesIO(b"ls\rpwd\r"), encoding="utf-8")
    prepare_stream(stream)
    source = CodePointSource(stream)

    assert [source.read() for _ in range(7)] == list("ls\rpwd\r")


def test_prepare_stream_leaves_a_stream_that_was_already_read() -> None:
    stream = io.TextIOWrapper(io.BytesIO(b"abc"), encoding="utf-8")
    assert stream.read(1) == "a"

    prepare_stream(stream)

    assert stream.read(1) == "b"


def test_decode_error_from_stream_yields_replacement_char() -> None:
    class BrokenStream(io.StringIO):
        def read(self, size: int | None = -1) -> str:
            raise UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")

    assert CodePointSource(BrokenStream()).read() == "\ufffd"


def test_apply_echoes_before_returning() -> None:
    editor, output = make_editor("")

    assert editor.apply(KeyEvent.printable("q")) is None
    assert output.getvalue() == "q"
    assert editor.apply(ERASE_EVENT) is None
    assert output.getvalue() == "q" + ERASE_SEQUENCE
    assert editor.apply(IGNORED_EVENT) is None
    assert output.getvalue() == "q" + ERASE_SEQUENCE


def test_input_buffer_pop_and_take() -> None:
    buffer = InputBuffer("ab")

    assert buffer.pop() == "b"
    buffer.append("c")
    assert buffer.take() == "ac"
    assert buffer.pop() is None
    assert not buffer


def test_input_buffer_rejects_multiple_code_points() -> None:
    with pytest.raises(ValueError):
        InputBuffer().append("ab")
