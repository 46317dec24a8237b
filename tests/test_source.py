import io

import pytest

from deskcalc.source import CharSource, StreamSource, StringSource


def read_all(source: CharSource) -> str:
    chars: list[str] = []
    while ch := source.read():
        chars.append(ch)
    return "".join(chars)


class TestStringSource:
    def test_read_until_exhausted(self) -> None:
        source = StringSource("ab")
        assert read_all(source) == "ab"
        assert source.read() == ""
        assert source.read() == ""

    def test_unread_one_character(self) -> None:
        source = StringSource("ab")
        ch = source.read()
        source.unread(ch)
        assert read_all(source) == "ab"

    def test_unread_empty_is_ignored(self) -> None:
        source = StringSource("")
        source.unread("")
        assert source.read() == ""

    def test_unread_twice_is_rejected(self) -> None:
        source = StringSource("ab")
        source.unread(source.read())
        with pytest.raises(ValueError):
            source.unread("x")

    def test_line_numbers(self) -> None:
        source = StringSource("a\nb")
        assert source.line == 1
        source.read()
        source.read()
        assert source.line == 2
        source.unread("\n")
        assert source.line == 1


class TestStreamSource:
    def test_reads_stream(self) -> None:
        assert read_all(StreamSource(io.StringIO("1 + 2\n"))) == "1 + 2\n"

    def test_prompt_before_each_line(self) -> None:
        out = io.StringIO()
        source = StreamSource(io.StringIO("1\n2\n"), prompt="> ", prompt_stream=out)
        assert read_all(source) == "1\n2\n"
        assert out.getvalue() == "> > > "

    def test_close_only_owned_streams(self) -> None:
        stream = io.StringIO("x")
        StreamSource(stream).close()
        assert not stream.closed
        StreamSource(stream, owns_stream=True).close()
        assert stream.closed
