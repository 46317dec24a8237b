import sys
from typing import Optional, Protocol, TextIO


class CharSource(Protocol):
    """
    Character input with exactly one character of push-back.

    ``read()`` returns an empty string once the input is exhausted.
    """

    line: int

    def read(self) -> str:
        ...

    def unread(self, ch: str) -> None:
        ...

    def close(self) -> None:
        ...


class _PushbackSource:
    def __init__(self) -> None:
        self.line = 1
        self._pushed_back: Optional[str] = None

    def read(self) -> str:
        if self._pushed_back is not None:
            ch, self._pushed_back = self._pushed_back, None
        else:
            ch = self._read_char()
        if ch == "\n":
            self.line += 1
        return ch

    def unread(self, ch: str) -> None:
        if not ch:
            return
        if self._pushed_back is not None:
            raise ValueError(f"cannot push back {ch!r}, {self._pushed_back!r} is already pending")
        if ch == "\n":
            self.line -= 1
        self._pushed_back = ch

    def close(self) -> None:
        pass

    def _read_char(self) -> str:
        raise NotImplementedError


class StringSource(_PushbackSource):
    def __init__(self, text: str) -> None:
        super().__init__()
        self.text = text
        self._pos = 0

    def _read_char(self) -> str:
        if self._pos >= len(self.text):
            return ""
        ch = self.text[self._pos]
        self._pos += 1
        return ch


class StreamSource(_PushbackSource):
    """
    Reads a text stream one character at a time.

    If ``prompt`` is given it is written to ``prompt_stream`` whenever a new
    line is about to be read.
    """

    def __init__(
        self,
        stream: TextIO,
        prompt: Optional[str] = None,
        prompt_stream: Optional[TextIO] = None,
        owns_stream: bool = False,
    ) -> None:
        super().__init__()
        self.stream = stream
        self.prompt = prompt
        self.prompt_stream = prompt_stream
        self.owns_stream = owns_stream
        self._at_line_start = True

    def _read_char(self) -> str:
        if self.prompt and self._at_line_start:
            out = self.prompt_stream or sys.stdout
            out.write(self.prompt)
            out.flush()
        ch = self.stream.read(1)
        self._at_line_start = ch == "\n"
        return ch

    def close(self) -> None:
        if self.owns_stream:
            self.stream.close()
