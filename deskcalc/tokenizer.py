import enum
import string
from dataclasses import dataclass
from typing import Optional

from deskcalc.errors import ErrorKind, ErrorReporter
from deskcalc.logging import log
from deskcalc.source import CharSource, StringSource
from deskcalc.utils import PrintableEnum, format_value


class TokenKind(PrintableEnum):
    NUMBER = enum.auto()
    NAME = enum.auto()
    END = enum.auto()
    PLUS = enum.auto()
    MINUS = enum.auto()
    MUL = enum.auto()
    DIV = enum.auto()
    ASSIGN = enum.auto()
    LPAREN = enum.auto()
    RPAREN = enum.auto()
    PRINT = enum.auto()


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: Optional[str] = None
    value: Optional[float] = None

    @property
    def lexeme(self) -> str:
        if self.kind is TokenKind.NUMBER:
            return format_value(self.value)  # type: ignore[arg-type]
        if self.kind is TokenKind.NAME:
            return self.text  # type: ignore[return-value]
        return LEXEMES.get(self.kind, "")

    def __str__(self) -> str:
        return f"<{self.kind}>{self.lexeme}"


SINGLE_CHAR_TOKENS = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.MUL,
    "/": TokenKind.DIV,
    "=": TokenKind.ASSIGN,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    ";": TokenKind.PRINT,
    "\n": TokenKind.PRINT,
}
LEXEMES = {kind: ch for ch, kind in SINGLE_CHAR_TOKENS.items() if ch != "\n"}

END_TOKEN = Token(TokenKind.END)
PRINT_TOKEN = Token(TokenKind.PRINT)

_DIGITS = frozenset(string.digits)


def _is_valid_in_number(s: str) -> bool:
    return s in _DIGITS or s == "."


def _is_valid_in_identifier(s: str) -> bool:
    return s != "" and s.isalnum()


class Tokenizer:
    """
    Produces tokens from a character source, one at a time.

    Only the most recent token is kept; ``advance()`` replaces it. Lexical
    errors are reported and turned into a PRINT token so the caller can
    resynchronize at the next statement.
    """

    def __init__(self, source: CharSource, reporter: ErrorReporter) -> None:
        self.source = source
        self.reporter = reporter
        self._current = PRINT_TOKEN
        self._token_line = source.line
        self._exhausted = False

    def __enter__(self) -> "Tokenizer":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def line(self) -> int:
        """Line on which the current token starts."""
        return self._token_line

    def current(self) -> Token:
        return self._current

    def advance(self) -> Token:
        self._current = self._next_token()
        log.debug("token %s", self._current)
        return self._current

    def close(self) -> None:
        self.source.close()

    def _read(self) -> str:
        if self._exhausted:
            return ""
        ch = self.source.read()
        self._exhausted = ch == ""
        return ch

    def _next_token(self) -> Token:
        self._token_line = self.source.line
        ch = self._read()
        while ch != "\n" and ch.isspace():
            ch = self._read()

        if ch == "":
            return END_TOKEN
        if ch in SINGLE_CHAR_TOKENS:
            return Token(SINGLE_CHAR_TOKENS[ch])
        if _is_valid_in_number(ch):
            self.source.unread(ch)
            return self._read_number()
        if ch.isalpha():
            chars = [ch]
            ch = self._read()
            while _is_valid_in_identifier(ch):
                chars.append(ch)
                ch = self._read()
            self.source.unread(ch)
            return Token(TokenKind.NAME, text="".join(chars))

        self.reporter.report(f"bad token {ch!r}", kind=ErrorKind.LEXICAL, line=self.line)
        return PRINT_TOKEN

    def _read_number(self) -> Token:
        chars = []
        seen_point = False
        ch = self._read()
        while _is_valid_in_number(ch):
            if ch == ".":
                if seen_point:
                    break
                seen_point = True
            chars.append(ch)
            ch = self._read()
        self.source.unread(ch)

        literal = "".join(chars)
        try:
            value = float(literal)
        except ValueError:
            self.reporter.report(f"bad number {literal!r}", kind=ErrorKind.LEXICAL, line=self.line)
            return PRINT_TOKEN
        return Token(TokenKind.NUMBER, value=value)


def tokenize(code: str, reporter: Optional[ErrorReporter] = None) -> list[Token]:
    if reporter is None:
        reporter = ErrorReporter()
    tokens: list[Token] = []
    with Tokenizer(StringSource(code), reporter) as tokenizer:
        while True:
            token = tokenizer.advance()
            tokens.append(token)
            if token.kind is TokenKind.END:
                break
    return tokens
