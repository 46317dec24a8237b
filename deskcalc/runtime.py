from typing import Callable, Optional

from deskcalc.errors import ErrorReporter
from deskcalc.logging import log
from deskcalc.parser import Parser
from deskcalc.source import CharSource, StringSource
from deskcalc.symbols import SymbolTable
from deskcalc.tokenizer import TokenKind, Tokenizer
from deskcalc.utils import format_value

ResultSink = Callable[[float], None]


def print_value(value: float) -> None:
    print(format_value(value))


class Session:
    """
    One calculator session: a symbol table and an error count shared by every
    source it runs.
    """

    def __init__(
        self,
        symbols: Optional[SymbolTable] = None,
        reporter: Optional[ErrorReporter] = None,
        output: ResultSink = print_value,
    ) -> None:
        self.symbols = SymbolTable() if symbols is None else symbols
        self.reporter = ErrorReporter() if reporter is None else reporter
        self.output = output

    @property
    def errors(self) -> int:
        return self.reporter.count

    def run(self, source: CharSource, output: Optional[ResultSink] = None) -> int:
        """
        Evaluate every statement of ``source`` and return the error count.
        """
        output = self.output if output is None else output
        with Tokenizer(source, self.reporter) as tokenizer:
            parser = Parser(tokenizer, self.symbols, self.reporter)
            while True:
                kind = tokenizer.advance().kind
                if kind is TokenKind.END:
                    break
                if kind is TokenKind.PRINT:
                    continue
                value = parser.expression(False)
                log.debug("line %d: %r", tokenizer.line, value)
                output(value)
        return self.errors

    def evaluate(self, code: str) -> list[float]:
        results: list[float] = []
        self.run(StringSource(code), output=results.append)
        return results


def evaluate(code: str, symbols: Optional[SymbolTable] = None) -> list[float]:
    return Session(symbols=symbols).evaluate(code)
