import enum
import sys
from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Optional

from deskcalc.logging import log
from deskcalc.utils import PrintableEnum

ERROR_VALUE = 1.0
MAX_DIAGNOSTICS = 100

DiagnosticSink = Callable[[str], None]


class ErrorKind(PrintableEnum):
    LEXICAL = enum.auto()
    SYNTAX = enum.auto()
    SEMANTIC = enum.auto()


@dataclass(frozen=True)
class Diagnostic:
    kind: ErrorKind
    message: str
    line: Optional[int] = None

    def __str__(self) -> str:
        where = f" line {self.line}:" if self.line is not None else ""
        return f"[{self.kind.name.capitalize()} error]{where} {self.message}"


def print_to_stderr(text: str) -> None:
    print(text, file=sys.stderr)


@dataclass
class ErrorReporter:
    """
    Counts errors and emits diagnostics without interrupting evaluation.

    ``report()`` always returns ``ERROR_VALUE``, which the caller substitutes
    for the value it failed to compute.
    Only the latest ``MAX_DIAGNOSTICS`` diagnostics are kept.
    """

    sink: DiagnosticSink = print_to_stderr
    count: int = 0
    diagnostics: deque[Diagnostic] = field(default_factory=lambda: deque(maxlen=MAX_DIAGNOSTICS))

    def report(self, message: str, kind: ErrorKind = ErrorKind.SYNTAX, line: Optional[int] = None) -> float:
        diagnostic = Diagnostic(kind=kind, message=message, line=line)
        self.count += 1
        self.diagnostics.append(diagnostic)
        log.debug("error #%d: %s", self.count, diagnostic)
        self.sink(str(diagnostic))
        return ERROR_VALUE
