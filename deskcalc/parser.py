from deskcalc.errors import ErrorKind, ErrorReporter
from deskcalc.logging import log
from deskcalc.symbols import SymbolTable
from deskcalc.tokenizer import TokenKind, Tokenizer


class Parser:
    """
    Recursive descent parser that evaluates while it parses.

        expression := term (('+' | '-') term)*
        term       := primary (('*' | '/') primary)*
        primary    := NUMBER | NAME | NAME '=' expression
                    | '-' primary | '(' expression ')'

    Every rule takes ``advance_first``: when true the rule fetches a new
    token before looking at the current one. Each rule leaves the first
    token it did not consume as the tokenizer's current token. Errors are
    reported and replaced by the reporter's value; no rule raises.
    """

    def __init__(self, tokenizer: Tokenizer, symbols: SymbolTable, reporter: ErrorReporter) -> None:
        self.tokenizer = tokenizer
        self.symbols = symbols
        self.reporter = reporter

    def expression(self, advance_first: bool) -> float:
        left = self.term(advance_first)
        while True:
            kind = self.tokenizer.current().kind
            if kind is TokenKind.PLUS:
                left += self.term(True)
            elif kind is TokenKind.MINUS:
                left -= self.term(True)
            else:
                return left

    def term(self, advance_first: bool) -> float:
        left = self.primary(advance_first)
        while True:
            kind = self.tokenizer.current().kind
            if kind is TokenKind.MUL:
                left *= self.primary(True)
            elif kind is TokenKind.DIV:
                right = self.primary(True)
                if right == 0:
                    return self._error("divide by 0", ErrorKind.SEMANTIC)
                left /= right
            else:
                return left

    def primary(self, advance_first: bool) -> float:
        token = self.tokenizer.advance() if advance_first else self.tokenizer.current()

        if token.kind is TokenKind.NUMBER:
            self.tokenizer.advance()
            return token.value  # type: ignore[return-value]
        elif token.kind is TokenKind.NAME:
            symbol = self.symbols.lookup(token.text)  # type: ignore[arg-type]
            if self.tokenizer.advance().kind is TokenKind.ASSIGN:
                symbol.value = self.expression(True)
                log.debug("%s = %r", symbol.name, symbol.value)
            return symbol.value
        elif token.kind is TokenKind.MINUS:
            return -self.primary(True)
        elif token.kind is TokenKind.LPAREN:
            value = self.expression(True)
            if self.tokenizer.current().kind is not TokenKind.RPAREN:
                return self._error("')' expected")
            self.tokenizer.advance()
            return value
        else:
            return self._error("primary expected")

    def _error(self, message: str, kind: ErrorKind = ErrorKind.SYNTAX) -> float:
        return self.reporter.report(message, kind=kind, line=self.tokenizer.line)
