from dataclasses import dataclass
from typing import Iterator, Mapping

from deskcalc.logging import log

PREDEFINED_CONSTANTS: dict[str, float] = {
    "pi": 3.14159265358979323846,
    "e": 2.71828182845904523536,
}


@dataclass
class Symbol:
    name: str
    value: float = 0.0


class SymbolTable:
    """
    Variables of a session.

    ``lookup()`` creates missing names with value 0.0, so every reference
    yields an entry that can be read or assigned in place.
    """

    def __init__(self, constants: Mapping[str, float] = PREDEFINED_CONSTANTS) -> None:
        self._symbols: dict[str, Symbol] = {name: Symbol(name, value) for name, value in constants.items()}

    def lookup(self, name: str) -> Symbol:
        symbol = self._symbols.get(name)
        if symbol is None:
            log.debug("new variable %r", name)
            symbol = self._symbols[name] = Symbol(name)
        return symbol

    def __contains__(self, name: object) -> bool:
        return name in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    def as_dict(self) -> dict[str, float]:
        return {name: symbol.value for name, symbol in self._symbols.items()}
