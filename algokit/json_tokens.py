"""Tokens that render themselves as JSON text, and a flat JSON object of them."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass


@dataclass
class Token:
    """A piece of JSON text; ``value`` is inserted verbatim."""

    value: str


class StringToken(Token):
    """A string wrapped in double quotes, without escaping."""

    def __init__(self, text: str) -> None:
        super().__init__(f'"{text}"')


class NumToken(Token):
    """A number; floats are written with six decimal places."""

    def __init__(self, number: int | float) -> None:
        if isinstance(number, float):
            super().__init__(f"{number:f}")
        else:
            super().__init__(str(int(number)))


class BoolToken(Token):
    """``true`` or ``false``."""

    def __init__(self, flag: bool) -> None:
        super().__init__("true" if flag else "false")


class ArrayToken(Token):
    """A bracketed, comma-separated sequence of tokens."""

    def __init__(self, items: Iterable[Token]) -> None:
        super().__init__("[" + ",".join(item.value for item in items) + "]")


class Json:
    """A JSON object mapping keys to tokens, serialized in the mapping's order."""

    def __init__(self, tokens: Mapping[str, Token] | None = None) -> None:
        self.tokens: dict[str, Token] = dict(tokens or {})

    def serialize(self) -> str:
        """The object as compact JSON text."""
        members = (f'"{key}":{token.value}' for key, token in self.tokens.items())
        return "{" + ",".join(members) + "}"