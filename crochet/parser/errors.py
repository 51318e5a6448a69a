"""Located parse failures."""

from __future__ import annotations


class ParseError(Exception):
    """
    Raised when source text is malformed or incomplete.

    ``line`` and ``col`` are one-based and address the offending character:
    either the unexpected token's first character, or the position where
    input ended prematurely.
    """

    def __init__(self, line: int, col: int, reason: str = "unexpected input") -> None:
        self.line = line
        self.col = col
        self.reason = reason
        super().__init__(f"{reason} at line {line}, col {col}")

    @property
    def location(self) -> tuple[int, int]:
        return (self.line, self.col)
