"""
Tokenizer for crochet pattern text.

tokenize() returns a lazy, single-pass TokenStream with one token of
lookahead. At each position, after skipping spaces and tabs (never
newlines), the scanners are tried in priority order:

  1. structural symbols: newline, ``[``, ``]``, ``,``
  2. keywords, longest literal first (so ``in mr`` is never read as ``inc``)
  3. integer literals: a maximal run of decimal digits
  4. comments: ``% text %``; unterminated comments are rolled back

When nothing matches, no token is produced and the character is left
unconsumed. The stream then reports itself non-empty, which the parser turns
into an error located at that character.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Union

from crochet.stitches.types import StitchKind

from .errors import ParseError

logger = logging.getLogger(__name__)

# Integer literals must fit in an unsigned 32-bit integer.
MAX_LITERAL = 2**32 - 1


class TokenKind(str, Enum):
    STITCH = "STITCH"
    IN_MR = "IN_MR"
    SKIP = "SKIP"
    NUMBER = "NUMBER"
    COMMENT = "COMMENT"
    NEWLINE = "NEWLINE"
    LBRACKET = "LBRACKET"
    RBRACKET = "RBRACKET"
    COMMA = "COMMA"


TokenValue = Union[StitchKind, int, str, None]


@dataclass(frozen=True)
class Token:
    """
    A positioned token.

    Attributes:
        kind: Token category.
        line: One-based line of the token's first character.
        col: One-based column of the token's first character.
        value: StitchKind for STITCH, int for NUMBER, trimmed text for COMMENT.
    """

    kind: TokenKind
    line: int
    col: int
    value: TokenValue = None

    @property
    def location(self) -> tuple[int, int]:
        return (self.line, self.col)

    def describe(self) -> str:
        """Short surface description for error messages."""
        match self.kind:
            case TokenKind.STITCH:
                return f"'{self.value.value}'"
            case TokenKind.NUMBER:
                return f"number {self.value}"
            case TokenKind.COMMENT:
                return "comment"
            case TokenKind.NEWLINE:
                return "end of line"
            case _:
                return f"'{_SURFACE[self.kind]}'"


_SYMBOLS: dict[str, TokenKind] = {
    "\n": TokenKind.NEWLINE,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
    ",": TokenKind.COMMA,
}

_SURFACE: dict[TokenKind, str] = {
    TokenKind.IN_MR: "in mr",
    TokenKind.SKIP: "skip",
    TokenKind.LBRACKET: "[",
    TokenKind.RBRACKET: "]",
    TokenKind.COMMA: ",",
}

# (literal, kind, value), longest literal first
_KEYWORDS: list[tuple[str, TokenKind, TokenValue]] = sorted(
    [(k.value, TokenKind.STITCH, k) for k in StitchKind]
    + [("in mr", TokenKind.IN_MR, None), ("skip", TokenKind.SKIP, None)],
    key=lambda entry: len(entry[0]),
    reverse=True,
)


class TokenStream:
    """Lazy token sequence over a source string with one-token lookahead."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._line = 1
        self._col = 1
        self._peeked: Optional[Token] = None

    # ── Public API ─────────────────────────────────────────────────────────────

    def peek(self) -> Optional[Token]:
        """Return the next token without consuming it, or None."""
        if self._peeked is None:
            self._peeked = self._scan()
        return self._peeked

    def peek_kind(self) -> Optional[TokenKind]:
        token = self.peek()
        return token.kind if token is not None else None

    def advance(self) -> Optional[Token]:
        """Consume and return the next token, or None if none can be produced."""
        if self._peeked is not None:
            token, self._peeked = self._peeked, None
            return token
        return self._scan()

    def is_empty(self) -> bool:
        """True when every character has been consumed and no token is buffered."""
        return self._pos >= len(self._source) and self._peeked is None

    def current_location(self) -> tuple[int, int]:
        """Location of the buffered lookahead token, else of the scanner."""
        if self._peeked is not None:
            return self._peeked.location
        return (self._line, self._col)

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self.advance()
        if token is None:
            raise StopIteration
        return token

    # ── Character level ────────────────────────────────────────────────────────

    def _peek_char(self) -> Optional[str]:
        if self._pos < len(self._source):
            return self._source[self._pos]
        return None

    def _next_char(self) -> Optional[str]:
        ch = self._peek_char()
        if ch is None:
            return None
        if ch == "\n":
            self._line += 1
            self._col = 1
        else:
            self._col += 1
        self._pos += 1
        return ch

    def _eat_string(self, string: str) -> bool:
        if self._source.startswith(string, self._pos):
            for _ in string:
                self._next_char()
            return True
        return False

    def _skip_whitespace(self) -> None:
        while self._peek_char() in (" ", "\t"):
            self._next_char()

    def _make_token(self, kind: TokenKind, value: TokenValue = None) -> Token:
        return Token(kind=kind, line=self._line, col=self._col, value=value)

    # ── Scanners ───────────────────────────────────────────────────────────────

    def _scan(self) -> Optional[Token]:
        self._skip_whitespace()
        for scanner in (self._lex_symbol, self._lex_keyword, self._lex_number, self._lex_comment):
            token = scanner()
            if token is not None:
                return token
        if self._pos < len(self._source):
            logger.debug(
                "no token matches %r at line %d, col %d",
                self._source[self._pos],
                self._line,
                self._col,
            )
        return None

    def _lex_symbol(self) -> Optional[Token]:
        kind = _SYMBOLS.get(self._peek_char())
        if kind is None:
            return None
        token = self._make_token(kind)
        self._next_char()
        return token

    def _lex_keyword(self) -> Optional[Token]:
        line, col = self._line, self._col
        for literal, kind, value in _KEYWORDS:
            if self._eat_string(literal):
                return Token(kind=kind, line=line, col=col, value=value)
        return None

    def _lex_number(self) -> Optional[Token]:
        start_line, start_col = self._line, self._col
        start = self._pos
        while (ch := self._peek_char()) is not None and ch in "0123456789":
            self._next_char()

        digits = self._source[start : self._pos]
        if not digits:
            return None

        # reject on length first; int() refuses very long digit strings
        significant = digits.lstrip("0")
        if len(significant) > len(str(MAX_LITERAL)):
            raise ParseError(start_line, start_col, "number too large")

        value = int(significant or "0")
        if value > MAX_LITERAL:
            raise ParseError(start_line, start_col, "number too large")
        return Token(kind=TokenKind.NUMBER, line=start_line, col=start_col, value=value)

    def _lex_comment(self) -> Optional[Token]:
        if self._peek_char() != "%":
            return None

        saved = (self._pos, self._line, self._col)
        token_line, token_col = self._line, self._col
        self._next_char()

        text = ""
        while (ch := self._next_char()) is not None:
            if ch == "%":
                return Token(
                    kind=TokenKind.COMMENT,
                    line=token_line,
                    col=token_col,
                    value=text.strip(),
                )
            text += ch

        # unterminated: leave the opening '%' unconsumed
        self._pos, self._line, self._col = saved
        return None


def tokenize(source: str) -> TokenStream:
    """Return a fresh token stream over ``source``."""
    return TokenStream(source)
