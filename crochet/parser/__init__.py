"""
Front end for crochet pattern text: tokenizer and recursive-descent parser.

parse_rounds() is the single entry point. It tokenizes, parses, and verifies
that the whole input was consumed, raising ParseError with a one-based
(line, col) location on failure.
"""

from .errors import ParseError
from .lexer import MAX_LITERAL, Token, TokenKind, TokenStream, tokenize
from .parser import MAX_NESTING, Parser, parse, parse_rounds

__all__ = [
    "parse_rounds",
    "parse",
    "Parser",
    "ParseError",
    "tokenize",
    "TokenStream",
    "Token",
    "TokenKind",
    "MAX_LITERAL",
    "MAX_NESTING",
]
