"""
Recursive-descent parser from a TokenStream to a sequence of rounds.

Grammar:

    pattern     = NEWLINE* round (NEWLINE+ round)* NEWLINE*
    round       = group                 (followed by NEWLINE or end of input)
    group       = instruction (',' instruction)*
    instruction = STITCH suffix?
                | 'skip' NUMBER
                | COMMENT
                | '[' group ']' suffix?
    suffix      = NUMBER? 'in mr'?

A trailing number wraps the instruction in Repeat; a following ``in mr``
wraps the (possibly repeated) instruction in IntoMagicRing. Every round is a
Group, even with a single member.

All failures raise ParseError located at the offending token, or at the
stream's current location when input ends early.
"""

from __future__ import annotations

import logging

from crochet.schemas.instruction import (
    Comment,
    Group,
    Instruction,
    IntoMagicRing,
    Repeat,
    Skip,
    Stitch,
)

from .errors import ParseError
from .lexer import Token, TokenKind, TokenStream, tokenize

logger = logging.getLogger(__name__)

# Deepest bracket nesting accepted; keeps parsing and tree walks within the
# interpreter recursion limit.
MAX_NESTING = 64


class Parser:
    def __init__(self, tokens: TokenStream) -> None:
        self.tokens = tokens
        self.depth = 0

    # ---------- ERRORS ----------
    def error_at(self, token: Token | None, reason: str) -> ParseError:
        if token is None:
            line, col = self.tokens.current_location()
            return ParseError(line, col, f"{reason}, found end of input")
        return ParseError(token.line, token.col, f"{reason}, found {token.describe()}")

    def skip_newlines(self) -> None:
        while self.tokens.peek_kind() == TokenKind.NEWLINE:
            self.tokens.advance()

    # ---------- TOP LEVEL ----------
    def parse(self) -> list[Instruction]:
        self.skip_newlines()
        rounds = [self.round()]

        while self.tokens.peek_kind() == TokenKind.NEWLINE:
            self.skip_newlines()
            if self.tokens.peek() is None:
                break
            rounds.append(self.round())

        return rounds

    def round(self) -> Instruction:
        inst = self.group()

        token = self.tokens.peek()
        if token is not None and token.kind != TokenKind.NEWLINE:
            raise self.error_at(token, "expected end of line")

        return inst

    # ---------- INSTRUCTIONS ----------
    def group(self) -> Group:
        instructions = [self.instruction()]
        while self.tokens.peek_kind() == TokenKind.COMMA:
            self.tokens.advance()
            instructions.append(self.instruction())
        return Group(tuple(instructions))

    def instruction(self) -> Instruction:
        token = self.tokens.advance()
        if token is None:
            raise self.error_at(None, "expected an instruction")

        match token.kind:
            case TokenKind.STITCH:
                return self.suffix(Stitch(token.value))
            case TokenKind.SKIP:
                count = self.tokens.advance()
                if count is None or count.kind != TokenKind.NUMBER:
                    raise self.error_at(count, "expected a number after 'skip'")
                return Skip(count.value)
            case TokenKind.COMMENT:
                return Comment(token.value)
            case TokenKind.LBRACKET:
                if self.depth >= MAX_NESTING:
                    raise ParseError(token.line, token.col, "brackets nested too deeply")
                self.depth += 1
                inner = self.group()
                self.depth -= 1
                closing = self.tokens.advance()
                if closing is None or closing.kind != TokenKind.RBRACKET:
                    raise self.error_at(closing, "expected ']'")
                return self.suffix(inner)
            case _:
                raise self.error_at(token, "expected an instruction")

    def suffix(self, inst: Instruction) -> Instruction:
        # repeat count first, magic ring marker second
        if self.tokens.peek_kind() == TokenKind.NUMBER:
            inst = Repeat(inst, self.tokens.advance().value)
        if self.tokens.peek_kind() == TokenKind.IN_MR:
            self.tokens.advance()
            inst = IntoMagicRing(inst)
        return inst


def parse(tokens: TokenStream) -> list[Instruction]:
    """Parse every round available from ``tokens``."""
    return Parser(tokens).parse()


def parse_rounds(source: str) -> list[Instruction]:
    """
    Parse pattern text into its rounds.

    Raises ParseError if the text is malformed, or if any input remains that
    the grammar did not consume.
    """
    tokens = tokenize(source)
    rounds = parse(tokens)

    if not tokens.is_empty():
        line, col = tokens.current_location()
        raise ParseError(line, col, "unrecognized input")

    logger.debug("parsed %d round(s)", len(rounds))
    return rounds
