"""
Public pattern validation API.

validate_pattern() parses crochet pattern text and lints the resulting
rounds. It returns a ValidationReport regardless of whether parsing
succeeds, so callers can inspect the rounds, the findings, or the located
parse error without handling exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass

from crochet.checker.lint import Lint, lint_rounds
from crochet.parser.errors import ParseError
from crochet.parser.parser import parse_rounds
from crochet.schemas.instruction import Instruction


@dataclass(frozen=True)
class ValidationReport:
    """Outcome of validating a crochet pattern.

    Attributes:
        passed: True only when parsing succeeded and no lint fired.
        rounds: The parsed rounds, or an empty tuple if parsing failed.
        lints: Lint findings in order; empty if parsing failed.
        parse_error: The ParseError if parsing raised, else None.
    """

    passed: bool
    rounds: tuple[Instruction, ...]
    lints: tuple[Lint, ...]
    parse_error: ParseError | None


def validate_pattern(source: str) -> ValidationReport:
    """
    Parse and lint crochet pattern text.

    Parameters
    ----------
    source:
        Pattern text, one round per line.

    Returns
    -------
    ValidationReport
        Always returned. Inspect ``passed``, ``lints`` and ``parse_error``
        for details.
    """
    try:
        rounds = parse_rounds(source)
    except ParseError as exc:
        return ValidationReport(passed=False, rounds=(), lints=(), parse_error=exc)

    lints = lint_rounds(rounds)
    return ValidationReport(
        passed=len(lints) == 0,
        rounds=tuple(rounds),
        lints=tuple(lints),
        parse_error=None,
    )
