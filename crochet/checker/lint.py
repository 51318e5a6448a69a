"""
Stitch-count consistency lints over a parsed pattern.

lint_rounds runs two rules and returns every finding (not short-circuited):
  1. Mismatched stitch count: each round's output must equal the input of
     the next non-decorative round.
  2. Nonzero first round input: the first round must not work into
     preexisting stitches.

Findings are values; nothing here raises on a bad pattern.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Union

from crochet.schemas.instruction import Instruction

logger = logging.getLogger(__name__)


class LintKind(str, Enum):
    """Classification of lint findings."""

    MISMATCHED_STITCH_COUNT = "mismatched_stitch_count"
    NONZERO_FIRST_ROUND_INPUT = "nonzero_first_round_input"


def pluralize_stitch(n: int) -> str:
    return "stitch" if n == 1 else "stitches"


@dataclass(frozen=True)
class MismatchedStitchCount:
    """
    Round ``a_idx`` leaves a different number of stitches than round
    ``b_idx`` works into.

    Attributes:
        a_idx: One-based index of the producing round.
        a_out: How many stitches the producing round makes.
        b_idx: One-based index of the consuming round.
        b_in: How many stitches the consuming round works into.
    """

    a_idx: int
    a_out: int
    b_idx: int
    b_in: int

    kind = LintKind.MISMATCHED_STITCH_COUNT

    @property
    def message(self) -> str:
        return (
            f"round {self.a_idx} produces {self.a_out} {pluralize_stitch(self.a_out)} "
            f"but round {self.b_idx} consumes {self.b_in} {pluralize_stitch(self.b_in)}"
        )

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class NonzeroFirstRoundInput:
    """
    The first round works into stitches that do not exist yet.

    Attributes:
        actual_consumed: How many stitches round 1 consumes.
    """

    actual_consumed: int

    kind = LintKind.NONZERO_FIRST_ROUND_INPUT

    @property
    def message(self) -> str:
        return (
            f"round 1 consumes {self.actual_consumed} {pluralize_stitch(self.actual_consumed)} "
            "but the first round shouldn't consume any stitches"
        )

    def __str__(self) -> str:
        return self.message


Lint = Union[MismatchedStitchCount, NonzeroFirstRoundInput]


def lint_mismatched_stitch_count(rounds: Sequence[Instruction]) -> list[MismatchedStitchCount]:
    """
    Compare every non-decorative round with the next non-decorative round.

    Decorative rounds (0 in, 0 out, e.g. a lone comment) are skipped on both
    sides. Scanning stops once a round has no non-decorative successor.
    """
    findings: list[MismatchedStitchCount] = []

    for a_pos, a in enumerate(rounds):
        if a.is_decorative():
            continue

        b_pos = next(
            (j for j in range(a_pos + 1, len(rounds)) if not rounds[j].is_decorative()),
            None,
        )
        if b_pos is None:
            break

        a_out = a.output_count()
        b_in = rounds[b_pos].input_count()
        if a_out != b_in:
            findings.append(
                MismatchedStitchCount(a_idx=a_pos + 1, a_out=a_out, b_idx=b_pos + 1, b_in=b_in)
            )

    return findings


def lint_nonzero_first_round_input(rounds: Sequence[Instruction]) -> NonzeroFirstRoundInput | None:
    if not rounds:
        return None
    consumed = rounds[0].input_count()
    if consumed != 0:
        return NonzeroFirstRoundInput(actual_consumed=consumed)
    return None


def lint_rounds(rounds: Sequence[Instruction]) -> list[Lint]:
    """Run every lint over ``rounds`` and return the findings in order."""
    lints: list[Lint] = list(lint_mismatched_stitch_count(rounds))

    first = lint_nonzero_first_round_input(rounds)
    if first is not None:
        lints.append(first)

    logger.debug("lint found %d issue(s) in %d round(s)", len(lints), len(rounds))
    return lints
