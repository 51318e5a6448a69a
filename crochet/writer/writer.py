"""
Pretty printer for parsed patterns.

pretty_format renders one line per round in pattern order:

    Round 1: sc 6 in mr (6)
    Round 2: inc 6 (12)

The instruction text is the canonical serialization of the round and the
parenthesized number is the round's output stitch count.
"""

from __future__ import annotations

from typing import Sequence

from crochet.schemas.instruction import Instruction


def render_round(index: int, round_: Instruction) -> str:
    """Render a single round given its one-based ``index``."""
    return f"Round {index}: {round_} ({round_.output_count()})"


def pretty_format(rounds: Sequence[Instruction]) -> str:
    """Format rounds into a numbered report, without a trailing newline."""
    return "\n".join(render_round(i, r) for i, r in enumerate(rounds, start=1))
