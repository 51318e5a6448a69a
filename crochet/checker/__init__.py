"""
Stitch-count checker: lints a parsed pattern for rounds whose produced and
consumed stitch counts disagree.
"""

from .lint import (
    Lint,
    LintKind,
    MismatchedStitchCount,
    NonzeroFirstRoundInput,
    lint_mismatched_stitch_count,
    lint_nonzero_first_round_input,
    lint_rounds,
)

__all__ = [
    "lint_rounds",
    "lint_mismatched_stitch_count",
    "lint_nonzero_first_round_input",
    "Lint",
    "LintKind",
    "MismatchedStitchCount",
    "NonzeroFirstRoundInput",
]
