"""
Crochet pattern compiler.

Compiles a compact round notation (``sc 6 in mr``, ``[inc, sc] 6``) into an
instruction tree, lints the stitch counts between consecutive rounds, and
renders a canonical numbered report.
"""

from .api import ValidationReport, validate_pattern
from .checker import Lint, LintKind, MismatchedStitchCount, NonzeroFirstRoundInput, lint_rounds
from .parser import ParseError, parse_rounds
from .schemas import Comment, Group, Instruction, IntoMagicRing, Repeat, Skip, Stitch
from .stitches import StitchKind
from .writer import pretty_format

__all__ = [
    # Entry points
    "parse_rounds",
    "lint_rounds",
    "pretty_format",
    "validate_pattern",
    # Errors and reports
    "ParseError",
    "ValidationReport",
    # Instruction tree
    "Instruction",
    "Stitch",
    "StitchKind",
    "Skip",
    "Comment",
    "IntoMagicRing",
    "Group",
    "Repeat",
    # Lint findings
    "Lint",
    "LintKind",
    "MismatchedStitchCount",
    "NonzeroFirstRoundInput",
]
