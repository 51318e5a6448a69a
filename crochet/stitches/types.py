"""
Core type definitions for the stitch vocabulary.

StitchKind is the canonical set of primitive stitch keywords accepted by the
lexer. StitchEntry rows are loaded from the YAML stitch table and are frozen
after startup.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class StitchKind(str, Enum):
    """Primitive stitch keywords, valued by their surface spelling."""

    CH = "ch"
    TCH = "tch"
    SC = "sc"
    FPSC = "fpsc"
    BPSC = "bpsc"
    BLSC = "blsc"
    INC = "inc"
    FLINC = "flinc"
    BLINC = "blinc"
    DEC = "dec"


@dataclass(frozen=True)
class StitchEntry:
    """
    Stitch-count behaviour of a single stitch keyword.

    Attributes:
        id: The stitch keyword.
        description: Human-readable name.
        consumes: Stitches of the previous round worked into.
        produces: Stitches made for the next round to work into.
        notes: Free-form annotation from the data table.
    """

    id: StitchKind
    description: str
    consumes: int
    produces: int
    notes: str = ""
