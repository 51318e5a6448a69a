from .instruction import (
    Comment,
    Group,
    Instruction,
    IntoMagicRing,
    Repeat,
    Skip,
    Stitch,
    group,
    stitch,
)

__all__ = [
    "Instruction",
    "Stitch",
    "Skip",
    "Comment",
    "IntoMagicRing",
    "Group",
    "Repeat",
    "stitch",
    "group",
]
