"""
Instruction tree for a crochet pattern.

A pattern is an ordered sequence of rounds; each round is a single
Instruction (normally a Group). Nodes are frozen: the parser builds a tree
once and nothing mutates it afterwards.

Every node answers two questions structurally:
  - input_count():  how many stitches of the previous round it works into
  - output_count(): how many stitches it leaves for the next round

str(node) renders the canonical surface syntax accepted by the parser, so
re-parsing a rendered tree and rendering it again yields identical text.
"""

from __future__ import annotations

from dataclasses import dataclass

from crochet.stitches.registry import get_registry
from crochet.stitches.types import StitchKind


class Instruction:
    """Base class for every node of the instruction tree."""

    def input_count(self) -> int:
        """How many stitches this instruction consumes."""
        match self:
            case Stitch(kind=kind):
                return get_registry().consumes(kind)
            case Skip(count=count):
                return count
            case Comment():
                return 0
            case IntoMagicRing():
                # a magic ring has no prior stitches to work into
                return 0
            case Group(instructions=instructions):
                return sum(i.input_count() for i in instructions)
            case Repeat(instruction=inner, times=times):
                return inner.input_count() * times
            case _:
                raise TypeError(f"Unknown instruction type: {type(self).__name__}")

    def output_count(self) -> int:
        """How many stitches this instruction produces."""
        match self:
            case Stitch(kind=kind):
                return get_registry().produces(kind)
            case Skip() | Comment():
                return 0
            case IntoMagicRing(instruction=inner):
                return inner.output_count()
            case Group(instructions=instructions):
                return sum(i.output_count() for i in instructions)
            case Repeat(instruction=inner, times=times):
                return inner.output_count() * times
            case _:
                raise TypeError(f"Unknown instruction type: {type(self).__name__}")

    def is_decorative(self) -> bool:
        """True when the instruction neither consumes nor produces stitches."""
        return self.input_count() == 0 and self.output_count() == 0

    def __str__(self) -> str:
        match self:
            case Stitch(kind=kind):
                return kind.value
            case Skip(count=count):
                return f"skip {count}"
            case Comment(text=text):
                return f"% {text} %"
            # a suffixed group needs brackets
            case IntoMagicRing(instruction=Group() as inner_group):
                return f"[{inner_group}] in mr"
            case IntoMagicRing(instruction=inner):
                return f"{inner} in mr"
            case Repeat(instruction=Group() as inner_group, times=times):
                return f"[{inner_group}] {times}"
            case Repeat(instruction=inner, times=times):
                return f"{inner} {times}"
            case Group(instructions=instructions):
                return ", ".join(str(i) for i in instructions)
            case _:
                raise TypeError(f"Unknown instruction type: {type(self).__name__}")


@dataclass(frozen=True)
class Stitch(Instruction):
    """A single primitive stitch such as ``sc`` or ``inc``."""

    kind: StitchKind

    def __post_init__(self) -> None:
        # Accept the surface spelling at construction sites.
        if not isinstance(self.kind, StitchKind):
            object.__setattr__(self, "kind", StitchKind(self.kind))


@dataclass(frozen=True)
class Skip(Instruction):
    """Pass over ``count`` stitches of the previous round without working them."""

    count: int

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError(f"skip count must be >= 0, got {self.count}")


@dataclass(frozen=True)
class Comment(Instruction):
    """Documentation only; no stitch effect."""

    text: str


@dataclass(frozen=True)
class IntoMagicRing(Instruction):
    """``instruction`` worked into a magic ring."""

    instruction: Instruction


@dataclass(frozen=True)
class Group(Instruction):
    """An ordered, non-empty sequence of sibling instructions."""

    instructions: tuple[Instruction, ...]

    def __post_init__(self) -> None:
        # Accept plain lists at construction sites and promote to tuple.
        if not isinstance(self.instructions, tuple):
            object.__setattr__(self, "instructions", tuple(self.instructions))
        if not self.instructions:
            raise ValueError("Group must contain at least one instruction")


@dataclass(frozen=True)
class Repeat(Instruction):
    """``instruction`` performed ``times`` times."""

    instruction: Instruction
    times: int

    def __post_init__(self) -> None:
        if self.times < 0:
            raise ValueError(f"repeat count must be >= 0, got {self.times}")


# Convenience factories for hand-built trees.


def stitch(kind: StitchKind | str, times: int | None = None) -> Instruction:
    """Create a stitch, wrapped in a Repeat when ``times`` is given."""
    inst: Instruction = Stitch(StitchKind(kind))
    if times is not None:
        inst = Repeat(inst, times)
    return inst


def group(*instructions: Instruction) -> Group:
    """Create a Group from positional instructions."""
    return Group(instructions)
