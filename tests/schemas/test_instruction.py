"""Tests for schemas.instruction — stitch counts, validation and rendering."""

import pytest

from crochet.parser import parse_rounds
from crochet.schemas.instruction import (
    Comment,
    Group,
    IntoMagicRing,
    Repeat,
    Skip,
    Stitch,
    group,
    stitch,
)
from crochet.stitches.types import StitchKind

SC = Stitch(StitchKind.SC)
INC = Stitch(StitchKind.INC)
DEC = Stitch(StitchKind.DEC)
CH = Stitch(StitchKind.CH)


class TestStitchCounts:
    def test_inc_consumes_one(self):
        assert INC.input_count() == 1

    def test_dec_consumes_two(self):
        assert DEC.input_count() == 2

    def test_sc_produces_one(self):
        assert SC.output_count() == 1

    def test_inc_produces_two(self):
        assert INC.output_count() == 2

    def test_chain_consumes_nothing(self):
        assert CH.input_count() == 0
        assert CH.output_count() == 1

    def test_skip(self):
        assert Skip(3).input_count() == 3
        assert Skip(3).output_count() == 0

    def test_comment_has_no_effect(self):
        c = Comment("hello")
        assert c.input_count() == 0
        assert c.output_count() == 0
        assert c.is_decorative()


class TestCompositeCounts:
    @pytest.mark.parametrize("inner", [SC, INC, DEC, Skip(2), group(INC, SC)])
    @pytest.mark.parametrize("times", [0, 1, 6])
    def test_repeat_multiplies(self, inner, times):
        rep = Repeat(inner, times)
        assert rep.output_count() == times * inner.output_count()
        assert rep.input_count() == times * inner.input_count()

    def test_group_sums(self):
        g = group(SC, INC, DEC, Skip(1))
        assert g.output_count() == 1 + 2 + 1 + 0
        assert g.input_count() == 1 + 1 + 2 + 1

    @pytest.mark.parametrize("inner", [SC, DEC, Repeat(SC, 6), group(Skip(4), INC)])
    def test_magic_ring_consumes_nothing(self, inner):
        ring = IntoMagicRing(inner)
        assert ring.input_count() == 0
        assert ring.output_count() == inner.output_count()

    def test_nested(self):
        # [inc, sc] 6
        inst = Repeat(group(INC, SC), 6)
        assert inst.input_count() == 12
        assert inst.output_count() == 18


class TestValidation:
    def test_empty_group_rejected(self):
        with pytest.raises(ValueError):
            Group(())

    def test_negative_repeat_rejected(self):
        with pytest.raises(ValueError):
            Repeat(SC, -1)

    def test_negative_skip_rejected(self):
        with pytest.raises(ValueError):
            Skip(-2)

    def test_group_list_promoted_to_tuple(self):
        g = Group([SC, INC])  # type: ignore[arg-type]
        assert isinstance(g.instructions, tuple)

    def test_stitch_accepts_surface_spelling(self):
        assert Stitch("sc") == SC  # type: ignore[arg-type]

    def test_nodes_are_frozen(self):
        with pytest.raises(Exception):
            SC.kind = StitchKind.INC  # type: ignore[misc]

    def test_factory(self):
        assert stitch("sc", 6) == Repeat(SC, 6)
        assert stitch(StitchKind.INC) == INC


class TestRendering:
    @pytest.mark.parametrize(
        "inst, expected",
        [
            (SC, "sc"),
            (Skip(2), "skip 2"),
            (Comment("hi"), "% hi %"),
            (Repeat(SC, 4), "sc 4"),
            (IntoMagicRing(Repeat(SC, 6)), "sc 6 in mr"),
            (IntoMagicRing(group(SC, Repeat(INC, 2))), "[sc, inc 2] in mr"),
            (Repeat(group(INC, SC), 3), "[inc, sc] 3"),
            (IntoMagicRing(Repeat(group(SC), 6)), "[sc] 6 in mr"),
            (group(SC, INC, SC), "sc, inc, sc"),
            (group(group(SC, INC)), "sc, inc"),
        ],
    )
    def test_render(self, inst, expected):
        assert str(inst) == expected

    @pytest.mark.parametrize(
        "source",
        [
            "sc 4 in mr, inc, [sc, % hi im a comment %, inc] 2",
            "% hi again %, sc, inc, sc 2\n[inc, sc] 3",
            "[sc, inc 2] in mr",
            "ch 3\ntch, skip 1, blsc 2",
            "fpsc, bpsc, flinc, blinc, dec",
        ],
    )
    def test_display_matches_canonical_source(self, source):
        rounds = parse_rounds(source)
        assert "\n".join(str(r) for r in rounds) == source

    @pytest.mark.parametrize(
        "source, displayed",
        [
            ("sc 1", "sc 1"),
            ("[ch 1] 1", "[ch 1] 1"),
            ("[sc 3 in mr]", "sc 3 in mr"),
            ("[sc 6] in mr", "[sc 6] in mr"),
            ("sc6in mr", "sc 6 in mr"),
            ("[inc,sc]6", "[inc, sc] 6"),
            ("%   spaced   %", "% spaced %"),
            ("sc 007", "sc 7"),
        ],
    )
    def test_display_normalizes(self, source, displayed):
        assert "".join(str(r) for r in parse_rounds(source)) == displayed


class TestRoundTrip:
    @pytest.mark.parametrize(
        "source",
        [
            "sc6in mr\ninc 6\n[inc,sc] 6",
            "[[sc, inc] 2, dec] 3",
            "[[sc] in mr] 2",
            "[ % a % , [sc]] in mr",
            "ch 12\n% turn %\nsc 12",
            "sc 10 in mr\nskip 2, sc, skip 2, sc 5",
        ],
    )
    def test_render_parse_render_is_stable(self, source):
        first = "\n".join(str(r) for r in parse_rounds(source))
        second = "\n".join(str(r) for r in parse_rounds(first))
        assert first == second
