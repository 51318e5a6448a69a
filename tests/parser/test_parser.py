"""Tests for parser.parser — grammar, tree shape and located errors."""

import pytest

from crochet.parser import MAX_NESTING, ParseError, parse, parse_rounds, tokenize
from crochet.schemas.instruction import (
    Comment,
    Group,
    IntoMagicRing,
    Repeat,
    Skip,
    Stitch,
    group,
)
from crochet.stitches.types import StitchKind

SC = Stitch(StitchKind.SC)
INC = Stitch(StitchKind.INC)
DEC = Stitch(StitchKind.DEC)
CH = Stitch(StitchKind.CH)
TCH = Stitch(StitchKind.TCH)


def _error_location(source: str) -> tuple[int, int]:
    with pytest.raises(ParseError) as exc_info:
        parse_rounds(source)
    return exc_info.value.location


class TestTreeShape:
    def test_group(self):
        assert parse_rounds("[sc, inc, dec]") == [group(group(SC, INC, DEC))]

    def test_repeated_group(self):
        assert parse_rounds("[inc 2, sc] 3") == [
            group(Repeat(group(Repeat(INC, 2), SC), 3))
        ]

    def test_single_member_round_is_still_a_group(self):
        assert parse_rounds("sc") == [Group((SC,))]

    def test_suffix_order_repeat_then_magic_ring(self):
        assert parse_rounds("sc 6 in mr") == [group(IntoMagicRing(Repeat(SC, 6)))]

    def test_magic_ring_on_group(self):
        assert parse_rounds("[sc, inc] in mr") == [group(IntoMagicRing(group(SC, INC)))]

    def test_skip(self):
        assert parse_rounds("skip 2, sc") == [group(Skip(2), SC)]

    def test_comment(self):
        assert parse_rounds("% start here %, ch 3") == [group(Comment("start here"), Repeat(CH, 3))]

    def test_turning_chain(self):
        assert parse_rounds("tch, sc 3") == [group(TCH, Repeat(SC, 3))]

    def test_multiple_rounds(self):
        rounds = parse_rounds("sc 6 in mr\ninc 6\n[inc, sc] 6")
        assert len(rounds) == 3
        assert [r.output_count() for r in rounds] == [6, 12, 18]

    def test_blank_lines_and_indentation(self):
        src = """
            ch 3

            sc, inc, sc
            [inc, sc] 2
            """
        rounds = parse_rounds(src)
        assert [str(r) for r in rounds] == ["ch 3", "sc, inc, sc", "[inc, sc] 2"]

    def test_trailing_newline(self):
        assert parse_rounds("sc 3\n") == [group(Repeat(SC, 3))]

    def test_parse_leaves_stream_empty(self):
        ts = tokenize("sc\ninc")
        parse(ts)
        assert ts.is_empty()


class TestErrors:
    def test_unexpected_bracket(self):
        assert _error_location("\nsc 2, ]") == (2, 7)

    def test_unterminated_comment(self):
        assert _error_location("% foobar") == (1, 1)

    def test_unterminated_comment_after_comma(self):
        assert _error_location("sc 3, % foobar") == (1, 7)

    def test_empty_input(self):
        assert _error_location("") == (1, 1)

    def test_only_newlines(self):
        assert _error_location("\n\n") == (3, 1)

    def test_skip_without_number(self):
        assert _error_location("skip, sc") == (1, 5)

    def test_skip_at_end_of_input(self):
        assert _error_location("sc, skip") == (1, 9)

    def test_missing_closing_bracket(self):
        assert _error_location("[sc, inc") == (1, 9)

    def test_wrong_closing_token(self):
        assert _error_location("[sc, inc 2 2]") == (1, 12)

    def test_trailing_garbage_on_line(self):
        assert _error_location("sc 3 [inc]") == (1, 6)

    def test_suffix_out_of_order(self):
        # magic ring marker before repeat count
        assert _error_location("sc in mr 6") == (1, 10)

    def test_unrecognized_character(self):
        assert _error_location("sc 3, inc\ndc 2") == (2, 1)

    def test_unrecognized_character_mid_line(self):
        assert _error_location("sc 3 x") == (1, 6)

    def test_leading_comma(self):
        assert _error_location(", sc") == (1, 1)

    def test_overflowing_repeat_count(self):
        assert _error_location("sc 99999999999") == (1, 4)

    def test_deep_nesting_raises_at_bracket(self):
        depth = MAX_NESTING + 1
        assert _error_location("[" * depth + "sc" + "]" * depth) == (1, depth)

    def test_very_deep_nesting(self):
        assert _error_location("[" * 2000 + "sc" + "]" * 2000) == (1, MAX_NESTING + 1)

    def test_max_nesting_is_accepted(self):
        src = "[" * MAX_NESTING + "inc" + "] 2" * MAX_NESTING
        (round_,) = parse_rounds(src)
        assert round_.output_count() == 2 ** (MAX_NESTING + 1)
        assert str(round_) == src

    def test_error_carries_reason(self):
        with pytest.raises(ParseError) as exc_info:
            parse_rounds("skip inc")
        assert "skip" in exc_info.value.reason
        assert "line 1, col 6" in str(exc_info.value)
