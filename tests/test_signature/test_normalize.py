"""Tests for token normalization and depth parsing."""

import pytest

from stylesig.model import SName
from stylesig.signature import normalize, normalize_name, parse_depth
from stylesig.signature.depth import single_depth
from stylesig.signature.normalize import STEREOTYPE_PREFIX


class TestNormalize:
    def test_lower_cases(self):
        assert normalize("Activity") == "activity"

    def test_strips_separator_and_underscore(self):
        assert normalize("Foo.Bar_Baz") == "foobarbaz"

    def test_leading_separator_gets_stereotype_prefix(self):
        assert normalize(".Foo") == STEREOTYPE_PREFIX + "foo"

    def test_plain_and_dotted_names_stay_distinct(self):
        assert normalize(".foo") != normalize("foo")

    def test_keeps_depth_token(self):
        assert normalize("Depth(3)") == "depth(3)"

    @pytest.mark.parametrize("raw", ["Foo.Bar", ".foo_bar", "ROOT", "", "a-b", "«x"])
    def test_idempotent(self, raw):
        assert normalize(normalize(raw)) == normalize(raw)


class TestNormalizeName:
    def test_string(self):
        assert normalize_name("ACTIVITY_DIAGRAM") == "activitydiagram"

    def test_enum_uses_member_name(self):
        assert normalize_name(SName.ACTIVITY_DIAGRAM) == "activitydiagram"
        assert normalize_name(SName.LIFE_LINE) == "lifeline"


class TestParseDepth:
    def test_single_digit(self):
        assert parse_depth("depth(2)") == 2

    def test_many_digits(self):
        assert parse_depth("depth(120)") == 120

    def test_zero_is_not_absent(self):
        assert parse_depth("depth(0)") == 0

    @pytest.mark.parametrize(
        "token",
        ["depth()", "depth(x)", "depth(-1)", "depth(1", "depth1)", "mydepth(1)", "depth(1)x", "root"],
    )
    def test_rejects_other_shapes(self, token):
        assert parse_depth(token) is None


class TestSingleDepth:
    def test_one_depth_token(self):
        assert single_depth(["root", "depth(3)"]) == 3

    def test_several_depth_tokens_are_ambiguous(self):
        assert single_depth(["root", "depth(3)", "depth(1)"]) is None
        assert single_depth(["depth(1)", "root", "depth(3)"]) is None

    def test_absent(self):
        assert single_depth(["root", "element"]) is None
