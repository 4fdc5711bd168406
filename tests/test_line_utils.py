"""Tests for uplang.line_utils."""

from uplang.line_utils import (
    dedent,
    dedent_amount,
    is_inline_list,
    is_skippable,
    parse_inline_list,
    split_key_line,
    split_type_annotation,
)
from uplang.values import VString


class TestSplitKeyLine:
    def test_key_and_value(self):
        assert split_key_line("name John Doe") == ("name", "John Doe")

    def test_key_only(self):
        assert split_key_line("flag") == ("flag", "")

    def test_surrounding_whitespace(self):
        assert split_key_line("   k   v  ") == ("k", "v")

    def test_blank(self):
        assert split_key_line("   ") == ("", "")


class TestSplitTypeAnnotation:
    def test_plain(self):
        assert split_type_annotation("age") == ("age", None)

    def test_annotated(self):
        assert split_type_annotation("age!int") == ("age", "int")

    def test_trailing_bang(self):
        assert split_type_annotation("age!") == ("age", "")

    def test_opaque_annotation(self):
        assert split_type_annotation("x!list<int>") == ("x", "list<int>")


class TestInlineList:
    def test_detection(self):
        assert is_inline_list("[a]")
        assert is_inline_list("[]")
        assert not is_inline_list("[")
        assert not is_inline_list("[a")
        assert not is_inline_list("a]")

    def test_basic(self):
        assert parse_inline_list("[a, b, c]") == [VString("a"), VString("b"), VString("c")]

    def test_empty(self):
        assert parse_inline_list("[]") == []

    def test_empty_segments_kept(self):
        assert parse_inline_list("[a,,b,]") == [
            VString("a"), VString(""), VString("b"), VString(""),
        ]

    def test_no_nesting(self):
        assert parse_inline_list("[[a, b]]") == [VString("[a"), VString("b]")]


def test_is_skippable():
    assert is_skippable("")
    assert is_skippable("# comment")
    assert not is_skippable("key # not a comment")


# ---------------------------------------------------------------------------
# dedent
# ---------------------------------------------------------------------------

def test_dedent_amount():
    assert dedent_amount("4") == 4
    assert dedent_amount("0") == 0
    assert dedent_amount(None) is None
    assert dedent_amount("int") is None
    assert dedent_amount("-1") is None
    assert dedent_amount("") is None

def test_dedent_long_lines():
    assert dedent(["    a", "     b"], 4) == ["a", " b"]

def test_dedent_exact_length_line_becomes_empty():
    assert dedent(["ab"], 2) == [""]

def test_dedent_short_lines_unchanged():
    assert dedent(["", "x", "  yz"], 2) == ["", "x", "yz"]

def test_dedent_zero():
    assert dedent(["  a"], 0) == ["  a"]
