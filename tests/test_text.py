"""Tests for to_greek_text() (running text) and Dialect handling."""

import pytest

from betacode2 import (
    Dialect,
    UnexpectedAccent,
    UnexpectedCharacter,
    to_greek,
    to_greek_text,
)


# =============================================================================
# to_greek_text
# =============================================================================


class TestToGreekText:
    def test_sentence(self):
        text = "e)n a)rxh=| h)=n o( lo/gos"
        assert to_greek_text(text, Dialect.TLG) == "ἐν ἀρχῇ ἦν ὁ λόγος"

    def test_single_word_matches_to_greek(self, dialect):
        assert to_greek_text("qeo/s", dialect) == to_greek("qeo/s", dialect)

    def test_whitespace_preserved(self):
        assert to_greek_text("a  b\n") == "α  β\n"
        assert to_greek_text("\tkai\\\r\no(") == "\tκαὶ\r\nὁ"

    def test_final_sigma_per_word(self):
        assert to_greek_text("lo/gos lo/gos") == "λόγος λόγος"

    def test_elision_per_word(self):
        assert to_greek_text("a)ll' e)gw/") == "ἀλλ᾽ ἐγώ"

    def test_empty(self):
        assert to_greek_text("") == ""
        assert to_greek_text("   ") == "   "

    def test_dialect_by_name(self):
        assert to_greek_text("xri", "tlg") == "χρι"


class TestToGreekTextErrors:
    def test_position_is_absolute(self):
        with pytest.raises(UnexpectedCharacter) as exc:
            to_greek_text("a b; c")
        assert exc.value.char == ";"
        assert exc.value.position == 3

    def test_accent_position_is_absolute(self):
        with pytest.raises(UnexpectedAccent) as exc:
            to_greek_text("kai\\ e=")
        assert exc.value.char == "ε"
        assert exc.value.position == 5

    def test_marker_position_is_absolute(self):
        with pytest.raises(UnexpectedCharacter) as exc:
            to_greek_text("a )b")
        assert exc.value.char == ")"
        assert exc.value.position == 2

    def test_non_ascii(self):
        with pytest.raises(UnexpectedCharacter) as exc:
            to_greek_text("a λόγος")
        assert exc.value.position == 2


# =============================================================================
# Dialect
# =============================================================================


class TestDialect:
    def test_members(self):
        assert [d.name for d in Dialect] == ["DEFAULT", "TLG"]

    @pytest.mark.parametrize("value, expected", [
        (Dialect.DEFAULT, Dialect.DEFAULT),
        (Dialect.TLG, Dialect.TLG),
        ("default", Dialect.DEFAULT),
        ("Default", Dialect.DEFAULT),
        ("tlg", Dialect.TLG),
        (" TLG ", Dialect.TLG),
    ])
    def test_coerce(self, value, expected):
        assert Dialect.coerce(value) is expected

    @pytest.mark.parametrize("value", ["beta", "", 1, None])
    def test_coerce_unknown(self, value):
        with pytest.raises(ValueError, match="Unknown betacode dialect"):
            Dialect.coerce(value)

    def test_to_greek_rejects_unknown_dialect(self):
        with pytest.raises(ValueError):
            to_greek("a", "robinson")
