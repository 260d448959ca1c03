"""Tests for SearchTerm construction and matching.

Covers:
- parse() rejects empty input and ASCII-lowercases everything else
- Direct construction raises InvalidSearchTermError on empty input
- Case-insensitive, ASCII-only substring matching
- find_match_indices_in: non-overlapping, left-to-right offsets
- Structural equality and hashing
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from json_tree_search import InvalidSearchTermError, JsonTreeSearchError, SearchTerm

# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestParse:
    def test_empty_yields_none(self) -> None:
        assert SearchTerm.parse("") is None

    @pytest.mark.parametrize("raw", ["foo", "FoO", "Greetings!", " ", "a/B~c", "ÀB"])
    def test_stores_ascii_lowercased_text(self, raw: str) -> None:
        term = SearchTerm.parse(raw)
        assert term is not None
        expected = "".join(c.lower() if c.isascii() else c for c in raw)
        assert term.text == expected

    def test_non_ascii_letters_not_folded(self) -> None:
        term = SearchTerm.parse("ÀB")
        assert term is not None
        assert term.text == "Àb"

    def test_whitespace_is_a_valid_term(self) -> None:
        term = SearchTerm.parse("  ")
        assert term is not None
        assert len(term) == 2


class TestDirectConstruction:
    def test_normalizes(self) -> None:
        assert SearchTerm("FOO").text == "foo"

    def test_empty_raises(self) -> None:
        with pytest.raises(InvalidSearchTermError):
            SearchTerm("")

    def test_error_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            SearchTerm("")
        with pytest.raises(JsonTreeSearchError):
            SearchTerm("")

    def test_frozen(self) -> None:
        term = SearchTerm("foo")
        with pytest.raises(FrozenInstanceError):
            term.text = "bar"  # type: ignore[misc]

    def test_structural_equality_and_hash(self) -> None:
        assert SearchTerm("Foo") == SearchTerm("fOO")
        assert hash(SearchTerm("Foo")) == hash(SearchTerm("foo"))
        assert SearchTerm("foo") != SearchTerm("bar")

    def test_len_and_str(self) -> None:
        term = SearchTerm("Grep")
        assert len(term) == 4
        assert str(term) == "grep"


# ---------------------------------------------------------------------------
# Matching
# ---------------------------------------------------------------------------


class TestMatches:
    def test_substring(self) -> None:
        assert SearchTerm("eet").matches("Greetings!")

    def test_case_insensitive(self) -> None:
        assert SearchTerm("GREET").matches("greetings")
        assert SearchTerm("greet").matches("GREETINGS")

    def test_no_match(self) -> None:
        assert not SearchTerm("xyz").matches("Greetings!")

    def test_renders_non_strings(self) -> None:
        assert SearchTerm("21").matches(21)
        assert SearchTerm("2").matches(2)

    def test_whitespace_matches_literally(self) -> None:
        assert SearchTerm(" ").matches("a b")
        assert not SearchTerm(" ").matches("ab")

    def test_non_ascii_not_case_folded(self) -> None:
        assert not SearchTerm("é").matches("É")

    @pytest.mark.parametrize(
        ("s", "t"),
        [("foo", "xFOOx"), ("Bar", "bazbar"), ("q", "QUX"), ("Zz", "nope")],
    )
    def test_upper_term_against_lower_text_is_equivalent(self, s: str, t: str) -> None:
        assert SearchTerm(s).matches(t) == SearchTerm(s.upper()).matches(t.lower())


class TestFindMatchIndicesIn:
    def test_all_occurrences(self) -> None:
        assert SearchTerm("g").find_match_indices_in("Greetings, grep") == [0, 7, 11]

    def test_non_overlapping(self) -> None:
        assert SearchTerm("aa").find_match_indices_in("aaaa") == [0, 2]
        assert SearchTerm("aa").find_match_indices_in("aaa") == [0]

    def test_case_insensitive(self) -> None:
        assert SearchTerm("ab").find_match_indices_in("xABxab") == [1, 4]

    def test_no_occurrence(self) -> None:
        assert SearchTerm("q").find_match_indices_in("Greetings") == []

    def test_empty_text(self) -> None:
        assert SearchTerm("q").find_match_indices_in("") == []
