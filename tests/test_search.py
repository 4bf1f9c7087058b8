"""Tests for search() and offset_to_line()."""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from tagwright.search import Match, offset_to_line, search


class TestSearch:
    """Case-insensitive substring search."""

    def test_all_occurrences(self) -> None:
        matches = search("aXaXaX", "X")
        assert [m.start for m in matches] == [1, 3, 5]
        assert all(m.length == 1 for m in matches)

    def test_case_insensitive(self) -> None:
        subject = "Hello WORLD"
        assert search(subject, "world") == [Match(6, 11)]
        assert search(subject, "world")[0].text(subject) == "WORLD"

    def test_query_case_ignored(self) -> None:
        assert search("hello", "HELLO") == [Match(0, 5)]

    def test_overlapping_matches(self) -> None:
        assert search("aaaa", "aa") == [Match(0, 2), Match(1, 3), Match(2, 4)]

    def test_no_match(self) -> None:
        assert search("<div></div>", "span") == []

    @pytest.mark.parametrize("query", ["", " ", "\n\t"])
    def test_blank_query(self, query: str) -> None:
        assert search("anything at all", query) == []

    def test_empty_subject(self) -> None:
        assert search("", "x") == []

    def test_query_with_regex_metacharacters(self) -> None:
        assert search("a.b a*b (x)", "(x)") == [Match(8, 11)]
        assert search("a.b axb", "a.b") == [Match(0, 3)]

    def test_query_whitespace_is_significant(self) -> None:
        assert search("foo bar foobar", "foo ") == [Match(0, 4)]

    def test_non_ascii(self) -> None:
        subject = "Straße STRASSE Ünïcode"
        assert search(subject, "ünï") == [Match(15, 18)]

    @given(st.text(max_size=200), st.text(min_size=1, max_size=5))
    @settings(max_examples=200)
    def test_match_invariants(self, subject: str, query: str) -> None:
        matches = search(subject, query)
        starts = [m.start for m in matches]
        assert starts == sorted(set(starts))
        for m in matches:
            assert 0 <= m.start < m.end <= len(subject)
            assert m.length == len(query)

    @given(st.text(alphabet="abAB", max_size=60), st.text(alphabet="ab", min_size=1, max_size=3))
    @settings(max_examples=200)
    def test_finds_every_start(self, subject: str, query: str) -> None:
        expected = [
            i
            for i in range(len(subject) - len(query) + 1)
            if subject[i : i + len(query)].lower() == query
        ]
        assert [m.start for m in search(subject, query)] == expected


class TestOffsetToLine:
    def test_first_line(self) -> None:
        assert offset_to_line("abc\ndef", 2) == 0

    def test_later_lines(self) -> None:
        text = "a\nb\nc"
        assert offset_to_line(text, 2) == 1
        assert offset_to_line(text, 4) == 2

    def test_offset_at_newline(self) -> None:
        # The newline itself belongs to the line it ends
        assert offset_to_line("a\nb", 1) == 0

    def test_clamped(self) -> None:
        assert offset_to_line("a\nb", -5) == 0
        assert offset_to_line("a\nb", 99) == 1

    def test_empty(self) -> None:
        assert offset_to_line("", 0) == 0
