"""
Tests for font selection parsing.
"""

from devstrap.core.services.bootstrap.selection import is_quit, parse_selection


class TestParseSelection:
    def test_simple(self):
        assert parse_selection("1 3", 5) == [0, 2]

    def test_keeps_order(self):
        assert parse_selection("4 1", 5) == [3, 0]

    def test_out_of_range_ignored(self):
        assert parse_selection("9", 5) == []
        assert parse_selection("0 6 2", 5) == [1]

    def test_garbage_ignored(self):
        assert parse_selection("x 2 -1 1.5", 5) == [1]

    def test_duplicates_dropped(self):
        assert parse_selection("2 2 2", 5) == [1]

    def test_non_ascii_digits_ignored(self):
        assert parse_selection("٣", 5) == []

    def test_extra_whitespace(self):
        assert parse_selection("  1\t 5  ", 5) == [0, 4]

    def test_empty(self):
        assert parse_selection("", 5) == []


class TestQuit:
    def test_quit(self):
        assert is_quit("q")
        assert is_quit(" Q ")

    def test_not_quit(self):
        assert not is_quit("1")
        assert not is_quit("quit")
