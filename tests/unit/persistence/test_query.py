"""Unit tests for shared query helpers."""

from forum.persistence.query import LIKE_ESCAPE, contains_pattern


class TestContainsPattern:
    def test_plain_text(self):
        assert contains_pattern("mock") == "%mock%"

    def test_wildcards_are_literal(self):
        assert contains_pattern("50%_off") == "%50\\%\\_off%"

    def test_escape_character_is_doubled(self):
        assert contains_pattern("a\\b") == "%a\\\\b%"
        assert LIKE_ESCAPE == "\\"
