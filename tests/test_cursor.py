"""Tests for the immutable scanning cursor."""

from __future__ import annotations

import pytest

from xsdatetime.cursor import Cursor


class TestCursorBasic:
    """Test basic cursor functionality."""

    def test_create_cursor(self) -> None:
        """Create cursor at position 0."""
        cursor = Cursor("2005", 0)
        assert cursor.source == "2005"
        assert cursor.pos == 0
        assert not cursor.is_eof
        assert cursor.current == "2"

    def test_cursor_immutability(self) -> None:
        """Cursor is immutable (frozen dataclass)."""
        cursor = Cursor("2005", 0)
        with pytest.raises(AttributeError):
            cursor.pos = 2  # type: ignore[misc]

    def test_advance_returns_new_cursor(self) -> None:
        """advance() leaves the original untouched."""
        cursor = Cursor("2005", 0)
        moved = cursor.advance(2)
        assert cursor.pos == 0
        assert moved.pos == 2

    def test_advance_clamps_to_eof(self) -> None:
        """Advancing past the end stops at EOF."""
        assert Cursor("ab", 1).advance(10).pos == 2

    def test_current_at_eof_raises(self) -> None:
        """current raises EOFError at end of input."""
        with pytest.raises(EOFError, match="position 2"):
            _ = Cursor("ab", 2).current

    def test_peek_beyond_eof(self) -> None:
        """peek() returns None past the end."""
        cursor = Cursor("ab", 1)
        assert cursor.peek() == "b"
        assert cursor.peek(1) is None

    def test_slice_to(self) -> None:
        """slice_to() extracts from the current position."""
        assert Cursor("2005-11", 5).slice_to(7) == "11"


class TestCursorMatchers:
    """expect(), digits() and digit_run()."""

    def test_expect_match(self) -> None:
        """Matching character advances by one."""
        after = Cursor("-11", 0).expect("-")
        assert after is not None
        assert after.pos == 1

    def test_expect_mismatch_and_eof(self) -> None:
        """Mismatch and EOF both yield None."""
        assert Cursor("x", 0).expect("-") is None
        assert Cursor("", 0).expect("-") is None

    def test_digits_exact(self) -> None:
        """Exactly count digits are consumed."""
        after = Cursor("200511", 0).digits(4)
        assert after is not None
        assert after.pos == 4

    @pytest.mark.parametrize("source", ["20a5", "200", "", "٢٠٠٥"])
    def test_digits_short_or_non_ascii(self, source: str) -> None:
        """Fewer than count ASCII digits yields None."""
        assert Cursor(source, 0).digits(4) is None

    def test_digit_run_stops_at_limit(self) -> None:
        """digit_run consumes at most max_count digits."""
        assert Cursor("12345", 0).digit_run(3).pos == 3

    def test_digit_run_stops_at_non_digit(self) -> None:
        """digit_run stops at the first non-digit."""
        assert Cursor("1Z", 0).digit_run(3).pos == 1
        assert Cursor("Z", 0).digit_run(3).pos == 0
