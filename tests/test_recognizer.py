"""Tests for the dateTime grammar recognizer."""

from __future__ import annotations

import pytest

from xsdatetime.recognizer import CapturedGroups, recognize


class TestRecognizeCaptures:
    """Captured groups expose raw substrings."""

    def test_full_form(self) -> None:
        """Every optional part present."""
        groups = recognize("-2005-11-14T02:16:38.12+09:30")
        assert groups == CapturedGroups(
            negative_year=True,
            year="2005",
            month="11",
            day="14",
            hour="02",
            minute="16",
            second="38",
            fraction="12",
            zone="+09:30",
            zone_sign="+",
            zone_hour="09",
            zone_minute="30",
        )

    def test_minimal_form(self) -> None:
        """No sign, fraction or designator."""
        groups = recognize("2005-11-14T02:16:38")
        assert groups is not None
        assert not groups.negative_year
        assert groups.fraction is None
        assert groups.zone is None
        assert groups.zone_sign is None
        assert groups.zone_hour is None
        assert groups.zone_minute is None

    def test_utc_designator_not_decomposed(self) -> None:
        """'Z' fills zone only."""
        groups = recognize("2005-11-14T02:16:38Z")
        assert groups is not None
        assert groups.zone == "Z"
        assert groups.zone_sign is None

    def test_whitespace_excluded_from_captures(self) -> None:
        """Trimmed whitespace never leaks into groups."""
        groups = recognize("\n 2005-11-14T02:16:38.5 \t")
        assert groups is not None
        assert groups.year == "2005"
        assert groups.fraction == "5"

    def test_groups_are_frozen(self) -> None:
        """CapturedGroups is immutable."""
        groups = recognize("2005-11-14T02:16:38Z")
        assert groups is not None
        with pytest.raises(AttributeError):
            groups.year = "1999"  # type: ignore[misc]


class TestRecognizeRejects:
    """Anchored, all-or-nothing matching."""

    @pytest.mark.parametrize(
        "text",
        [
            "x2005-11-14T02:16:38Z",
            "2005-11-14T02:16:38Zx",
            "2005-11-14T02:16:38+09:00x",
            "2005-11-14T02:16:38.1234",
            "2005-11-14T02:16:3",
            "2005-11-14T02:16:38-",
            "2005-11-14T02:16:38+09-00",
            "2005-11-14T02:16:38ZZ",
            "2005-11-14T02:16:38+09:00Z",
            "2005-11-14T02:16:38Z+09:00",
        ],
    )
    def test_rejected(self, text: str) -> None:
        """Partial or over-long matches fail."""
        assert recognize(text) is None

    def test_none_and_non_string(self) -> None:
        """None and non-strings are treated as no match."""
        assert recognize(None) is None
        assert recognize(20051114) is None  # type: ignore[arg-type]


class TestRecognizeLineTerminators:
    """Trailing whitespace and a single final NEL/LS/PS are trimmed."""

    def test_final_terminator_after_whitespace(self) -> None:
        """Whitespace then one terminator ends the input cleanly."""
        groups = recognize("2005-11-14T02:16:38+09:00\r\n \u2029")
        assert groups is not None
        assert groups.zone == "+09:00"

    def test_terminator_only_input(self) -> None:
        """A lone terminator is empty input."""
        assert recognize(" \u0085") is None

    def test_terminator_not_trimmed_at_start(self) -> None:
        """Leading NEL is not whitespace."""
        assert recognize("\u00852005-11-14T02:16:38Z") is None
