"""Tests for date parsing."""

from datetime import datetime, timedelta, timezone

from safejson import DEFAULT_DATE_PATTERNS, SafeNode
from safejson.dates import candidate_patterns, parse_date


class TestParseDate:
    """Tests for parse_date."""

    def test_utc_seconds_with_default_patterns(self):
        """Test ISO-8601 with a Z suffix parses as UTC."""
        parsed = parse_date("2024-07-15T10:30:00Z")
        assert parsed == datetime(2024, 7, 15, 10, 30, tzinfo=timezone.utc)
        assert parsed.utcoffset() == timedelta(0)

    def test_utc_milliseconds(self):
        """Test ISO-8601 with milliseconds and Z."""
        parsed = parse_date("2024-07-15T10:30:00.250Z")
        assert parsed == datetime(2024, 7, 15, 10, 30, 0, 250000, tzinfo=timezone.utc)

    def test_offset(self):
        """Test ISO-8601 with a numeric offset."""
        parsed = parse_date("2024-07-15T10:30:00+02:00")
        assert parsed.utcoffset() == timedelta(hours=2)
        assert parsed.astimezone(timezone.utc).hour == 8

    def test_date_only(self):
        """Test ISO date without a time."""
        assert parse_date("2023-10-20") == datetime(2023, 10, 20)

    def test_slash_delimited(self):
        """Test slash-delimited dates reach their fallback patterns."""
        assert parse_date("2023/12/25") == datetime(2023, 12, 25)
        assert parse_date("2023/12/25 08:15:00") == datetime(2023, 12, 25, 8, 15)

    def test_us_style(self):
        """Test month/day/year dates."""
        assert parse_date("07/04/2024") == datetime(2024, 7, 4)
        assert parse_date("07/04/2024 18:00:00") == datetime(2024, 7, 4, 18)

    def test_no_match(self):
        """Test that unparsable text gives None."""
        assert parse_date("not a date") is None
        assert parse_date("2024-13-45") is None

    def test_whole_string_must_match(self):
        """Test that trailing text prevents a match."""
        assert parse_date("2023-10-20 and more") is None

    def test_custom_patterns_tried_first(self):
        """Test caller patterns take priority over the defaults."""
        # Day-first reading wins over the built-in month-first pattern
        assert parse_date("07/04/2024", ["%d/%m/%Y"]) == datetime(2024, 4, 7)

    def test_custom_pattern_with_literal_z(self):
        """Test that custom patterns ending in Z are read as UTC."""
        parsed = parse_date("20240715 1030Z", ["%Y%m%d %H%MZ"])
        assert parsed.tzinfo is timezone.utc

    def test_candidate_order(self):
        """Test the order patterns are tried in."""
        patterns = list(candidate_patterns(["%d.%m.%Y"]))
        assert patterns[0] == "%d.%m.%Y"
        assert tuple(patterns[1:]) == DEFAULT_DATE_PATTERNS


class TestNodeDates:
    """Tests for SafeNode.get_date and is_date."""

    def setup_method(self):
        """Set up test fixtures."""
        self.root = SafeNode.parse(
            '{"event_date": "2024-07-15T10:30:00Z", "another_date": "2023-10-20", '
            '"count": 20240715, "label": "soon"}'
        )

    def test_get_date(self):
        """Test date extraction from string values."""
        assert self.root.get("event_date").get_date() is not None
        assert self.root.get("another_date").get_date("%Y-%m-%d") == datetime(2023, 10, 20)

    def test_only_strings_are_dates(self):
        """Test that numbers are never parsed as dates."""
        assert self.root.get("count").get_date("%Y%m%d") is None
        assert not self.root.get("count").is_date("%Y%m%d")

    def test_is_date(self):
        """Test is_date mirrors get_date."""
        assert self.root.get("event_date").is_date()
        assert not self.root.get("label").is_date()
        assert not self.root.get("absent").is_date()
