"""Unit tests for duration extraction."""
from hypothesis import given
from hypothesis import strategies as st

from kolamguru.assistant import DURATION_RULES, extract_duration


class TestNumericPhrases:
    """Tests for "N minutes" and "N hours"."""

    def test_minutes(self):
        assert extract_duration("I have 15 minutes") == 15

    def test_single_minute(self):
        assert extract_duration("just 1 minute") == 1

    def test_minutes_without_space(self):
        assert extract_duration("45minutes free") == 45

    def test_hours_converted_to_minutes(self):
        assert extract_duration("I have 1 hour") == 60
        assert extract_duration("I have 3 hours") == 180

    def test_case_insensitive(self):
        assert extract_duration("I HAVE 2 HOURS") == 120

    def test_minutes_rule_wins_over_hours(self):
        """First matching rule decides even if a later rule also matches."""
        assert extract_duration("2 hours and 10 minutes") == 10

    def test_zero_minutes_stops_evaluation(self):
        """A rule yielding 0 still ends the search."""
        assert extract_duration("0 minutes, I'm in a quick hurry") == 0

    @given(st.integers(min_value=0, max_value=10_000))
    def test_any_minute_count(self, n: int):
        """Property test: "N minutes" always yields N."""
        assert extract_duration(f"I have {n} minutes") == n

    @given(st.integers(min_value=0, max_value=1_000))
    def test_any_hour_count(self, n: int):
        """Property test: "N hours" always yields N * 60."""
        assert extract_duration(f"about {n} hours today") == n * 60


class TestFixedPhrases:
    """Tests for phrases mapped to a fixed number of minutes."""

    def test_half_hour(self):
        assert extract_duration("I have half hour") == 30
        assert extract_duration("maybe 30 min") == 30

    def test_quarter_hour(self):
        assert extract_duration("a quarter hour") == 15
        assert extract_duration("15 min") == 15

    def test_whole_day(self):
        assert extract_duration("I have all day") == 480
        assert extract_duration("the whole day") == 480
        assert extract_duration("my entire day is free") == 480

    def test_brief_session(self):
        assert extract_duration("something quick") == 15
        assert extract_duration("a short one please") == 15

    def test_ample_session(self):
        assert extract_duration("an extended session") == 120
        assert extract_duration("I have plenty time") == 120

    def test_brief_checked_before_ample(self):
        assert extract_duration("a quick but long pattern") == 15

    def test_substring_matches_count(self):
        """Words containing a phrase still match ("belong" has "long")."""
        assert extract_duration("where does kolam belong") == 120


class TestNoDuration:
    """Tests for text without any time phrase."""

    def test_plain_question(self):
        assert extract_duration("Tell me about the history") is None

    def test_empty_text(self):
        assert extract_duration("") is None

    def test_custom_rules(self):
        """An empty rule table never matches."""
        assert extract_duration("I have 15 minutes", rules=()) is None

    def test_rule_order(self):
        names = [rule.name for rule in DURATION_RULES]
        assert names == [
            "minutes", "hours", "half_hour", "quarter_hour", "whole_day", "brief", "ample",
        ]

    @given(st.text(alphabet="abcdeghijmnpvwxyz ", max_size=40))
    def test_total_on_arbitrary_text(self, text: str):
        """Property test: extraction never raises and is None or non-negative."""
        result = extract_duration(text)
        assert result is None or result >= 0
