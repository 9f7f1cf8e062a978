"""Unit tests for intent classification."""
import pytest
from hypothesis import given
from hypothesis import strategies as st

from kolamguru.assistant import INTENT_RULES, Classification, Intent, analyze, classify_intent


class TestClassifyIntent:
    """Tests for classify_intent()."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Show me cultural history", Intent.HISTORY),
            ("Where did this tradition begin?", Intent.HISTORY),
            ("Teach me a new pattern", Intent.PATTERN_LEARNING),
            ("I want to learn", Intent.PATTERN_LEARNING),
            ("I keep making mistakes", Intent.ENCOURAGEMENT),
            ("This is so difficult", Intent.ENCOURAGEMENT),
            ("Any tips for smooth lines?", Intent.TECHNIQUE_TIPS),
            ("How to hold the powder?", Intent.TECHNIQUE_TIPS),
            ("Hello there", Intent.GENERAL),
        ],
    )
    def test_keyword_intents(self, text: str, expected: Intent):
        assert classify_intent(text) == expected

    def test_duration_wins_over_keywords(self):
        assert classify_intent("history in 15 minutes", 15) == Intent.DURATION_BASED

    def test_zero_duration_is_no_duration(self):
        assert classify_intent("Teach me a pattern", 0) == Intent.PATTERN_LEARNING

    def test_history_before_pattern(self):
        assert classify_intent("the history of this design") == Intent.HISTORY

    def test_pattern_before_encouragement(self):
        assert classify_intent("this pattern is hard") == Intent.PATTERN_LEARNING

    def test_encouragement_before_technique(self):
        assert classify_intent("tips for when I go wrong") == Intent.ENCOURAGEMENT

    def test_keywords_case_insensitive(self):
        assert classify_intent("HISTORY PLEASE") == Intent.HISTORY

    def test_substring_keywords_match(self):
        """Keywords match inside other words ("hardly" contains "hard")."""
        assert classify_intent("I hardly know anything") == Intent.ENCOURAGEMENT

    def test_empty_rules_fall_back_to_general(self):
        assert classify_intent("history", rules=()) == Intent.GENERAL

    def test_rule_order(self):
        assert [rule.intent for rule in INTENT_RULES] == [
            Intent.DURATION_BASED,
            Intent.HISTORY,
            Intent.PATTERN_LEARNING,
            Intent.ENCOURAGEMENT,
            Intent.TECHNIQUE_TIPS,
        ]

    @given(st.text(max_size=60), st.one_of(st.none(), st.integers(min_value=0, max_value=1_000)))
    def test_exactly_one_intent(self, text: str, duration: int | None):
        """Property test: every input classifies to a single Intent."""
        assert isinstance(classify_intent(text, duration), Intent)

    @given(st.text(max_size=60), st.integers(min_value=1, max_value=10_000))
    def test_positive_duration_always_duration_based(self, text: str, duration: int):
        """Property test: a positive duration decides the intent."""
        assert classify_intent(text, duration) == Intent.DURATION_BASED


class TestAnalyze:
    """Tests for analyze()."""

    def test_duration_utterance(self):
        assert analyze("I have 1 hour") == Classification(Intent.DURATION_BASED, 60)

    def test_keyword_utterance(self):
        result = analyze("Show me cultural history")
        assert result.intent == Intent.HISTORY
        assert result.duration is None

    def test_zero_minutes(self):
        result = analyze("0 minutes to learn")
        assert result.duration == 0
        assert result.intent == Intent.PATTERN_LEARNING

    def test_brief_phrase_is_duration(self):
        """"quick" yields 15 minutes, so even "quick tip" is duration based."""
        assert analyze("quick tip please").intent == Intent.DURATION_BASED
