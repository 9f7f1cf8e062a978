"""Unit tests for response synthesis and the catalog."""
import pytest
from hypothesis import given
from hypothesis import strategies as st

from kolamguru.assistant import (
    LEARNING_PATHS,
    Category,
    Intent,
    PatternTier,
    select_tier,
    synthesize,
    welcome_payload,
)
from kolamguru.assistant.catalog import INTENT_RESPONSES, TIER_RESPONSES


class TestSelectTier:
    """Tests for select_tier()."""

    @pytest.mark.parametrize(
        "minutes,tier",
        [
            (1, PatternTier.QUICK),
            (20, PatternTier.QUICK),
            (21, PatternTier.STANDARD),
            (60, PatternTier.STANDARD),
            (61, PatternTier.ADVANCED),
            (120, PatternTier.ADVANCED),
            (121, PatternTier.FULL_IMMERSION),
            (480, PatternTier.FULL_IMMERSION),
        ],
    )
    def test_band_boundaries(self, minutes: int, tier: PatternTier):
        assert select_tier(minutes) == tier

    @pytest.mark.parametrize("minutes", [0, -5])
    def test_non_positive_rejected(self, minutes: int):
        with pytest.raises(ValueError):
            select_tier(minutes)

    @given(st.integers(min_value=1, max_value=100_000))
    def test_bands_partition_positive_durations(self, minutes: int):
        """Property test: every positive duration lands in the band containing it."""
        tier = select_tier(minutes)
        if minutes <= 20:
            assert tier == PatternTier.QUICK
        elif minutes <= 60:
            assert tier == PatternTier.STANDARD
        elif minutes <= 120:
            assert tier == PatternTier.ADVANCED
        else:
            assert tier == PatternTier.FULL_IMMERSION


class TestSynthesize:
    """Tests for synthesize()."""

    def test_quick_reply_mentions_minutes(self):
        payload = synthesize(Intent.DURATION_BASED, 15)
        assert "15 minutes" in payload.body
        assert "3×3" in payload.body
        assert payload.category == Category.TUTORIAL

    def test_one_hour_reply(self):
        payload = synthesize(Intent.DURATION_BASED, 60)
        assert "5×5" in payload.body
        assert payload.category == Category.TUTORIAL
        assert payload.suggestions == TIER_RESPONSES[PatternTier.STANDARD].suggestions

    def test_full_immersion_is_cultural(self):
        payload = synthesize(Intent.DURATION_BASED, 480)
        assert payload.category == Category.CULTURAL
        assert len(payload.suggestions) == 5

    def test_duration_based_needs_duration(self):
        with pytest.raises(ValueError):
            synthesize(Intent.DURATION_BASED, None)

    @pytest.mark.parametrize(
        "intent,category",
        [
            (Intent.HISTORY, Category.CULTURAL),
            (Intent.PATTERN_LEARNING, Category.TUTORIAL),
            (Intent.ENCOURAGEMENT, Category.TIPS),
            (Intent.TECHNIQUE_TIPS, Category.TIPS),
            (Intent.GENERAL, Category.GENERAL),
        ],
    )
    def test_intent_categories(self, intent: Intent, category: Category):
        assert synthesize(intent).category == category

    def test_general_reply_uses_display_name(self):
        assert "Meena" in synthesize(Intent.GENERAL, display_name="Meena").body

    def test_default_display_name(self):
        assert "Friend" in synthesize(Intent.GENERAL).body

    def test_deterministic(self):
        assert synthesize(Intent.HISTORY) == synthesize(Intent.HISTORY)

    @given(
        st.sampled_from(list(Intent)),
        st.integers(min_value=1, max_value=10_000),
    )
    def test_payload_invariants(self, intent: Intent, minutes: int):
        """Property test: bodies are filled and suggestions are bounded."""
        payload = synthesize(intent, minutes)
        assert payload.body
        assert "{" not in payload.body
        assert len(payload.suggestions) <= 5


class TestCatalog:
    """Tests for the fixed catalog content."""

    def test_every_tier_has_a_template(self):
        assert set(TIER_RESPONSES) == set(PatternTier)

    def test_every_other_intent_has_a_template(self):
        assert set(INTENT_RESPONSES) == set(Intent) - {Intent.DURATION_BASED}

    def test_welcome(self):
        payload = welcome_payload("Meena")
        assert payload.body.startswith("🙏 Namaste, Meena!")
        assert payload.category == Category.GENERAL
        assert payload.suggestions == (
            "I have 30 minutes",
            "Show me cultural history",
            "I need beginner tips",
            "What are festival patterns?",
        )

    def test_learning_paths(self):
        assert len(LEARNING_PATHS) == 8
        assert all(path.prompt for path in LEARNING_PATHS)
