"""Rule-based intent classification.

The priority order lives in INTENT_RULES: rules are evaluated top to
bottom and the first one whose predicate holds picks the intent.
GENERAL is the fallback when no rule matches.
"""

from collections.abc import Callable
from dataclasses import dataclass

from .duration import extract_duration
from .models import Intent

# Keyword checks are plain substring containment on lowercased text,
# so "hard" also fires inside "hardly" or "orchard".
HISTORY_KEYWORDS = ("history", "origin", "tradition")
PATTERN_KEYWORDS = ("pattern", "design", "learn")
ENCOURAGEMENT_KEYWORDS = ("mistake", "wrong", "difficult", "hard")
TECHNIQUE_KEYWORDS = ("tip", "technique", "how to")


@dataclass(frozen=True)
class IntentRule:
    """Predicate over (lowercased text, duration) paired with its intent."""

    intent: Intent
    predicate: Callable[[str, int], bool]


def _contains_any(keywords: tuple[str, ...]) -> Callable[[str, int], bool]:
    def predicate(text: str, duration: int) -> bool:
        return any(keyword in text for keyword in keywords)
    return predicate


INTENT_RULES: tuple[IntentRule, ...] = (
    IntentRule(Intent.DURATION_BASED, lambda text, duration: duration > 0),
    IntentRule(Intent.HISTORY, _contains_any(HISTORY_KEYWORDS)),
    IntentRule(Intent.PATTERN_LEARNING, _contains_any(PATTERN_KEYWORDS)),
    IntentRule(Intent.ENCOURAGEMENT, _contains_any(ENCOURAGEMENT_KEYWORDS)),
    IntentRule(Intent.TECHNIQUE_TIPS, _contains_any(TECHNIQUE_KEYWORDS)),
)


@dataclass(frozen=True)
class Classification:
    """Result of analyzing one utterance."""

    intent: Intent
    duration: int | None

    def __repr__(self) -> str:
        return f"Classification({self.intent.value}, duration={self.duration})"


def classify_intent(
    text: str,
    duration: int | None = None,
    rules: tuple[IntentRule, ...] = INTENT_RULES
) -> Intent:
    """Pick exactly one intent for an utterance.

    Args:
        text: Raw user text
        duration: Minutes extracted from the text (None or 0 if absent)
        rules: Ordered rules to evaluate

    Returns:
        The intent of the first matching rule, or Intent.GENERAL
    """
    lowered = text.lower()
    minutes = duration or 0
    for rule in rules:
        if rule.predicate(lowered, minutes):
            return rule.intent
    return Intent.GENERAL


def analyze(text: str) -> Classification:
    """Extract the duration and classify the intent in one step."""
    duration = extract_duration(text)
    return Classification(intent=classify_intent(text, duration), duration=duration)
