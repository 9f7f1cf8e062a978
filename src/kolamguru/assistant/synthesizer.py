"""Response synthesis.

Maps a classified intent to a reply payload. Pure: the same inputs
always give the same payload, and timestamps are left to the transcript.
"""

from .catalog import INTENT_RESPONSES, TIER_RESPONSES, WELCOME, ResponseTemplate
from .config import (
    ADVANCED_TIER_MAX_MINUTES,
    DEFAULT_DISPLAY_NAME,
    QUICK_TIER_MAX_MINUTES,
    STANDARD_TIER_MAX_MINUTES,
)
from .models import Intent, PatternTier, ResponsePayload


def select_tier(duration: int) -> PatternTier:
    """Choose the pattern tier for a positive time budget.

    Bands are inclusive on their upper bound: 20 is quick, 21 is standard.

    Raises:
        ValueError: If duration is not positive
    """
    if duration <= 0:
        raise ValueError(f"Duration must be positive, got {duration}")
    if duration <= QUICK_TIER_MAX_MINUTES:
        return PatternTier.QUICK
    if duration <= STANDARD_TIER_MAX_MINUTES:
        return PatternTier.STANDARD
    if duration <= ADVANCED_TIER_MAX_MINUTES:
        return PatternTier.ADVANCED
    return PatternTier.FULL_IMMERSION


def _payload(template: ResponseTemplate, minutes: int | None, name: str) -> ResponsePayload:
    return ResponsePayload(
        body=template.render(minutes=minutes, name=name),
        category=template.category,
        suggestions=template.suggestions,
    )


def synthesize(
    intent: Intent,
    duration: int | None = None,
    display_name: str = DEFAULT_DISPLAY_NAME
) -> ResponsePayload:
    """Build the reply for an intent.

    Args:
        intent: Classified intent
        duration: Minutes available (required for DURATION_BASED)
        display_name: Name interpolated into greetings

    Returns:
        ResponsePayload with body, category and up to 5 suggestions

    Raises:
        ValueError: If DURATION_BASED is requested without a positive duration
    """
    if intent == Intent.DURATION_BASED:
        tier = select_tier(duration or 0)
        return _payload(TIER_RESPONSES[tier], duration, display_name)
    return _payload(INTENT_RESPONSES[intent], duration, display_name)


def welcome_payload(display_name: str = DEFAULT_DISPLAY_NAME) -> ResponsePayload:
    """The greeting every new conversation starts with."""
    return _payload(WELCOME, None, display_name)
