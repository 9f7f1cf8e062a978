"""Conversational assistant core for kolamguru.

Module structure (each module hides one design decision):
- models.py: Messages, intents, tiers and session settings
- duration.py: Ordered phrase rules for the available time
- intents.py: Ordered intent rules (first match wins)
- catalog.py: What the assistant says
- synthesizer.py: Which catalog entry answers an intent
- transcript.py: Append-only message log
- scroll.py: When the view follows new content
- session.py: Pipeline orchestration and reply delivery
"""

from .catalog import LEARNING_PATHS, LearningPath, ResponseTemplate
from .duration import DURATION_RULES, DurationRule, extract_duration
from .intents import INTENT_RULES, Classification, IntentRule, analyze, classify_intent
from .models import (
    Category,
    Intent,
    Message,
    PatternTier,
    ResponsePayload,
    Role,
    SessionConfig,
)
from .scroll import FollowMode, ScrollSynchronizer, ScrollViewport
from .session import ConversationSession, SessionClosedError, create_conversation_session
from .synthesizer import select_tier, synthesize, welcome_payload
from .transcript import Transcript

__all__ = [
    "Category",
    "Classification",
    "ConversationSession",
    "DURATION_RULES",
    "DurationRule",
    "FollowMode",
    "INTENT_RULES",
    "Intent",
    "IntentRule",
    "LEARNING_PATHS",
    "LearningPath",
    "Message",
    "PatternTier",
    "ResponsePayload",
    "ResponseTemplate",
    "Role",
    "ScrollSynchronizer",
    "ScrollViewport",
    "SessionClosedError",
    "SessionConfig",
    "Transcript",
    "analyze",
    "classify_intent",
    "create_conversation_session",
    "extract_duration",
    "select_tier",
    "synthesize",
    "welcome_payload",
]
