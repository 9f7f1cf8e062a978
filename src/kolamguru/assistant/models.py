"""Data models for the conversational assistant.

These models define messages, intents and response payloads,
independent of how the conversation is rendered.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field, model_validator
from uuid_extensions import uuid7

from .config import (
    DEFAULT_DISPLAY_NAME,
    DEFAULT_SCROLL_THRESHOLD,
    DEFAULT_THINKING_DELAY,
    DISPLAYED_SUGGESTIONS,
    MAX_SUGGESTIONS,
)


class Role(str, Enum):
    """Who authored a message."""

    USER = "user"
    ASSISTANT = "assistant"


class Category(str, Enum):
    """Topic tag shown on assistant messages."""

    TUTORIAL = "tutorial"
    CULTURAL = "cultural"
    TIPS = "tips"
    GENERAL = "general"


class Intent(str, Enum):
    """Intent categories, listed in classification priority order."""

    DURATION_BASED = "duration_based"
    HISTORY = "history"
    PATTERN_LEARNING = "pattern_learning"
    ENCOURAGEMENT = "encouragement"
    TECHNIQUE_TIPS = "technique_tips"
    GENERAL = "general"


class PatternTier(str, Enum):
    """Recommended pattern difficulty for a time budget."""

    QUICK = "quick"                    # up to 20 minutes
    STANDARD = "standard"              # 21-60 minutes
    ADVANCED = "advanced"              # 61-120 minutes
    FULL_IMMERSION = "full_immersion"  # more than two hours


class ResponsePayload(BaseModel):
    """What the assistant says in reply to one utterance."""

    body: str = Field(description="Reply text, may contain markdown")
    category: Category = Field(description="Topic tag for the reply")
    suggestions: tuple[str, ...] = Field(
        default=(),
        max_length=MAX_SUGGESTIONS,
        description="Ordered follow-up prompts"
    )

    model_config = {"frozen": True}


class Message(BaseModel):
    """A single entry in the conversation transcript.

    Messages are immutable once created. Only assistant messages
    carry a category and suggestions.
    """

    id: str = Field(default_factory=lambda: str(uuid7()))
    role: Role
    body: str
    created_at: datetime = Field(default_factory=datetime.now)
    category: Category | None = None
    suggestions: tuple[str, ...] = Field(default=(), max_length=MAX_SUGGESTIONS)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _user_messages_are_plain(self) -> "Message":
        if self.role == Role.USER and (self.category is not None or self.suggestions):
            raise ValueError("user messages cannot carry a category or suggestions")
        return self

    @classmethod
    def user(cls, text: str) -> "Message":
        """Create a user message for submitted text."""
        return cls(role=Role.USER, body=text)

    @classmethod
    def assistant(cls, payload: ResponsePayload) -> "Message":
        """Create an assistant message from a synthesized payload."""
        return cls(
            role=Role.ASSISTANT,
            body=payload.body,
            category=payload.category,
            suggestions=payload.suggestions,
        )

    @property
    def displayed_suggestions(self) -> tuple[str, ...]:
        """Suggestions offered as clickable chips."""
        return self.suggestions[:DISPLAYED_SUGGESTIONS]


class SessionConfig(BaseModel):
    """Per-session settings supplied by the hosting application."""

    display_name: str = Field(
        default=DEFAULT_DISPLAY_NAME,
        min_length=1,
        description="Name interpolated into greetings"
    )
    thinking_delay: float = Field(
        default=DEFAULT_THINKING_DELAY,
        ge=0.0,
        le=30.0,
        description="Seconds between the user message and the reply"
    )
    scroll_threshold: int = Field(
        default=DEFAULT_SCROLL_THRESHOLD,
        ge=0,
        description="Distance from bottom that still counts as following"
    )
