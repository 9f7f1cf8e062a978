"""
Kolam Guru: a rule-based conversational guide to the Kolam art tradition.

This package follows Parnas's information hiding principles,
where each module hides a specific design decision.
"""

__version__ = "0.1.0"

from .assistant import (
    Category,
    ConversationSession,
    Intent,
    Message,
    SessionConfig,
    create_conversation_session,
)

__all__ = [
    "Category",
    "ConversationSession",
    "Intent",
    "Message",
    "SessionConfig",
    "create_conversation_session",
]
