"""Conversation session orchestration.

Owns the transcript and the scroll synchronizer for one conversation
view and runs the pipeline:

    submit -> append user message -> thinking delay -> extract duration
    -> classify intent -> synthesize reply -> append assistant message

Replies are delivered by asyncio tasks tied to the session. Closing the
session cancels them, so nothing is appended after teardown.
"""

import asyncio
import contextlib
from collections.abc import Callable
from typing import Any

from .duration import extract_duration
from .intents import classify_intent
from .models import Message, ResponsePayload, SessionConfig
from .scroll import ScrollSynchronizer
from .synthesizer import synthesize, welcome_payload
from .transcript import Transcript

MessageCallback = Callable[[Message], None]
ComposingCallback = Callable[[bool], None]
DebugCallback = Callable[[str, str, str], None]


class SessionClosedError(RuntimeError):
    """Raised when text is submitted to a session that was torn down."""


def _truncate(text: str, limit: int = 50) -> str:
    return text[:limit] + "..." if len(text) > limit else text


class ConversationSession:
    """A single conversation between the user and the assistant.

    Example:
        session = ConversationSession(SessionConfig(display_name="Meena"))
        session.set_message_callback(render)
        session.submit("I have 1 hour")
        await session.wait_idle()
        session.transcript.snapshot()[-1].category  # Category.TUTORIAL
        await session.close()
    """

    def __init__(
        self,
        config: SessionConfig | None = None,
        scroll: ScrollSynchronizer | None = None,
    ) -> None:
        self._config = config or SessionConfig()
        self._scroll = scroll or ScrollSynchronizer(threshold=self._config.scroll_threshold)
        self._transcript = Transcript(seed=Message.assistant(welcome_payload(self._config.display_name)))
        self._transcript.subscribe(self._on_append)
        self._pending: set[asyncio.Task[None]] = set()
        self._closed = False
        self._message_callback: MessageCallback | None = None
        self._composing_callback: ComposingCallback | None = None
        self._debug_callback: DebugCallback | None = None

    @property
    def config(self) -> SessionConfig:
        return self._config

    @property
    def transcript(self) -> Transcript:
        return self._transcript

    @property
    def scroll(self) -> ScrollSynchronizer:
        return self._scroll

    @property
    def composing(self) -> bool:
        """True while at least one reply is waiting to be delivered."""
        return bool(self._pending)

    @property
    def closed(self) -> bool:
        return self._closed

    def set_message_callback(self, callback: MessageCallback | None) -> None:
        """Set a callable invoked with every appended message."""
        self._message_callback = callback

    def set_composing_callback(self, callback: ComposingCallback | None) -> None:
        """Set a callable invoked when the composing indicator changes."""
        self._composing_callback = callback

    def set_debug_callback(self, callback: DebugCallback | None) -> None:
        """Set the debug callback for detailed logging.

        Args:
            callback: Function(level, component, message) where level is
                one of "debug", "info", "warning", "error"
        """
        self._debug_callback = callback

    def _debug(self, level: str, component: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, component, message)

    def _on_append(self, message: Message) -> None:
        if self._message_callback:
            self._message_callback(message)
        self._scroll.on_content_changed()
        self._debug("debug", "Scroll", f"Content changed, mode: {self._scroll.mode.value}")

    def _set_composing(self, before: bool) -> None:
        after = self.composing
        if before != after and self._composing_callback:
            self._composing_callback(after)

    def respond(self, text: str) -> ResponsePayload:
        """Run the synchronous pipeline for one utterance.

        Does not touch the transcript.
        """
        duration = extract_duration(text)
        intent = classify_intent(text, duration)
        self._debug("info", "Intent", f"{intent.value} (duration={duration})")
        return synthesize(intent, duration, self._config.display_name)

    def submit(self, text: str) -> Message | None:
        """Submit user text.

        Blank or whitespace-only text is ignored. Otherwise the user
        message is appended immediately and the reply is scheduled on the
        running event loop.

        Args:
            text: Raw text from the input field or a suggestion chip

        Returns:
            The appended user message, or None if the text was blank

        Raises:
            SessionClosedError: If the session was closed
        """
        if not text or not text.strip():
            self._debug("debug", "Session", "Ignored blank submission")
            return None
        if self._closed:
            raise SessionClosedError("Cannot submit to a closed conversation")

        message = Message.user(text)
        self._transcript.append(message)
        self._debug("info", "Session", f"User: '{_truncate(text)}'")

        composing_before = self.composing
        task = asyncio.create_task(self._deliver(text))
        self._pending.add(task)
        task.add_done_callback(self._on_delivery_done)
        self._set_composing(composing_before)
        return message

    async def _deliver(self, text: str) -> None:
        if self._config.thinking_delay > 0:
            await asyncio.sleep(self._config.thinking_delay)
        if self._closed:
            self._debug("debug", "Session", "Discarded reply after close")
            return
        payload = self.respond(text)
        self._transcript.append(Message.assistant(payload))
        self._debug("info", "Session", f"Reply delivered ({payload.category.value})")

    def _on_delivery_done(self, task: "asyncio.Task[None]") -> None:
        composing_before = self.composing
        self._pending.discard(task)
        if not task.cancelled() and task.exception() is not None:
            self._debug("error", "Session", f"Reply failed: {task.exception()}")
        if not self._closed:
            self._set_composing(composing_before)

    async def wait_idle(self) -> None:
        """Wait until every pending reply has been delivered."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    async def close(self) -> None:
        """Tear the session down and discard pending replies."""
        if self._closed:
            return
        self._closed = True
        pending = list(self._pending)
        for task in pending:
            task.cancel()
        for task in pending:
            with contextlib.suppress(asyncio.CancelledError):
                await task
        self._scroll.detach()
        if pending:
            self._debug("info", "Session", f"Closed, discarded {len(pending)} pending reply(ies)")


def create_conversation_session(
    display_name: str | None = None,
    **kwargs: Any
) -> ConversationSession:
    """Create a conversation session.

    Args:
        display_name: Name from the auth collaborator, None for the default
        **kwargs: Other SessionConfig fields (thinking_delay, scroll_threshold)

    Returns:
        ConversationSession instance
    """
    if display_name:
        kwargs["display_name"] = display_name
    return ConversationSession(SessionConfig(**kwargs))
