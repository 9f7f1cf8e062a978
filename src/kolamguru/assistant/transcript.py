"""Append-only conversation transcript.

Hides how messages are held in memory. There is no edit or delete:
messages live for as long as the session does.
"""

from collections.abc import Callable

from .models import Message, Role

MessageListener = Callable[[Message], None]


class Transcript:
    """Ordered log of messages, insertion order is conversation order.

    Listeners registered with subscribe() are called after every append,
    in the order they were registered.

    Example:
        transcript = Transcript(seed=welcome)
        transcript.subscribe(lambda message: print(message.body))
        transcript.append(Message.user("I have 15 minutes"))
    """

    def __init__(self, seed: Message | None = None) -> None:
        self._messages: list[Message] = []
        self._listeners: list[MessageListener] = []
        if seed is not None:
            self._messages.append(seed)

    def subscribe(self, listener: MessageListener) -> None:
        """Register a callable invoked with each appended message."""
        self._listeners.append(listener)

    def append(self, message: Message) -> None:
        """Add a message at the end and notify listeners."""
        self._messages.append(message)
        for listener in self._listeners:
            listener(message)

    def snapshot(self) -> tuple[Message, ...]:
        """Return all messages in conversation order."""
        return tuple(self._messages)

    def last_assistant_message(self) -> Message | None:
        """Get the most recent assistant message."""
        for message in reversed(self._messages):
            if message.role == Role.ASSISTANT:
                return message
        return None

    def __len__(self) -> int:
        return len(self._messages)

    def __repr__(self) -> str:
        return f"Transcript(messages={len(self._messages)})"
