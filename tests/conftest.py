"""Pytest configuration and shared fixtures."""
import pytest
import pytest_asyncio

from kolamguru.assistant import ConversationSession, SessionConfig


@pytest.fixture
def instant_config():
    """Session settings with no thinking delay."""
    return SessionConfig(display_name="Meena", thinking_delay=0)


@pytest.fixture
def slow_config():
    """Session settings whose replies stay pending for the whole test."""
    return SessionConfig(display_name="Meena", thinking_delay=10)


@pytest.fixture
def recorder():
    """Collect callback invocations in order."""
    calls = []

    def record(*args):
        calls.append(args if len(args) > 1 else args[0])

    record.calls = calls
    return record


@pytest_asyncio.fixture
async def instant_session(instant_config):
    """A session that replies immediately and is closed afterwards."""
    session = ConversationSession(instant_config)
    yield session
    await session.close()
