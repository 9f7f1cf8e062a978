"""Tests for the Textual interface."""
import pytest
from rich.text import Text

from kolamguru.assistant import LEARNING_PATHS, Category, FollowMode, Role, SessionConfig
from kolamguru.ui import ChatHistoryWidget, DebugPanel, KolamGuruApp, LogLevel
from kolamguru.ui.formatting import category_badge, format_log_entry, normalize_bullets
from kolamguru.ui.widgets import ComposingIndicator, HistoryInput, JumpToLatestButton, PromptButton


def _app(**kwargs) -> KolamGuruApp:
    return KolamGuruApp(config=SessionConfig(display_name="Meena", thinking_delay=0), **kwargs)


class TestFormatting:
    """Tests for reply formatting helpers."""

    def test_normalize_bullets(self):
        assert normalize_bullets("• one\n  • two") == "- one\n  - two"

    def test_category_badge(self):
        assert category_badge(Category.TIPS).plain == "[tips]"
        assert category_badge(None).plain == ""

    def test_log_entry_escapes_user_text(self):
        line = format_log_entry(LogLevel.INFO, "Session", "User: 'what does [/b] mean'", "12:00:00")
        assert Text.from_markup(line).plain == "12:00:00 INFO  [Session] User: 'what does [/b] mean'"

    def test_log_level_from_string(self):
        assert LogLevel.from_string("Warning") == LogLevel.WARNING
        assert LogLevel.from_string("verbose") == LogLevel.DEBUG


class TestKolamGuruApp:
    """Pilot tests for the chat view."""

    @pytest.mark.asyncio
    async def test_welcome_rendered(self):
        app = _app()
        async with app.run_test():
            chat = app.query_one("#chat-history", ChatHistoryWidget)
            assert chat.message_count == 1
            assert not app.query_one("#jump-latest", JumpToLatestButton).display
            assert not app.query_one("#composing", ComposingIndicator).display

    @pytest.mark.asyncio
    async def test_typed_message_gets_reply(self):
        app = _app()
        async with app.run_test() as pilot:
            app.query_one("#chat-input", HistoryInput).value = "I have 1 hour"
            await pilot.press("enter")
            await pilot.pause()
            await app.session.wait_idle()
            await pilot.pause()

            chat = app.query_one("#chat-history", ChatHistoryWidget)
            assert chat.message_count == 3
            assert app.query_one("#chat-input", HistoryInput).value == ""
            assert app.session.transcript.snapshot()[-1].category == Category.TUTORIAL

    @pytest.mark.asyncio
    async def test_blank_input_not_sent(self):
        app = _app()
        async with app.run_test() as pilot:
            app.query_one("#chat-input", HistoryInput).value = "   "
            await pilot.press("enter")
            await pilot.pause()
            assert len(app.session.transcript) == 1

    @pytest.mark.asyncio
    async def test_jump_button_tracks_follow_mode(self):
        app = _app()
        async with app.run_test() as pilot:
            button = app.query_one("#jump-latest", JumpToLatestButton)
            app.session.scroll.on_user_scroll(total_height=1000, scroll_top=0, viewport_height=20)
            await pilot.pause()
            assert button.display

            app.action_jump_to_latest()
            await pilot.pause()
            assert not button.display

    @pytest.mark.asyncio
    async def test_toggle_debug_panel(self):
        app = _app()
        async with app.run_test() as pilot:
            panel = app.query_one("#debug-panel", DebugPanel)
            before = panel.display
            await pilot.press("ctrl+d")
            assert panel.display != before

    @pytest.mark.asyncio
    async def test_session_closed_on_exit(self):
        app = _app()
        async with app.run_test():
            session = app.session
        assert session.closed

    @pytest.mark.asyncio
    async def test_suggestion_chip_submits_its_text(self):
        app = _app()
        async with app.run_test() as pilot:
            chip = app.query(".suggestion-chip").first(PromptButton)
            chip.press()
            await pilot.pause()
            await app.session.wait_idle()
            await pilot.pause()

            user_messages = [m for m in app.session.transcript.snapshot() if m.role == Role.USER]
            assert [m.body for m in user_messages] == ["I have 30 minutes"]
            assert app.query_one("#chat-history", ChatHistoryWidget).message_count == 3

    @pytest.mark.asyncio
    async def test_learning_path_submits_its_prompt(self):
        app = _app()
        async with app.run_test() as pilot:
            app.query(".learning-path").first(PromptButton).press()
            await pilot.pause()
            await app.session.wait_idle()
            await pilot.pause()

            assert app.session.transcript.snapshot()[1].body == LEARNING_PATHS[0].prompt

    @pytest.mark.asyncio
    async def test_reply_while_scrolled_up_returns_to_latest(self):
        app = _app()
        async with app.run_test() as pilot:
            button = app.query_one("#jump-latest", JumpToLatestButton)
            app.session.scroll.on_user_scroll(total_height=1000, scroll_top=750, viewport_height=50)
            await pilot.pause()
            assert button.display

            app.submit("I have 1 hour")
            await app.session.wait_idle()
            await pilot.pause()

            reply = app.session.transcript.snapshot()[-1]
            assert "With 60 minutes" in reply.body
            assert app.session.scroll.mode == FollowMode.FOLLOWING
            assert not button.display

    @pytest.mark.asyncio
    async def test_markup_in_user_text_with_log_panel(self):
        app = _app(log_level="debug")
        async with app.run_test() as pilot:
            app.submit("what does [/b] mean [bold]")
            await app.session.wait_idle()
            await pilot.pause()
            assert len(app.session.transcript) == 3
