"""Main Textual TUI application.

Orchestrates the UI components and connects them to a ConversationSession.
"""

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Button, Footer, Header

from ..assistant.catalog import LEARNING_PATHS
from ..assistant.models import SessionConfig
from ..assistant.session import ConversationSession, SessionClosedError
from .callbacks import TUICallback
from .config import LogLevel
from .styles import APP_CSS
from .themes import KOLAM_DUSK
from .widgets import (
    ChatHistoryWidget,
    ChatInputBar,
    ComposingIndicator,
    DebugPanel,
    JumpToLatestButton,
    LearningPathsPanel,
    PromptButton,
)


class KolamGuruApp(App):
    """Textual TUI for the Kolam Guru conversation."""

    CSS = APP_CSS
    TITLE = "Kolam Guru"
    SUB_TITLE = "Your cultural learning companion"

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("ctrl+d", "toggle_debug", "Log", priority=True),
        Binding("ctrl+r", "copy_last_response", "Copy Response"),
        Binding("end", "jump_to_latest", "Latest"),
    ]

    def __init__(
        self,
        config: SessionConfig | None = None,
        log_level: str | None = None,
    ) -> None:
        super().__init__()
        self._config = config or SessionConfig()
        self._log_level = log_level
        self._session: ConversationSession | None = None

    @property
    def session(self) -> ConversationSession | None:
        """The conversation session, available once mounted."""
        return self._session

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)

        with Vertical(id="sidebar"):
            yield LearningPathsPanel(LEARNING_PATHS, id="learning-paths")
            yield DebugPanel(id="debug-panel")

        with Vertical(id="conversation"):
            yield ChatHistoryWidget(id="chat-history")
            yield ComposingIndicator(id="composing")
            yield JumpToLatestButton(id="jump-latest")

        with Vertical(id="bottom-bar"):
            yield ChatInputBar(id="chat-input-bar")

        yield Footer()

    def on_mount(self) -> None:
        """Create the session and render its welcome message."""
        self.register_theme(KOLAM_DUSK)
        self.theme = "kolam-dusk"

        log_panel = self.query_one("#debug-panel", DebugPanel)
        if self._log_level is not None:
            log_panel.log_level = LogLevel.from_string(self._log_level)
            log_panel.show()
            log_panel.info("TUI", f"Log panel enabled with level: {self._log_level.upper()}")

        chat = self.query_one("#chat-history", ChatHistoryWidget)
        callback = TUICallback(
            chat=chat,
            composing=self.query_one("#composing", ComposingIndicator),
            jump_button=self.query_one("#jump-latest", JumpToLatestButton),
            log_panel=log_panel,
        )

        session = ConversationSession(self._config)
        session.set_message_callback(callback.handle_message)
        session.set_composing_callback(callback.handle_composing)
        session.set_debug_callback(callback.handle_debug)
        session.scroll.set_state_callback(callback.handle_scroll_state)
        chat.bind_scroll(session.scroll)
        self._session = session

        for message in session.transcript.snapshot():
            chat.add_message(message)

        self.sub_title = f"Namaste, {self._config.display_name}"
        self.query_one("#chat-input-bar", ChatInputBar).focus_input()

    async def on_unmount(self) -> None:
        """Discard pending replies when the view is torn down."""
        if self._session is not None:
            await self._session.close()

    def submit(self, text: str) -> None:
        """Send text to the session as if the user typed it."""
        if self._session is None:
            return
        try:
            self._session.submit(text)
        except SessionClosedError:
            self.notify("Conversation closed", severity="warning", timeout=2)

    def on_chat_input_bar_submitted(self, event: ChatInputBar.Submitted) -> None:
        """Handle user input submission."""
        self.submit(event.value)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Suggestion chips and learning paths submit their prompt verbatim."""
        if isinstance(event.button, PromptButton):
            event.stop()
            self.submit(event.button.prompt)
            self.query_one("#chat-input-bar", ChatInputBar).focus_input()
        elif event.button.id == "jump-latest":
            event.stop()
            self.action_jump_to_latest()

    def action_jump_to_latest(self) -> None:
        """Scroll to the newest message and resume following."""
        if self._session is not None:
            self._session.scroll.jump_to_latest()

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        is_visible = log_panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)

    def action_copy_last_response(self) -> None:
        """Copy last assistant response to clipboard."""
        message = self._session.transcript.last_assistant_message() if self._session else None
        if message is not None:
            self.copy_to_clipboard(message.body)
            self.notify("Response copied")
        else:
            self.notify("No response to copy", severity="warning")


async def run_textual_tui(
    config: SessionConfig | None = None,
    log_level: str | None = None,
) -> None:
    """Run the Textual TUI.

    Args:
        config: Session settings (display name, thinking delay, threshold)
        log_level: Log level for panel (debug/info/warning/error), None to hide
    """
    app = KolamGuruApp(config=config, log_level=log_level)
    await app.run_async()
