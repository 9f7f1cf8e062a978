"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Input history management
- Chat message rendering and suggestion chips
- Scroll reporting for the transcript view
- Log rendering and level filtering
"""

from datetime import datetime

from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.events import Click
from textual.message import Message as TextualMessage
from textual.widgets import Button, Input, Markdown, RichLog, Static

from ..assistant.catalog import COMPOSING_TEXT, LearningPath
from ..assistant.models import Message, Role
from ..assistant.scroll import ScrollSynchronizer
from .config import (
    ASSISTANT_NAME,
    INPUT_HISTORY_MAX_SIZE,
    JUMP_TO_LATEST_LABEL,
    LOG_TIMESTAMP_FORMAT,
    MESSAGE_TIMESTAMP_FORMAT,
    USER_NAME,
    LogLevel,
)
from .formatting import format_log_entry, normalize_bullets


class ClickableMessage(Vertical):
    """A chat message container that copies content when clicked."""

    def __init__(self, *children, content: str, **kwargs) -> None:
        super().__init__(*children, **kwargs)
        self._content = content

    def on_click(self, event: Click) -> None:
        """Copy message content to clipboard when clicked."""
        event.stop()
        self.app.copy_to_clipboard(self._content)
        self.app.notify("Copied to clipboard", timeout=2)


class PromptButton(Button):
    """A button that submits its prompt verbatim when pressed.

    Used for suggestion chips and learning paths.
    """

    def __init__(self, label: str, prompt: str | None = None, **kwargs) -> None:
        super().__init__(label, **kwargs)
        self.prompt = prompt if prompt is not None else label


class HistoryInput(Input):
    """Input widget with command history support.

    Use Up/Down arrow keys to navigate through history.
    Multi-line pastes are converted to single line (newlines become spaces).
    """

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._history: list[str] = []
        self._history_index: int = -1
        self._current_input: str = ""

    def _on_paste(self, event) -> None:
        """Handle paste events - convert newlines to spaces for single-line input."""
        if event.text:
            clean_text = " ".join(event.text.split())
            self.insert_text_at_cursor(clean_text)
            event.prevent_default()
            event.stop()

    def _on_key(self, event) -> None:
        """Handle key events for history navigation."""
        if event.key == "up":
            if self._history:
                if self._history_index == -1:
                    self._current_input = self.value
                    self._history_index = len(self._history) - 1
                elif self._history_index > 0:
                    self._history_index -= 1
                self.value = self._history[self._history_index]
                self.cursor_position = len(self.value)
            event.prevent_default()
            event.stop()
        elif event.key == "down":
            if self._history_index != -1:
                if self._history_index < len(self._history) - 1:
                    self._history_index += 1
                    self.value = self._history[self._history_index]
                else:
                    self._history_index = -1
                    self.value = self._current_input
                self.cursor_position = len(self.value)
            event.prevent_default()
            event.stop()

    def add_to_history(self, command: str) -> None:
        """Add a command to history."""
        if command and (not self._history or self._history[-1] != command):
            self._history.append(command)
            del self._history[:-INPUT_HISTORY_MAX_SIZE]
        self._history_index = -1
        self._current_input = ""


class ChatInputBar(Horizontal):
    """Chat input bar with a single-line input and Send button.

    Enter submits. Shift+Enter is not a submit key.
    """

    class Submitted(TextualMessage):
        """Message sent when user submits input."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    def compose(self):
        yield HistoryInput(
            id="chat-input",
            placeholder="Ask about techniques, cultural stories, history, or tell me your time...",
        )
        yield Button("Send", id="send-btn", variant="success").with_tooltip(
            "Submit message (Enter)"
        )

    def on_mount(self) -> None:
        self.query_one("#chat-input", HistoryInput).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "send-btn":
            event.stop()
            self._submit()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self._submit()

    def _submit(self) -> None:
        text_input = self.query_one("#chat-input", HistoryInput)
        value = text_input.value
        if value.strip():
            text_input.add_to_history(value)
            text_input.value = ""
            self.post_message(self.Submitted(value))

    def focus_input(self) -> None:
        """Focus the text input."""
        self.query_one("#chat-input", HistoryInput).focus()


class ChatHistoryWidget(VerticalScroll):
    """Scrollable transcript view.

    Acts as the viewport of a ScrollSynchronizer: every change of the
    scroll offset is reported as a scroll gesture, and the synchronizer
    calls scroll_to_bottom() when the view should follow new content.
    """

    BORDER_TITLE = "Kolam Guru"
    BORDER_SUBTITLE = "Conversation"
    ALLOW_MAXIMIZE = True

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._messages: list[Message] = []
        self._scroll_sync: ScrollSynchronizer | None = None

    def on_mount(self) -> None:
        self.watch(self, "scroll_y", self._on_scroll_offset_changed, init=False)

    def bind_scroll(self, synchronizer: ScrollSynchronizer) -> None:
        """Report scroll gestures to the synchronizer and accept its requests."""
        self._scroll_sync = synchronizer
        synchronizer.attach(self)

    def _on_scroll_offset_changed(self, scroll_y: float) -> None:
        if self._scroll_sync is None:
            return
        self._scroll_sync.on_user_scroll(
            total_height=self.virtual_size.height,
            scroll_top=scroll_y,
            viewport_height=self.container_size.height,
        )

    def scroll_to_bottom(self) -> None:
        """Move the view to the newest message (no-op until mounted)."""
        if not self.is_attached:
            return
        self.scroll_end(animate=False)

    def add_message(self, message: Message) -> None:
        """Render a transcript message."""
        self._messages.append(message)
        self.mount(self._render_message(message))
        self.border_subtitle = f"{len(self._messages)} messages"

    @property
    def message_count(self) -> int:
        return len(self._messages)

    def _render_message(self, message: Message) -> ClickableMessage:
        timestamp = message.created_at.strftime(MESSAGE_TIMESTAMP_FORMAT)
        if message.role == Role.USER:
            header = Static(f"> {USER_NAME} \\[{timestamp}]", classes="message-header")
            body = Static(message.body, classes="message-content", markup=False)
            return ClickableMessage(
                header, body, content=message.body, classes="chat-message user-message"
            )

        category = f" · {message.category.value}" if message.category else ""
        header = Static(f"< {ASSISTANT_NAME} \\[{timestamp}]{category}", classes="message-header")
        body = Markdown(normalize_bullets(message.body), classes="message-content")
        children = [header, body]
        if message.displayed_suggestions:
            chips = [
                PromptButton(suggestion, classes="suggestion-chip")
                for suggestion in message.displayed_suggestions
            ]
            children.append(Horizontal(*chips, classes="suggestions"))
        return ClickableMessage(
            *children, content=message.body, classes="chat-message assistant-message"
        )


class ComposingIndicator(Static):
    """Shown while the assistant is preparing a reply."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(f"[italic]{COMPOSING_TEXT}[/]", *args, **kwargs)

    def on_mount(self) -> None:
        self.display = False


class JumpToLatestButton(Button):
    """The "new messages below" affordance, visible only while detached."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(JUMP_TO_LATEST_LABEL, *args, **kwargs)

    def on_mount(self) -> None:
        self.display = False


class LearningPathsPanel(VerticalScroll):
    """Sidebar of one-click learning path prompts."""

    BORDER_TITLE = "Learning Paths"

    def __init__(self, paths: tuple[LearningPath, ...], *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._paths = paths

    def compose(self):
        for path in self._paths:
            yield PromptButton(path.label, prompt=path.prompt, classes="learning-path").with_tooltip(
                path.description
            )


class DebugPanel(RichLog):
    """Log panel for real-time tracing with level filtering.

    Shows timestamped log messages from all components.
    Supports standard log levels: DEBUG < INFO < WARNING < ERROR.
    Hidden by default, shown with --log-level flag or toggled with Ctrl+D.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Trace log"

    def __init__(self, *args, log_level: LogLevel = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=False,
            **kwargs
        )
        self._log_level = log_level

    @property
    def log_level(self) -> LogLevel:
        """Current log level threshold."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: LogLevel) -> None:
        """Set log level threshold."""
        self._log_level = level
        self._update_subtitle()

    def _update_subtitle(self) -> None:
        if self.display:
            self.border_subtitle = f"Level: {self._log_level.name}"
        else:
            self.border_subtitle = "Hidden"

    def on_mount(self) -> None:
        """Hide by default."""
        self.display = False

    def write_entry(
        self,
        component: str,
        message: str,
        level: LogLevel = LogLevel.DEBUG
    ) -> None:
        """Add a log entry if it meets the current level threshold."""
        if level < self._log_level:
            return
        timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)
        self.write(format_log_entry(level, component, message, timestamp))

    def debug(self, component: str, message: str) -> None:
        """Log a DEBUG level message."""
        self.write_entry(component, message, LogLevel.DEBUG)

    def info(self, component: str, message: str) -> None:
        """Log an INFO level message."""
        self.write_entry(component, message, LogLevel.INFO)

    def warning(self, component: str, message: str) -> None:
        """Log a WARNING level message."""
        self.write_entry(component, message, LogLevel.WARNING)

    def error(self, component: str, message: str) -> None:
        """Log an ERROR level message."""
        self.write_entry(component, message, LogLevel.ERROR)

    def show(self) -> None:
        """Show the log panel."""
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        """Hide the log panel."""
        self.display = False
        self.border_subtitle = "Hidden"

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        if self.display:
            self.hide()
            return False
        self.show()
        return True
