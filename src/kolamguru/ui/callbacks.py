"""Callback interface for session integration.

Hides the details of how the TUI receives updates from the
conversation session and its scroll synchronizer.
"""

from typing import TYPE_CHECKING

from ..assistant.models import Message
from ..assistant.scroll import FollowMode

if TYPE_CHECKING:
    from .widgets import ChatHistoryWidget, ComposingIndicator, DebugPanel, JumpToLatestButton


class TUICallback:
    """Routes session events to the widgets that display them."""

    def __init__(
        self,
        chat: "ChatHistoryWidget",
        composing: "ComposingIndicator",
        jump_button: "JumpToLatestButton",
        log_panel: "DebugPanel | None" = None,
    ) -> None:
        self.chat = chat
        self.composing = composing
        self.jump_button = jump_button
        self.log_panel = log_panel

    def handle_message(self, message: Message) -> None:
        """Render an appended transcript message."""
        self.chat.add_message(message)

    def handle_composing(self, active: bool) -> None:
        """Show or hide the composing indicator."""
        self.composing.display = active

    def handle_scroll_state(self, mode: FollowMode) -> None:
        """Show the jump button only while the view is detached."""
        self.jump_button.display = mode == FollowMode.DETACHED

    def handle_debug(self, level: str, component: str, message: str) -> None:
        """Route debug messages to the log panel."""
        if self.log_panel is None:
            return
        if level == "debug":
            self.log_panel.debug(component, message)
        elif level == "info":
            self.log_panel.info(component, message)
        elif level == "warning":
            self.log_panel.warning(component, message)
        elif level == "error":
            self.log_panel.error(component, message)
