"""Terminal UI module for kolamguru.

Provides a Textual-based TUI for the conversation.

Module structure (Parnas principle - each module hides a design decision):
- widgets.py: Custom widgets (transcript view, input history, chips, log)
- styles.py: CSS styling (layout decisions)
- themes.py: Color palettes and theme configuration
- formatting.py: Reply body rendering
- callbacks.py: Session integration (how TUI receives updates)
- app.py: Application orchestration (user interaction flow)
"""

from .app import KolamGuruApp, run_textual_tui
from .callbacks import TUICallback
from .config import LogLevel
from .widgets import ChatHistoryWidget, ChatInputBar, DebugPanel, PromptButton

__all__ = [
    "ChatHistoryWidget",
    "ChatInputBar",
    "DebugPanel",
    "KolamGuruApp",
    "LogLevel",
    "PromptButton",
    "TUICallback",
    "run_textual_tui",
]
