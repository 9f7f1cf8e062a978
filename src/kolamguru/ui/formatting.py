"""Text formatting utilities for the TUI and console.

Hides the details of how reply bodies are turned into renderables.
"""

import re

from rich.markdown import Markdown
from rich.markup import escape
from rich.text import Text

from ..assistant.models import Category
from .config import COMPONENT_STYLES, LEVEL_STYLES, LOG_MAX_MESSAGE_LENGTH, LogLevel

CATEGORY_STYLES = {
    Category.TUTORIAL: "bold green",
    Category.CULTURAL: "bold magenta",
    Category.TIPS: "bold yellow",
    Category.GENERAL: "bold cyan",
}


def normalize_bullets(text: str) -> str:
    """Turn "•" bullet lines into markdown list items."""
    return re.sub(r"^(\s*)•\s*", r"\1- ", text, flags=re.MULTILINE)


def render_markdown(text: str) -> Markdown:
    """Render a reply body as markdown."""
    return Markdown(normalize_bullets(text))


def category_badge(category: Category | None) -> Text:
    """Small colored label for an assistant message category."""
    if category is None:
        return Text("")
    return Text(f"[{category.value}]", style=CATEGORY_STYLES.get(category, "bold"))


def truncate(text: str, limit: int) -> str:
    """Shorten text for log lines."""
    return text[:limit] + "..." if len(text) > limit else text


def format_log_entry(level: LogLevel, component: str, message: str, timestamp: str) -> str:
    """Build one markup line for the log panel.

    Component and message are escaped: messages echo what the user typed.
    """
    level_style = LEVEL_STYLES.get(level, "white")
    component_style = COMPONENT_STYLES.get(component, "white")
    return (
        f"[dim]{timestamp}[/] "
        f"[{level_style}]{level.name:<5}[/] "
        f"[{component_style}]\\[{escape(component)}][/] "
        f"{escape(truncate(message, LOG_MAX_MESSAGE_LENGTH))}"
    )
