"""Configuration factory functions for CLI.

Centralizes creation of session settings from environment variables.
Hides configuration details from command implementations.
"""

import os

from pydantic import ValidationError
from rich.console import Console

from ..assistant.models import SessionConfig

# Default console for output
_console = Console()


def get_session_config(
    display_name: str | None = None,
    thinking_delay: float | None = None,
    scroll_threshold: int | None = None,
    console: Console | None = None,
) -> SessionConfig:
    """Create session settings from environment variables and overrides.

    Explicit arguments win over the environment.

    Returns:
        Validated SessionConfig

    Raises:
        SystemExit: If a value is out of range

    Environment variables:
        KOLAM_GURU_NAME: Display name used in greetings (default: Friend)
        KOLAM_GURU_THINKING_DELAY: Seconds before replies appear (default: 1.5)
        KOLAM_GURU_SCROLL_THRESHOLD: Distance that still counts as "at bottom"
    """
    import typer

    con = console or _console

    values: dict[str, object] = {}
    name = display_name or os.getenv("KOLAM_GURU_NAME")
    if name:
        values["display_name"] = name

    delay = thinking_delay if thinking_delay is not None else os.getenv("KOLAM_GURU_THINKING_DELAY")
    if delay is not None:
        values["thinking_delay"] = delay

    threshold = scroll_threshold if scroll_threshold is not None else os.getenv("KOLAM_GURU_SCROLL_THRESHOLD")
    if threshold is not None:
        values["scroll_threshold"] = threshold

    try:
        return SessionConfig(**values)
    except ValidationError as e:
        con.print(f"[red]Error: invalid configuration[/red]\n[dim]{e}[/dim]")
        raise typer.Exit(code=1)
