"""Main CLI application using Typer."""
import asyncio

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..assistant import LEARNING_PATHS, Intent, analyze, create_conversation_session, select_tier, synthesize
from ..assistant.catalog import COMPOSING_TEXT
from ..assistant.models import Message, Role
from ..ui.config import ROW_SCROLL_THRESHOLD, LogLevel
from ..ui.formatting import category_badge, render_markdown
from .providers import get_session_config

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="kolam-guru",
    help="Rule-based conversational guide to the Kolam art tradition",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()


def _print_reply(message: Message) -> None:
    """Render an assistant message with its category and suggestions."""
    title = Text.assemble(("Kolam Guru ", "bold"), category_badge(message.category))
    console.print(Panel(render_markdown(message.body), title=title, title_align="left"))
    for i, suggestion in enumerate(message.displayed_suggestions, 1):
        console.print(f"  [dim]{i}.[/dim] {suggestion}")
    console.print()


def _console_debug(threshold: str | None):
    """Build a debug callback printing messages at or above a level."""
    if threshold is None:
        return None
    minimum = LogLevel.from_string(threshold)

    def debug_callback(level: str, component: str, message: str) -> None:
        if LogLevel.from_string(level) >= minimum:
            console.print(f"[dim]{level.upper():<5} \\[{escape(component)}] {escape(message)}[/dim]")
    return debug_callback


@app.command()
def ask(
    text: str = typer.Argument(..., help="Utterance to answer"),
    name: str | None = typer.Option(
        None,
        "--name",
        "-n",
        help="Display name used in greetings"
    ),
):
    """Answer a single utterance and show how it was classified."""
    config = get_session_config(display_name=name, console=console)
    classification = analyze(text)

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Duration", style="green")
    table.add_column("Intent", style="magenta")
    table.add_column("Tier", style="yellow")
    tier = (
        select_tier(classification.duration).value
        if classification.intent == Intent.DURATION_BASED and classification.duration
        else "-"
    )
    duration = f"{classification.duration} min" if classification.duration else "none"
    table.add_row(duration, classification.intent.value, tier)
    console.print(table)

    payload = synthesize(classification.intent, classification.duration, config.display_name)
    _print_reply(Message.assistant(payload))


@app.command()
def paths():
    """List the learning path prompts."""
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=3)
    table.add_column("Path", style="cyan")
    table.add_column("Description")
    table.add_column("Prompt", style="dim")
    for i, path in enumerate(LEARNING_PATHS, 1):
        table.add_row(str(i), path.label, path.description, path.prompt)
    console.print(table)


@app.command()
def chat(
    name: str | None = typer.Option(
        None,
        "--name",
        "-n",
        help="Display name used in greetings"
    ),
    delay: float | None = typer.Option(
        None,
        "--delay",
        help="Seconds the assistant 'thinks' before replying"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Print session logs at level: debug, info, warning, or error"
    ),
):
    """Interactive console chat with the assistant."""
    config = get_session_config(display_name=name, thinking_delay=delay, console=console)

    async def _chat():
        session = create_conversation_session(**config.model_dump())
        session.set_debug_callback(_console_debug(log_level))

        def on_message(message: Message) -> None:
            if message.role == Role.ASSISTANT:
                _print_reply(message)

        session.set_message_callback(on_message)

        console.print("[bold cyan]Kolam Guru Interactive Chat[/bold cyan]")
        console.print("[dim]Type 'exit', 'quit', or 'q' to leave. Enter a number to pick a suggestion.[/dim]\n")
        _print_reply(session.transcript.snapshot()[0])

        try:
            while True:
                try:
                    user_input = await asyncio.to_thread(console.input, "[bold yellow]You:[/bold yellow] ")
                except (KeyboardInterrupt, EOFError):
                    console.print("\n[dim]Goodbye![/dim]")
                    break

                if user_input.strip().lower() in ('exit', 'quit', 'q'):
                    console.print("[dim]Goodbye![/dim]")
                    break

                last = session.transcript.last_assistant_message()
                if last and user_input.strip().isdigit():
                    index = int(user_input.strip()) - 1
                    if 0 <= index < len(last.displayed_suggestions):
                        user_input = last.displayed_suggestions[index]
                        console.print(f"[dim]> {user_input}[/dim]")

                if session.submit(user_input) is None:
                    continue

                with console.status(f"[dim]{COMPOSING_TEXT}[/dim]"):
                    await session.wait_idle()
        finally:
            await session.close()

    asyncio.run(_chat())


@app.command(name="tui")
def tui_command(
    name: str | None = typer.Option(
        None,
        "--name",
        "-n",
        help="Display name used in greetings"
    ),
    delay: float | None = typer.Option(
        None,
        "--delay",
        help="Seconds the assistant 'thinks' before replying"
    ),
    scroll_threshold: int | None = typer.Option(
        None,
        "--scroll-threshold",
        help="Rows from the bottom that still count as following new messages"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show log panel with level: debug (all), info, warning, or error"
    ),
):
    """Launch interactive TUI chat interface."""
    from ..ui import run_textual_tui

    config = get_session_config(
        display_name=name,
        thinking_delay=delay,
        scroll_threshold=scroll_threshold,
        console=console,
    )
    if scroll_threshold is None and "scroll_threshold" not in config.model_fields_set:
        config = config.model_copy(update={"scroll_threshold": ROW_SCROLL_THRESHOLD})

    try:
        asyncio.run(run_textual_tui(config=config, log_level=log_level))
    except KeyboardInterrupt:
        pass
    console.print("\n[dim]Goodbye![/dim]")


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
