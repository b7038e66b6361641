"""Rich panels shared by the CLI modules."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from .core.errors import PrismaInitError


def create_warning_panel(title: str, message: str, hint: str | None = None) -> Panel:
    """Create a yellow panel for warnings and unexpected errors."""
    body = escape(message)
    if hint:
        body += f"\n\n[dim]{escape(hint)}[/dim]"
    return Panel(
        body,
        title=f"[bold yellow]{escape(title)}[/bold yellow]",
        border_style="yellow",
        padding=(1, 2),
    )


def create_error_panel(title: str, message: str, hint: str | None = None) -> Panel:
    """Create a red panel for errors the user can act on."""
    body = escape(message)
    if hint:
        body += f"\n\n[cyan]→[/cyan] {escape(hint)}"
    return Panel(
        body,
        title=f"[bold red]{escape(title)}[/bold red]",
        border_style="red",
        padding=(1, 2),
    )


def render_error(console: Console, error: PrismaInitError, debug: bool = False) -> None:
    """Print a PrismaInitError, with its debug context when debug is set."""
    message = error.user_message
    if debug and error.debug_context:
        message += f"\n\n{error.debug_context}"
    console.print(create_error_panel("Error", message, error.suggested_action))
