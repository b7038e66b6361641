"""
CLI Common Utilities.

Shared console, state and the error boundary used by all CLI modules.
This module is extracted to prevent circular imports and enable clean composition.
"""

import logging
from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar, cast

import typer
from rich.console import Console
from rich.logging import RichHandler

from .core.errors import PrismaInitError
from .core.exit_codes import EXIT_CANCELLED, EXIT_INTERNAL, get_exit_code_for_exception
from .panels import create_warning_panel, render_error

F = TypeVar("F", bound=Callable[..., Any])

# ─────────────────────────────────────────────────────────────────────────────
# Shared Console and State
# ─────────────────────────────────────────────────────────────────────────────

console = Console()


class AppState:
    """Global application state for CLI flags."""

    debug: bool = False


state = AppState()


def configure_logging(debug: bool) -> None:
    """Send log records through rich; DEBUG with --debug, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=debug)],
        force=True,
    )


# ─────────────────────────────────────────────────────────────────────────────
# Error Boundary Decorator
# ─────────────────────────────────────────────────────────────────────────────


def handle_errors(func: F) -> F:
    """Decorator to catch PrismaInitError and render beautifully."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except PrismaInitError as e:
            render_error(console, e, debug=state.debug)
            raise typer.Exit(get_exit_code_for_exception(e))
        except (KeyboardInterrupt, EOFError):
            console.print("\n[dim]Operation cancelled.[/dim]")
            raise typer.Exit(EXIT_CANCELLED)
        except (typer.Exit, SystemExit):
            # Let typer exits pass through
            raise
        except Exception as e:
            # Unexpected errors
            if state.debug:
                console.print_exception()
            else:
                console.print(
                    create_warning_panel(
                        "Unexpected Error",
                        str(e),
                        "Run with --debug for full traceback",
                    )
                )
            raise typer.Exit(EXIT_INTERNAL)

    return cast(F, wrapper)
