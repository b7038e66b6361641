#!/usr/bin/env python3
"""
prisma-init - choose where a Prisma project gets deployed.

This module serves as the thin orchestrator that composes commands from:
- commands/init.py: the interactive endpoint dialog
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_installed_version

import typer
from rich.panel import Panel

from .cli_common import configure_logging, console, state
from .commands.init import init_cmd

# ─────────────────────────────────────────────────────────────────────────────
# App Configuration
# ─────────────────────────────────────────────────────────────────────────────

app = typer.Typer(
    name="prisma-init",
    help="Choose the cluster, service and stage a Prisma project deploys to.",
    no_args_is_help=False,
    rich_markup_mode="rich",
)


# ─────────────────────────────────────────────────────────────────────────────
# Global Callback (--debug flag)
# ─────────────────────────────────────────────────────────────────────────────


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Show detailed error information and debug logs.",
        is_eager=True,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit.",
        is_eager=True,
    ),
) -> None:
    """
    [bold cyan]prisma-init[/bold cyan] - deployment endpoint dialog
    """
    state.debug = debug
    configure_logging(debug)

    if version:
        try:
            pkg_version = get_installed_version("prisma-init")
        except PackageNotFoundError:
            pkg_version = "unknown"
        console.print(
            Panel(
                f"[cyan]prisma-init[/cyan] [dim]v{pkg_version}[/dim]",
                border_style="cyan",
            )
        )
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        raise typer.Exit()


# ─────────────────────────────────────────────────────────────────────────────
# Register Commands
# ─────────────────────────────────────────────────────────────────────────────

app.command(name="init")(init_cmd)


# ─────────────────────────────────────────────────────────────────────────────
# Entry Point
# ─────────────────────────────────────────────────────────────────────────────


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
