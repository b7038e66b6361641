"""
Provide the init command.

Run the endpoint dialog for a project directory and show where the project
will be deployed.
"""

from pathlib import Path
from typing import Any

import typer
from rich.panel import Panel
from rich.table import Table

from ..application.endpoint import EndpointDialog
from ..bootstrap import get_default_adapters
from ..cli_common import console, handle_errors
from ..core.models import ResolutionResult

# ─────────────────────────────────────────────────────────────────────────────
# Pure Functions (No I/O)
# ─────────────────────────────────────────────────────────────────────────────


def build_result_data(result: ResolutionResult) -> dict[str, Any]:
    """Build JSON-serializable data for a resolution result.

    The database password is never included.
    """
    database = None
    if result.database is not None:
        database = {
            "type": result.database.type.value,
            "host": result.database.host,
            "port": result.database.port,
            "user": result.database.user,
            "database": result.database.database,
            "already_data": result.database.already_data,
        }

    return {
        "endpoint": result.endpoint,
        "cluster": {
            "name": result.cluster.name,
            "endpoint": result.cluster.endpoint,
            "workspace_slug": result.cluster.workspace_slug,
            "shared": result.cluster.shared,
            "is_private": result.cluster.is_private,
            "local": result.cluster.local,
            "kind": result.cluster.kind.value,
        },
        "workspace": result.workspace,
        "service": result.service,
        "stage": result.stage,
        "local_cluster_running": result.local_cluster_running,
        "database": database,
    }


# ─────────────────────────────────────────────────────────────────────────────
# Rendering
# ─────────────────────────────────────────────────────────────────────────────


def show_result_panel(result: ResolutionResult) -> None:
    """Display the resolved endpoint and its parts."""
    grid = Table.grid(padding=(0, 2))
    grid.add_column(style="dim", no_wrap=True)
    grid.add_column(style="white")

    grid.add_row("Endpoint:", f"[bold]{result.endpoint}[/bold]")
    grid.add_row("Cluster:", result.cluster.name)
    if result.workspace:
        grid.add_row("Workspace:", result.workspace)
    grid.add_row("Service:", result.service)
    grid.add_row("Stage:", result.stage)
    if result.database is not None:
        db = result.database
        grid.add_row("Database:", f"{db.type.value} {db.user}@{db.host}:{db.port}")

    console.print()
    console.print(
        Panel(
            grid,
            title="[bold green]Endpoint resolved[/bold green]",
            border_style="green",
            padding=(1, 2),
        )
    )
    console.print()


# ─────────────────────────────────────────────────────────────────────────────
# Init Command
# ─────────────────────────────────────────────────────────────────────────────


@handle_errors
def init_cmd(
    directory: Path = typer.Argument(
        Path("."),
        help="Project directory (defaults to the current directory).",
    ),
    choice: str | None = typer.Option(
        None,
        "--choice",
        "-c",
        help="Skip the menu and use this entry, e.g. 'local' or 'myteam/mycluster'.",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Print the result as JSON.",
    ),
) -> None:
    """Choose the server, service and stage a Prisma project deploys to."""
    adapters = get_default_adapters(console)
    dialog = EndpointDialog(adapters.dialog_dependencies(), local_endpoint=adapters.local_endpoint)

    result = dialog.get_endpoint(directory, preselected=choice)

    if json_output:
        console.print_json(data=build_result_data(result))
        return

    show_result_panel(result)
