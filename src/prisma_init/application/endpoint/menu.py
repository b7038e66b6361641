"""Build the cluster question shown at the start of the endpoint dialog.

Two layouts exist:

- From scratch (not logged in, no local server, no docker-compose.yml):
  local database setup first, then the hosted sandboxes.
- Contextual: the local server, every cloud cluster and a custom endpoint,
  followed by the local database setup unless a docker-compose.yml exists.

The order and grouping of entries are fixed; only label padding is cosmetic.
"""

from __future__ import annotations

from collections.abc import Sequence

from prisma_init.application.endpoint.names import encode_name
from prisma_init.core.constants import (
    CHOICE_EXISTING_DATABASE,
    CHOICE_LOCAL,
    CHOICE_NEW_DATABASE,
    CHOICE_OTHER_SERVER,
)
from prisma_init.core.models import Cluster, ClusterMenu, MenuChoice, MenuEntry, MenuSeparator

SANDBOX_DESCRIPTION = "Free development server on Prisma Cloud (incl. database)"
PRODUCTION_DESCRIPTION = "Production Prisma cluster"

SANDBOX_ROWS: tuple[tuple[str, str], ...] = (
    ("sandbox-eu1", SANDBOX_DESCRIPTION),
    ("sandbox-us1", SANDBOX_DESCRIPTION),
)

FROM_SCRATCH_MESSAGE = "Connect to your database, set up a new one or use hosted sandbox?"
CONTEXTUAL_MESSAGE = "Connect to your database, set up a new one or use existing Prisma server?"

LOCAL_SETUP_TITLE = "You can set up Prisma for local development (requires Docker)"
HOSTED_SANDBOX_TITLE = "Or use a free hosted Prisma sandbox (includes database)"
EXISTING_SERVER_TITLE = "Use an existing Prisma server"
NEW_SERVER_TITLE = "Set up a new Prisma server for local development (requires Docker):"

# Gap between the value column and the description column
COLUMN_GAP = 6


def pad_columns(rows: Sequence[tuple[str, str]], left: int = 0, gap: int = COLUMN_GAP) -> list[str]:
    """Render (value, description) rows as column-aligned text lines."""
    if not rows:
        return []
    width = max(len(value) for value, _ in rows) + gap
    return [f"{' ' * left}{value.ljust(width)}{description}" for value, description in rows]


def convert_choices(rows: Sequence[tuple[str, str]]) -> list[MenuChoice]:
    """Turn raw rows into choices whose labels share one column layout."""
    labels = pad_columns(rows)
    return [MenuChoice(value=value, label=label) for (value, _), label in zip(rows, labels)]


def display_name(cluster: Cluster) -> str:
    """Return ``[workspace/]alias`` for a cluster."""
    prefix = f"{cluster.workspace_slug}/" if cluster.workspace_slug else ""
    return f"{prefix}{encode_name(cluster.name)}"


def describe_cluster(cluster: Cluster) -> str:
    if cluster.shared:
        return SANDBOX_DESCRIPTION
    return PRODUCTION_DESCRIPTION


def build_cluster_menu(
    from_scratch: bool,
    has_compose_file: bool,
    clusters: Sequence[Cluster],
) -> ClusterMenu:
    """Build the ordered cluster question for the given environment."""
    if from_scratch and not has_compose_file:
        return _from_scratch_menu()
    return _contextual_menu(has_compose_file, clusters)


def _from_scratch_menu() -> ClusterMenu:
    rows = [
        (CHOICE_EXISTING_DATABASE, "Connect to existing database"),
        (CHOICE_NEW_DATABASE, "Set up a local database using Docker"),
        *SANDBOX_ROWS,
    ]
    choices = convert_choices(rows)
    entries: list[MenuEntry] = [
        MenuSeparator(LOCAL_SETUP_TITLE),
        *choices[:2],
        MenuSeparator(),
        MenuSeparator(HOSTED_SANDBOX_TITLE),
        *choices[2:4],
    ]
    return ClusterMenu(message=FROM_SCRATCH_MESSAGE, entries=tuple(entries))


def _contextual_menu(has_compose_file: bool, clusters: Sequence[Cluster]) -> ClusterMenu:
    if clusters:
        cluster_rows = [(display_name(c), describe_cluster(c)) for c in clusters]
    else:
        cluster_rows = list(SANDBOX_ROWS)

    rows = [
        (CHOICE_LOCAL, "Local Prisma server (connected to MySQL)"),
        *cluster_rows,
        (CHOICE_OTHER_SERVER, "Connect to an existing prisma server"),
        (CHOICE_EXISTING_DATABASE, "Connect to existing database"),
        (CHOICE_NEW_DATABASE, "Set up a local database using Docker"),
    ]
    choices = convert_choices(rows)

    docker_entries: list[MenuEntry] = []
    if not has_compose_file:
        docker_entries = [MenuSeparator(NEW_SERVER_TITLE), *choices[-2:]]

    entries: list[MenuEntry] = [
        MenuSeparator(EXISTING_SERVER_TITLE),
        *choices[: len(cluster_rows) + 2],
        MenuSeparator(),
        *docker_entries,
    ]
    return ClusterMenu(message=CONTEXTUAL_MESSAGE, entries=tuple(entries))
