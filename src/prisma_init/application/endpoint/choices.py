"""Closed set of cluster menu selections.

A raw (already alias-decoded) menu value is parsed into exactly one variant.
Each variant carries only the fields its resolution path needs.
"""

from __future__ import annotations

from dataclasses import dataclass

from prisma_init.core.constants import (
    CHOICE_EXISTING_DATABASE,
    CHOICE_LOCAL,
    CHOICE_NEW_DATABASE,
    CHOICE_OTHER_SERVER,
    SANDBOX_EU1,
    SANDBOX_US1,
)

# Menu aliases of the sandboxes and the registry names they resolve to
SANDBOX_CHOICES = {
    "sandbox-eu1": SANDBOX_EU1,
    "sandbox-us1": SANDBOX_US1,
}


@dataclass(frozen=True)
class CustomServerChoice:
    """Connect to a Prisma server at an endpoint the user types in."""


@dataclass(frozen=True)
class LocalClusterChoice:
    """Use the local Docker-backed server."""


@dataclass(frozen=True)
class ExistingDatabaseChoice:
    """Run a local server against a database the user already has."""


@dataclass(frozen=True)
class SandboxChoice:
    """One of the free hosted sandboxes, by registry name."""

    cluster_name: str


@dataclass(frozen=True)
class NamedClusterChoice:
    """A cataloged cluster, optionally qualified by workspace."""

    cluster_name: str
    workspace: str | None = None


ClusterChoice = (
    CustomServerChoice
    | LocalClusterChoice
    | ExistingDatabaseChoice
    | SandboxChoice
    | NamedClusterChoice
)


def split_workspace(choice: str) -> tuple[str | None, str]:
    """Split ``[workspace/]cluster`` into its workspace and cluster name."""
    parts = choice.split("/")
    workspace = parts[0] if len(parts) > 1 else None
    return workspace, parts[-1]


def parse_choice(choice: str) -> ClusterChoice:
    """Parse a decoded menu value, honouring the fixed priority order."""
    if choice == CHOICE_OTHER_SERVER:
        return CustomServerChoice()
    if choice in (CHOICE_LOCAL, CHOICE_NEW_DATABASE):
        return LocalClusterChoice()
    if choice == CHOICE_EXISTING_DATABASE:
        return ExistingDatabaseChoice()
    if choice in SANDBOX_CHOICES:
        return SandboxChoice(cluster_name=SANDBOX_CHOICES[choice])
    workspace, cluster_name = split_workspace(choice)
    return NamedClusterChoice(cluster_name=cluster_name, workspace=workspace)
