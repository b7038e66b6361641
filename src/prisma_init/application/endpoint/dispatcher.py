"""Resolve a parsed menu selection into a cluster, workspace and credentials."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from dataclasses import dataclass

from prisma_init.application.endpoint.choices import (
    ClusterChoice,
    CustomServerChoice,
    ExistingDatabaseChoice,
    LocalClusterChoice,
    NamedClusterChoice,
    SandboxChoice,
)
from prisma_init.application.endpoint.credentials import collect_database_credentials
from prisma_init.application.endpoint.identity import public_workspace_name
from prisma_init.core.constants import DEFAULT_LOCAL_ENDPOINT, LOCAL_CLUSTER_NAME
from prisma_init.core.models import Cluster, ClusterKind, DatabaseCredentials
from prisma_init.ports.cluster_registry import ClusterRegistry
from prisma_init.ports.prompter import Prompter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClusterSelection:
    """What the dispatcher resolved. cluster is None only on failure."""

    cluster: Cluster | None
    workspace: str | None = None
    database: DatabaseCredentials | None = None


def ask_custom_endpoint(prompter: Prompter, default: str) -> str:
    return prompter.ask("What's your clusters endpoint?", default=default)


def find_registered_local(registry: ClusterRegistry) -> Cluster | None:
    return next((c for c in registry.clusters if c.name == LOCAL_CLUSTER_NAME), None)


def dispatch_choice(
    choice: ClusterChoice,
    *,
    logged_in: bool,
    folder_name: str,
    clusters: Sequence[Cluster],
    registry: ClusterRegistry,
    prompter: Prompter,
    rng: random.Random | None = None,
    local_endpoint: str = DEFAULT_LOCAL_ENDPOINT,
) -> ClusterSelection:
    """Map a parsed selection to a ClusterSelection.

    Every branch returns on its own; the sandbox branches do not continue
    into the generic ``[workspace/]cluster`` lookup.

    Args:
        choice: Parsed menu selection.
        logged_in: Whether the cloud client is authenticated.
        folder_name: Project folder name, default for the custom endpoint.
        clusters: Catalog of shared or private clusters.
        registry: Full cluster registry.
        prompter: Prompter for the follow-up questions.
        rng: Randomness source for anonymous workspace names.
        local_endpoint: Endpoint of a freshly created local cluster.

    Returns:
        The resolved selection; cluster is None when nothing matched.
    """
    logger.debug("Dispatching choice %r", choice)

    if isinstance(choice, CustomServerChoice):
        endpoint = ask_custom_endpoint(prompter, default=folder_name)
        return ClusterSelection(
            cluster=Cluster(name="custom", endpoint=endpoint, kind=ClusterKind.CUSTOM)
        )

    if isinstance(choice, LocalClusterChoice):
        cluster = find_registered_local(registry) or Cluster(
            name=LOCAL_CLUSTER_NAME,
            endpoint=local_endpoint,
            local=True,
            kind=ClusterKind.LOCAL,
        )
        return ClusterSelection(cluster=cluster)

    if isinstance(choice, ExistingDatabaseChoice):
        credentials = collect_database_credentials(prompter)
        cluster = Cluster(name="custom", endpoint=local_endpoint, kind=ClusterKind.CUSTOM)
        return ClusterSelection(cluster=cluster, database=credentials)

    if isinstance(choice, SandboxChoice):
        cluster = next((c for c in registry.clusters if c.name == choice.cluster_name), None)
        return ClusterSelection(cluster=cluster)

    if isinstance(choice, NamedClusterChoice):
        return _resolve_named_cluster(choice, logged_in=logged_in, clusters=clusters, rng=rng)

    msg = f"Unsupported choice: {choice}"
    raise ValueError(msg)


def _resolve_named_cluster(
    choice: NamedClusterChoice,
    *,
    logged_in: bool,
    clusters: Sequence[Cluster],
    rng: random.Random | None,
) -> ClusterSelection:
    if choice.workspace is None:
        cluster = next((c for c in clusters if c.name == choice.cluster_name), None)
        workspace = None
        if not logged_in and cluster is not None and cluster.shared:
            workspace = public_workspace_name(rng)
            logger.debug("Generated anonymous workspace %s", workspace)
        return ClusterSelection(cluster=cluster, workspace=workspace)

    cluster = next(
        (
            c
            for c in clusters
            if c.name == choice.cluster_name and c.workspace_slug == choice.workspace
        ),
        None,
    )
    return ClusterSelection(cluster=cluster, workspace=choice.workspace)
