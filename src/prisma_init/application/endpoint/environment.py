"""Gather the ambient facts the endpoint menu depends on."""

from __future__ import annotations

import logging
from pathlib import Path

from prisma_init.application.endpoint.catalog import cloud_clusters
from prisma_init.core.constants import (
    COMPOSE_FILE_NAME,
    DEFAULT_LOCAL_ENDPOINT,
    LOCAL_CLUSTER_NAME,
)
from prisma_init.core.errors import ProjectDirectoryError
from prisma_init.core.models import Cluster, ClusterKind, EnvironmentFacts
from prisma_init.ports.cloud_client import CloudClient
from prisma_init.ports.cluster_probe import ClusterProbe
from prisma_init.ports.cluster_registry import ClusterRegistry
from prisma_init.ports.filesystem import Filesystem

logger = logging.getLogger(__name__)


def is_cluster_online(endpoint: str, probe: ClusterProbe) -> bool:
    """Check whether a server answers on the endpoint.

    The cluster record is transient and never registered.
    """
    cluster = Cluster(
        name=LOCAL_CLUSTER_NAME,
        endpoint=endpoint,
        local=True,
        kind=ClusterKind.LOCAL,
    )
    return probe.is_online(cluster)


def list_files(directory: Path, filesystem: Filesystem) -> set[str]:
    """List the project directory.

    Raises:
        ProjectDirectoryError: The directory is missing or unreadable.
    """
    try:
        return filesystem.list_dir(directory)
    except OSError as e:
        raise ProjectDirectoryError(str(directory), reason=str(e)) from e


def probe_environment(
    definition_dir: Path,
    *,
    cloud_client: CloudClient,
    registry: ClusterRegistry,
    probe: ClusterProbe,
    filesystem: Filesystem,
    local_endpoint: str = DEFAULT_LOCAL_ENDPOINT,
) -> EnvironmentFacts:
    """Collect every fact the menu and dispatcher need, once and in order."""
    local_cluster_running = is_cluster_online(local_endpoint, probe)
    folder_name = definition_dir.resolve().name
    logged_in = cloud_client.is_authenticated()
    clusters = cloud_clusters(registry.clusters)
    files = list_files(definition_dir, filesystem)
    has_compose_file = COMPOSE_FILE_NAME in files

    facts = EnvironmentFacts(
        definition_dir=definition_dir,
        folder_name=folder_name,
        logged_in=logged_in,
        local_cluster_running=local_cluster_running,
        has_compose_file=has_compose_file,
        clusters=tuple(clusters),
    )
    logger.debug(
        "Environment: logged_in=%s local_running=%s compose=%s clusters=%d",
        logged_in,
        local_cluster_running,
        has_compose_file,
        len(clusters),
    )
    return facts
