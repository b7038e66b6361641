"""Cluster registry port definition."""

from __future__ import annotations

from typing import Protocol

from prisma_init.core.models import Cluster


class ClusterRegistry(Protocol):
    """Known clusters plus the single active-cluster slot."""

    @property
    def clusters(self) -> list[Cluster]:
        """Return every cluster the registry knows about."""

    @property
    def active_cluster(self) -> Cluster | None:
        """Return the cluster marked active, if any."""

    def set_active_cluster(self, cluster: Cluster) -> None:
        """Mark a cluster as the one subsequent API calls target."""
