"""Cluster reachability port definition."""

from __future__ import annotations

from typing import Protocol

from prisma_init.core.models import Cluster


class ClusterProbe(Protocol):
    """Reachability checks for clusters."""

    def is_online(self, cluster: Cluster) -> bool:
        """Return True if the cluster answers; never raises."""
