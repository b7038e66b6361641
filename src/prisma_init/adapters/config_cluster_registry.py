"""Cluster registry adapter backed by the prisma-init config file."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from prisma_init import config as config_module
from prisma_init.core.models import Cluster
from prisma_init.ports.cluster_registry import ClusterRegistry


class ConfigClusterRegistry(ClusterRegistry):
    """Registry of the clusters listed in the config.

    The active cluster is held in memory for the lifetime of the process and
    is never written back to the config file.
    """

    def __init__(self, clusters: Iterable[Cluster]) -> None:
        self._clusters = list(clusters)
        self._active: Cluster | None = None

    @classmethod
    def from_config(cls, cfg: dict[str, Any] | None = None) -> ConfigClusterRegistry:
        if cfg is None:
            cfg = config_module.load_config()
        return cls(config_module.clusters_from_config(cfg))

    @property
    def clusters(self) -> list[Cluster]:
        return list(self._clusters)

    @property
    def active_cluster(self) -> Cluster | None:
        return self._active

    def set_active_cluster(self, cluster: Cluster) -> None:
        self._active = cluster
