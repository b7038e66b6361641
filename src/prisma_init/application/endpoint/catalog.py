"""Select the clusters that are offered in the menu."""

from __future__ import annotations

from collections.abc import Iterable

from prisma_init.core.models import Cluster


def cloud_clusters(clusters: Iterable[Cluster] | None) -> list[Cluster]:
    """Return the shared or private clusters, preserving registry order."""
    if not clusters:
        return []
    return [c for c in clusters if c.shared or c.is_private]
