"""Reachability adapter for ClusterProbe port using requests."""

from __future__ import annotations

import logging

import requests

from prisma_init.core.models import Cluster
from prisma_init.ports.cluster_probe import ClusterProbe

logger = logging.getLogger(__name__)

SERVER_INFO_QUERY = "{ serverInfo { version } }"


def management_endpoint(cluster: Cluster) -> str:
    return f"{cluster.endpoint.rstrip('/')}/management"


class RequestsClusterProbe(ClusterProbe):
    """Ask a cluster's management API for its version."""

    def __init__(self, timeout: float = 2.0, session: requests.Session | None = None) -> None:
        self.timeout = timeout
        self.session = session or requests.Session()

    def is_online(self, cluster: Cluster) -> bool:
        try:
            response = self.session.post(
                management_endpoint(cluster),
                json={"query": SERVER_INFO_QUERY},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.debug("Cluster %s at %s is offline: %s", cluster.name, cluster.endpoint, e)
            return False
        return response.ok
