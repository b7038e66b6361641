"""Prisma Cloud adapter for CloudClient port using requests."""

from __future__ import annotations

import logging
from typing import Any

import requests

from prisma_init.adapters.requests_cluster_probe import management_endpoint
from prisma_init.core.models import Cluster
from prisma_init.ports.cloud_client import CloudClient
from prisma_init.ports.cluster_registry import ClusterRegistry

logger = logging.getLogger(__name__)

ME_QUERY = "{ me { id } }"

PROJECT_QUERY = """\
query ($name: String!, $stage: String!) {
  project(name: $name, stage: $stage) {
    name
    stage
  }
}
"""


def is_cloud_cluster(cluster: Cluster) -> bool:
    """Only clusters hosted by the cloud may see the session key."""
    return (cluster.shared or cluster.is_private) and not cluster.local


class RequestsCloudClient(CloudClient):
    """GraphQL client for the cloud API and the active cluster.

    Project lookups go to the management API of the registry's active
    cluster, so the dialog activates a cluster before asking about projects.
    The session key is sent to the cloud API and to cloud clusters only,
    never to local or custom endpoints.
    """

    def __init__(
        self,
        api_endpoint: str,
        session_key: str | None,
        registry: ClusterRegistry,
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        self.api_endpoint = api_endpoint
        self.session_key = session_key
        self.registry = registry
        self.timeout = timeout
        self.session = session or requests.Session()

    def _headers(self, authenticated: bool) -> dict[str, str]:
        if not authenticated or not self.session_key:
            return {}
        return {"Authorization": f"Bearer {self.session_key}"}

    def _post(
        self,
        url: str,
        query: str,
        variables: dict[str, Any] | None = None,
        *,
        authenticated: bool = True,
    ) -> dict[str, Any]:
        response = self.session.post(
            url,
            json={"query": query, "variables": variables or {}},
            headers=self._headers(authenticated),
            timeout=self.timeout,
        )
        response.raise_for_status()
        payload = response.json()
        if payload.get("errors"):
            msg = f"GraphQL errors from {url}: {payload['errors']}"
            raise requests.RequestException(msg)
        return payload.get("data") or {}

    def is_authenticated(self) -> bool:
        if not self.session_key:
            return False
        try:
            data = self._post(self.api_endpoint, ME_QUERY)
        except (requests.RequestException, ValueError) as e:
            logger.debug("Authentication check failed: %s", e)
            return False
        return bool(data.get("me"))

    def get_project(self, name: str, stage: str) -> dict[str, Any] | None:
        cluster = self.registry.active_cluster
        if cluster is None:
            msg = "No active cluster to look up projects on"
            raise RuntimeError(msg)
        data = self._post(
            management_endpoint(cluster),
            PROJECT_QUERY,
            {"name": name, "stage": stage},
            authenticated=is_cloud_cluster(cluster),
        )
        return data.get("project")
