"""Composition root wiring prisma-init adapters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from rich.console import Console

from prisma_init import config as config_module
from prisma_init.adapters.config_cluster_registry import ConfigClusterRegistry
from prisma_init.adapters.local_filesystem import LocalFilesystem
from prisma_init.adapters.requests_cloud_client import RequestsCloudClient
from prisma_init.adapters.requests_cluster_probe import RequestsClusterProbe
from prisma_init.adapters.rich_prompter import RichPrompter
from prisma_init.application.endpoint import EndpointDialogDependencies
from prisma_init.ports.cloud_client import CloudClient
from prisma_init.ports.cluster_probe import ClusterProbe
from prisma_init.ports.cluster_registry import ClusterRegistry
from prisma_init.ports.filesystem import Filesystem
from prisma_init.ports.prompter import Prompter


@dataclass(frozen=True)
class DefaultAdapters:
    """Container for default adapter instances."""

    prompter: Prompter
    cloud_client: CloudClient
    registry: ClusterRegistry
    probe: ClusterProbe
    filesystem: Filesystem
    local_endpoint: str

    def dialog_dependencies(self) -> EndpointDialogDependencies:
        return EndpointDialogDependencies(
            prompter=self.prompter,
            cloud_client=self.cloud_client,
            registry=self.registry,
            probe=self.probe,
            filesystem=self.filesystem,
        )


def get_default_adapters(console: Console, cfg: dict[str, Any] | None = None) -> DefaultAdapters:
    """Return the default adapter wiring for prisma-init.

    Args:
        console: Console the prompter renders on.
        cfg: Loaded configuration; read from disk when omitted.
    """
    if cfg is None:
        cfg = config_module.load_config()

    registry = ConfigClusterRegistry.from_config(cfg)
    return DefaultAdapters(
        prompter=RichPrompter(console),
        cloud_client=RequestsCloudClient(
            api_endpoint=cfg["cloud_api_endpoint"],
            session_key=cfg.get("cloud_session_key"),
            registry=registry,
            timeout=float(cfg.get("request_timeout", 10.0)),
        ),
        registry=registry,
        probe=RequestsClusterProbe(timeout=float(cfg.get("probe_timeout", 2.0))),
        filesystem=LocalFilesystem(),
        local_endpoint=cfg["local_endpoint"],
    )
