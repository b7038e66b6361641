"""Interactive dialog that resolves where a project gets deployed.

Flow:
    probe environment -> build menu -> prompt -> decode alias -> dispatch
    -> activate cluster -> negotiate service/stage -> ResolutionResult

Every step runs sequentially; each port call blocks until it answers.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from prisma_init.application.endpoint.catalog import cloud_clusters
from prisma_init.application.endpoint.choices import parse_choice
from prisma_init.application.endpoint.dispatcher import dispatch_choice
from prisma_init.application.endpoint.environment import probe_environment
from prisma_init.application.endpoint.menu import build_cluster_menu
from prisma_init.application.endpoint.names import decode_name
from prisma_init.application.endpoint.negotiator import negotiate_service_and_stage
from prisma_init.core.constants import DEFAULT_LOCAL_ENDPOINT
from prisma_init.core.errors import ClusterResolutionError
from prisma_init.core.models import Cluster, ResolutionResult, build_endpoint
from prisma_init.ports.cloud_client import CloudClient
from prisma_init.ports.cluster_probe import ClusterProbe
from prisma_init.ports.cluster_registry import ClusterRegistry
from prisma_init.ports.filesystem import Filesystem
from prisma_init.ports.prompter import Prompter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EndpointDialogDependencies:
    """Ports the endpoint dialog talks to."""

    prompter: Prompter
    cloud_client: CloudClient
    registry: ClusterRegistry
    probe: ClusterProbe
    filesystem: Filesystem


@dataclass(frozen=True)
class HandleChoiceRequest:
    """Inputs for resolving one menu selection.

    Args:
        choice: Selected menu value, already alias-decoded.
        logged_in: Whether the cloud client is authenticated.
        folder_name: Project folder name, default for service and endpoint.
        local_cluster_running: Whether a local server answered.
        clusters: Cloud catalog; None means "derive it from the registry".
    """

    choice: str
    logged_in: bool
    folder_name: str
    local_cluster_running: bool
    clusters: Sequence[Cluster] | None = None


class EndpointDialog:
    """Resolve cluster, workspace, service and stage for a project."""

    def __init__(
        self,
        dependencies: EndpointDialogDependencies,
        rng: random.Random | None = None,
        local_endpoint: str = DEFAULT_LOCAL_ENDPOINT,
    ) -> None:
        self.deps = dependencies
        self.rng = rng or random.Random()
        self.local_endpoint = local_endpoint

    def get_endpoint(self, definition_dir: Path, preselected: str | None = None) -> ResolutionResult:
        """Run the full dialog for the project in definition_dir.

        Args:
            definition_dir: Project directory.
            preselected: Menu value to use instead of showing the menu.
        """
        facts = probe_environment(
            definition_dir,
            cloud_client=self.deps.cloud_client,
            registry=self.deps.registry,
            probe=self.deps.probe,
            filesystem=self.deps.filesystem,
            local_endpoint=self.local_endpoint,
        )
        if preselected is None:
            menu = build_cluster_menu(facts.from_scratch, facts.has_compose_file, facts.clusters)
            selected = self.deps.prompter.select(menu.message, menu.entries, page_size=menu.page_size)
        else:
            selected = preselected

        return self.handle_choice(
            HandleChoiceRequest(
                choice=decode_name(selected),
                logged_in=facts.logged_in,
                folder_name=facts.folder_name,
                local_cluster_running=facts.local_cluster_running,
                clusters=facts.clusters,
            )
        )

    def handle_choice(self, request: HandleChoiceRequest) -> ResolutionResult:
        """Resolve a selection into the final result.

        Raises:
            ClusterResolutionError: No cluster matches the selection.
        """
        clusters = request.clusters
        if clusters is None:
            clusters = cloud_clusters(self.deps.registry.clusters)

        selection = dispatch_choice(
            parse_choice(request.choice),
            logged_in=request.logged_in,
            folder_name=request.folder_name,
            clusters=clusters,
            registry=self.deps.registry,
            prompter=self.deps.prompter,
            rng=self.rng,
            local_endpoint=self.local_endpoint,
        )
        cluster = selection.cluster
        if cluster is None:
            raise ClusterResolutionError(request.choice)

        logger.debug("Resolved cluster %s (%s)", cluster.name, cluster.endpoint)
        self.deps.registry.set_active_cluster(cluster)

        service, stage = negotiate_service_and_stage(
            cluster,
            selection.workspace,
            request.folder_name,
            client=self.deps.cloud_client,
            prompter=self.deps.prompter,
        )

        return ResolutionResult(
            endpoint=build_endpoint(cluster, service, stage, selection.workspace),
            cluster=cluster,
            workspace=selection.workspace,
            service=service,
            stage=stage,
            local_cluster_running=request.local_cluster_running,
            database=selection.database,
        )
