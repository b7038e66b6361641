"""Endpoint resolution use case."""

from prisma_init.application.endpoint.catalog import cloud_clusters
from prisma_init.application.endpoint.choices import (
    ClusterChoice,
    CustomServerChoice,
    ExistingDatabaseChoice,
    LocalClusterChoice,
    NamedClusterChoice,
    SandboxChoice,
    parse_choice,
)
from prisma_init.application.endpoint.credentials import collect_database_credentials
from prisma_init.application.endpoint.dialog import (
    EndpointDialog,
    EndpointDialogDependencies,
    HandleChoiceRequest,
)
from prisma_init.application.endpoint.dispatcher import ClusterSelection, dispatch_choice
from prisma_init.application.endpoint.environment import (
    is_cluster_online,
    list_files,
    probe_environment,
)
from prisma_init.application.endpoint.identity import public_workspace_name, slugify
from prisma_init.application.endpoint.menu import build_cluster_menu
from prisma_init.application.endpoint.names import decode_name, encode_name
from prisma_init.application.endpoint.negotiator import (
    negotiate_service_and_stage,
    project_exists,
)

__all__ = [
    "ClusterChoice",
    "ClusterSelection",
    "CustomServerChoice",
    "EndpointDialog",
    "EndpointDialogDependencies",
    "ExistingDatabaseChoice",
    "HandleChoiceRequest",
    "LocalClusterChoice",
    "NamedClusterChoice",
    "SandboxChoice",
    "build_cluster_menu",
    "cloud_clusters",
    "collect_database_credentials",
    "decode_name",
    "dispatch_choice",
    "encode_name",
    "is_cluster_online",
    "list_files",
    "negotiate_service_and_stage",
    "parse_choice",
    "probe_environment",
    "project_exists",
    "public_workspace_name",
    "slugify",
]
