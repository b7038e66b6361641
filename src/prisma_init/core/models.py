"""Domain types for resolving a deployment endpoint."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from .constants import DEFAULT_SERVICE, DEFAULT_STAGE


class ClusterKind(str, Enum):
    """Where a Cluster record came from."""

    REGISTERED = "registered"  # Loaded from the cluster registry
    LOCAL = "local"  # Built in memory for a local Docker server
    CUSTOM = "custom"  # Built in memory for a user supplied endpoint


@dataclass(frozen=True)
class Cluster:
    """A named deployment target.

    Invariants:
        - name is unique within a registry.
        - Only REGISTERED clusters are ever persisted, by the registry itself.

    Args:
        name: Unique cluster identifier.
        endpoint: Base URI of the cluster.
        workspace_slug: Workspace the cluster belongs to, if any.
        shared: Free hosted sandbox cluster.
        is_private: Private cluster owned by a workspace.
        local: Cluster runs on this machine.
        kind: Origin of the record.
    """

    name: str
    endpoint: str
    workspace_slug: str | None = None
    shared: bool = False
    is_private: bool = False
    local: bool = False
    kind: ClusterKind = ClusterKind.REGISTERED


class DatabaseType(str, Enum):
    """Databases a Prisma server can connect to."""

    POSTGRES = "postgres"
    MYSQL = "mysql"


@dataclass(frozen=True)
class DatabaseCredentials:
    """Connection parameters for an externally managed database."""

    type: DatabaseType
    host: str
    port: int
    user: str
    password: str = field(repr=False)
    database: str | None = None
    already_data: bool = False


@dataclass(frozen=True)
class MenuChoice:
    """A selectable menu entry: the value handed back and its rendered label."""

    value: str
    label: str


@dataclass(frozen=True)
class MenuSeparator:
    """A cosmetic, non-selectable menu row."""

    title: str = ""


MenuEntry = MenuChoice | MenuSeparator


@dataclass(frozen=True)
class ClusterMenu:
    """The cluster question: message plus ordered entries."""

    message: str
    entries: tuple[MenuEntry, ...]

    @property
    def choices(self) -> list[MenuChoice]:
        return [entry for entry in self.entries if isinstance(entry, MenuChoice)]

    @property
    def page_size(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class EnvironmentFacts:
    """Ambient facts gathered once before the menu is shown.

    Args:
        definition_dir: Project directory.
        folder_name: Basename of definition_dir, used as default service name.
        logged_in: Whether the cloud client is authenticated.
        local_cluster_running: Whether a server answers on the local endpoint.
        has_compose_file: Whether the project ships a docker-compose.yml.
        clusters: Shared or private clusters eligible for the menu.
    """

    definition_dir: Path
    folder_name: str
    logged_in: bool
    local_cluster_running: bool
    has_compose_file: bool
    clusters: tuple[Cluster, ...] = ()

    @property
    def from_scratch(self) -> bool:
        return not self.logged_in and not self.local_cluster_running


@dataclass(frozen=True)
class ResolutionResult:
    """Outcome of the endpoint dialog."""

    endpoint: str
    cluster: Cluster
    workspace: str | None = None
    service: str = DEFAULT_SERVICE
    stage: str = DEFAULT_STAGE
    local_cluster_running: bool = False
    database: DatabaseCredentials | None = None


def build_endpoint(
    cluster: Cluster,
    service: str,
    stage: str,
    workspace: str | None = None,
) -> str:
    """Derive the endpoint URI a service/stage is served under.

    Non-shared clusters drop default path segments. Only shared clusters
    put the workspace into the path.
    """
    base = cluster.endpoint.rstrip("/")
    if not cluster.shared and service == DEFAULT_SERVICE and stage == DEFAULT_STAGE:
        return base
    if not cluster.shared and stage == DEFAULT_STAGE:
        return f"{base}/{service}"
    if cluster.is_private or cluster.local:
        return f"{base}/{service}/{stage}"
    workspace_part = f"/{workspace}" if workspace else ""
    return f"{base}{workspace_part}/{service}/{stage}"


def qualified_project_name(cluster: Cluster, service: str, workspace: str | None) -> str:
    """Return the project name as known to the cluster's management API.

    Shared clusters namespace projects by workspace, written as
    ``<workspace>~<service>``.
    """
    if cluster.shared:
        prefix = f"{workspace}~" if workspace else ""
        return f"{prefix}{service}"
    return service
