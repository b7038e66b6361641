"""Test fakes for prisma-init ports."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any

from prisma_init.application.endpoint import EndpointDialogDependencies
from prisma_init.core.models import Cluster, MenuChoice, MenuEntry


class FakePrompter:
    """Prompter answering from scripted queues and recording every question.

    ``selections`` answers select(), ``answers`` answers ask() (None means
    "accept the default"), ``confirmations`` answers confirm().
    """

    def __init__(
        self,
        selections: Iterable[str] = (),
        answers: Iterable[str | None] = (),
        confirmations: Iterable[bool] = (),
    ) -> None:
        self.selections = list(selections)
        self.answers = list(answers)
        self.confirmations = list(confirmations)
        self.calls: list[tuple[str, str]] = []
        self.menus: list[tuple[MenuEntry, ...]] = []

    def select(self, message: str, entries: Sequence[MenuEntry], page_size: int | None = None) -> str:
        self.calls.append(("select", message))
        self.menus.append(tuple(entries))
        selection = self.selections.pop(0)
        values = [e.value for e in entries if isinstance(e, MenuChoice)]
        assert selection in values, f"{selection!r} is not offered: {values}"
        return selection

    def ask(self, message: str, default: str | None = None, password: bool = False) -> str:
        self.calls.append(("ask", message))
        answer = self.answers.pop(0)
        if answer is None:
            return default or ""
        return answer

    def confirm(self, message: str, default: bool = False) -> bool:
        self.calls.append(("confirm", message))
        return self.confirmations.pop(0)

    def messages(self, kind: str) -> list[str]:
        return [message for call_kind, message in self.calls if call_kind == kind]


class FakeCloudClient:
    """Cloud client with a fixed login state and a set of existing projects."""

    def __init__(
        self,
        authenticated: bool = False,
        projects: Iterable[tuple[str, str]] = (),
        fail_lookups: bool = False,
    ) -> None:
        self.authenticated = authenticated
        self.projects = set(projects)
        self.fail_lookups = fail_lookups
        self.lookups: list[tuple[str, str]] = []

    def is_authenticated(self) -> bool:
        return self.authenticated

    def get_project(self, name: str, stage: str) -> dict[str, Any] | None:
        self.lookups.append((name, stage))
        if self.fail_lookups:
            raise ConnectionError("cluster unreachable")
        if (name, stage) in self.projects:
            return {"name": name, "stage": stage}
        return None


class FakeClusterRegistry:
    """In-memory registry that records activations."""

    def __init__(self, clusters: Iterable[Cluster] = ()) -> None:
        self._clusters = list(clusters)
        self.activated: list[Cluster] = []

    @property
    def clusters(self) -> list[Cluster]:
        return list(self._clusters)

    @property
    def active_cluster(self) -> Cluster | None:
        return self.activated[-1] if self.activated else None

    def set_active_cluster(self, cluster: Cluster) -> None:
        self.activated.append(cluster)


class FakeClusterProbe:
    """Probe reporting a fixed set of endpoints as online."""

    def __init__(self, online_endpoints: Iterable[str] = ()) -> None:
        self.online_endpoints = set(online_endpoints)
        self.probed: list[Cluster] = []

    def is_online(self, cluster: Cluster) -> bool:
        self.probed.append(cluster)
        return cluster.endpoint in self.online_endpoints


class FakeFilesystem:
    """Filesystem serving directory listings from a dict."""

    def __init__(self, listings: dict[Path, set[str]] | None = None) -> None:
        self.listings = listings or {}

    def list_dir(self, path: Path) -> set[str]:
        if path not in self.listings:
            raise FileNotFoundError(f"No such directory: {path}")
        return set(self.listings[path])


def build_fake_dependencies(
    prompter: FakePrompter | None = None,
    cloud_client: FakeCloudClient | None = None,
    registry: FakeClusterRegistry | None = None,
    probe: FakeClusterProbe | None = None,
    filesystem: FakeFilesystem | None = None,
) -> EndpointDialogDependencies:
    """Return dialog dependencies wired with fakes."""
    return EndpointDialogDependencies(
        prompter=prompter or FakePrompter(),
        cloud_client=cloud_client or FakeCloudClient(),
        registry=registry or FakeClusterRegistry(),
        probe=probe or FakeClusterProbe(),
        filesystem=filesystem or FakeFilesystem(),
    )
