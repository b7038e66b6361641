"""Tests for choice parsing and dispatch."""

import re

import pytest

from prisma_init.application.endpoint.choices import (
    CustomServerChoice,
    ExistingDatabaseChoice,
    LocalClusterChoice,
    NamedClusterChoice,
    SandboxChoice,
    parse_choice,
    split_workspace,
)
from prisma_init.application.endpoint.dispatcher import dispatch_choice
from prisma_init.core.models import Cluster, ClusterKind, DatabaseType
from tests.fakes import FakeClusterRegistry, FakePrompter


def dispatch(choice, *, logged_in=False, clusters=(), registry=None, prompter=None, rng=None):
    return dispatch_choice(
        parse_choice(choice),
        logged_in=logged_in,
        folder_name="myapp",
        clusters=list(clusters),
        registry=registry or FakeClusterRegistry(clusters),
        prompter=prompter or FakePrompter(),
        rng=rng,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# Tests for parse_choice
# ═══════════════════════════════════════════════════════════════════════════════


class TestParseChoice:
    """Tests for parse_choice function."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("Use other server", CustomServerChoice()),
            ("local", LocalClusterChoice()),
            ("Create new database", LocalClusterChoice()),
            ("Use existing database", ExistingDatabaseChoice()),
            ("sandbox-eu1", SandboxChoice(cluster_name="prisma-eu1")),
            ("sandbox-us1", SandboxChoice(cluster_name="prisma-us1")),
            ("prisma-eu1", NamedClusterChoice(cluster_name="prisma-eu1")),
            ("myteam/mycluster", NamedClusterChoice(cluster_name="mycluster", workspace="myteam")),
        ],
    )
    def test_variants(self, raw, expected):
        assert parse_choice(raw) == expected

    def test_split_workspace_uses_first_and_last_segment(self):
        assert split_workspace("a/b/c") == ("a", "c")
        assert split_workspace("cluster") == (None, "cluster")


# ═══════════════════════════════════════════════════════════════════════════════
# Tests for dispatch_choice
# ═══════════════════════════════════════════════════════════════════════════════


class TestCustomServer:
    """Tests for the custom endpoint branch."""

    def test_builds_unregistered_custom_cluster(self):
        prompter = FakePrompter(answers=["https://prisma.example.com"])
        selection = dispatch("Use other server", prompter=prompter)
        assert selection.cluster == Cluster(
            name="custom",
            endpoint="https://prisma.example.com",
            kind=ClusterKind.CUSTOM,
        )
        assert selection.workspace is None
        assert prompter.messages("ask") == ["What's your clusters endpoint?"]


class TestLocalCluster:
    """Tests for the local server branch."""

    @pytest.mark.parametrize("choice", ["local", "Create new database"])
    def test_fresh_local_cluster_without_registry_entry(self, choice):
        selection = dispatch(choice)
        assert selection.cluster.endpoint == "http://localhost:4466"
        assert selection.cluster.kind is ClusterKind.LOCAL
        assert selection.cluster.local is True
        assert selection.workspace is None

    def test_prefers_registered_local_cluster(self):
        registered = Cluster(name="local", endpoint="http://localhost:5000", local=True)
        selection = dispatch("local", registry=FakeClusterRegistry([registered]))
        assert selection.cluster is registered


class TestExistingDatabase:
    """Tests for the existing database branch."""

    def test_collects_credentials_and_builds_custom_cluster(self):
        prompter = FakePrompter(
            selections=["postgres"],
            answers=["db.example.com", "5432", "admin", "secret", ""],
            confirmations=[True],
        )
        selection = dispatch("Use existing database", prompter=prompter)
        assert selection.cluster.kind is ClusterKind.CUSTOM
        assert selection.cluster.endpoint == "http://localhost:4466"
        assert selection.database.type is DatabaseType.POSTGRES
        assert selection.database.port == 5432
        assert selection.database.already_data is True


class TestSandboxChoice:
    """Tests for the sandbox alias branches."""

    def test_resolves_registry_sandbox(self, catalog, sandbox_eu1):
        selection = dispatch("sandbox-eu1", clusters=catalog)
        assert selection.cluster == sandbox_eu1

    def test_us_sandbox_is_not_overwritten(self, catalog, sandbox_us1):
        selection = dispatch("sandbox-us1", clusters=catalog)
        assert selection.cluster == sandbox_us1

    def test_branch_ends_after_resolving(self, catalog, sandbox_eu1):
        """The sandbox branch must not fall through into the generic lookup.

        The generic lookup would search the catalog for a cluster literally
        named "sandbox-eu1", find nothing and discard the sandbox.
        """
        selection = dispatch("sandbox-eu1", clusters=catalog, logged_in=False)
        assert selection.cluster == sandbox_eu1
        assert selection.workspace is None

    def test_missing_sandbox_resolves_nothing(self):
        assert dispatch("sandbox-eu1").cluster is None


class TestNamedCluster:
    """Tests for the generic [workspace/]cluster branch."""

    def test_workspace_qualified_cluster(self, catalog, private_cluster):
        selection = dispatch("myteam/mycluster", clusters=catalog, logged_in=True)
        assert selection.cluster == private_cluster
        assert selection.workspace == "myteam"

    def test_workspace_must_match_slug(self, catalog):
        selection = dispatch("otherteam/mycluster", clusters=catalog, logged_in=True)
        assert selection.cluster is None

    def test_anonymous_workspace_for_shared_cluster(self, catalog, sandbox_eu1, rng):
        selection = dispatch("prisma-eu1", clusters=catalog, logged_in=False, rng=rng)
        assert selection.cluster == sandbox_eu1
        assert re.fullmatch(r"public-[a-z0-9_]+-\d+", selection.workspace)
        assert 0 <= int(selection.workspace.rsplit("-", 1)[1]) <= 1000

    def test_logged_in_shared_cluster_has_no_workspace(self, catalog, sandbox_eu1):
        selection = dispatch("prisma-eu1", clusters=catalog, logged_in=True)
        assert selection.cluster == sandbox_eu1
        assert selection.workspace is None

    def test_anonymous_workspace_only_for_shared(self):
        private = Cluster(name="solo", endpoint="https://solo.prisma.sh", is_private=True)
        selection = dispatch("solo", clusters=[private], logged_in=False)
        assert selection.cluster == private
        assert selection.workspace is None

    def test_unknown_cluster_resolves_nothing(self, catalog):
        selection = dispatch("nope", clusters=catalog)
        assert selection.cluster is None
        assert selection.workspace is None
