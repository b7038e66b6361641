"""Shared fixtures for prisma-init tests."""

import random

import pytest

from prisma_init.core.models import Cluster


@pytest.fixture
def temp_config_dir(tmp_path, monkeypatch):
    """Point the config module at a temporary directory."""
    from prisma_init import config

    config_dir = tmp_path / "config"
    monkeypatch.setattr(config, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(config, "CONFIG_FILE", config_dir / "config.json")
    monkeypatch.delenv(config.ENV_SESSION_KEY, raising=False)
    monkeypatch.delenv(config.ENV_API_ENDPOINT, raising=False)
    return config_dir


@pytest.fixture
def rng():
    """Seeded randomness source."""
    return random.Random(1234)


@pytest.fixture
def sandbox_eu1():
    return Cluster(name="prisma-eu1", endpoint="https://eu1.prisma.sh", shared=True)


@pytest.fixture
def sandbox_us1():
    return Cluster(name="prisma-us1", endpoint="https://us1.prisma.sh", shared=True)


@pytest.fixture
def private_cluster():
    return Cluster(
        name="mycluster",
        endpoint="https://mycluster.prisma.sh",
        workspace_slug="myteam",
        is_private=True,
    )


@pytest.fixture
def catalog(sandbox_eu1, sandbox_us1, private_cluster):
    """Shared sandboxes plus one private workspace cluster."""
    return [sandbox_eu1, sandbox_us1, private_cluster]
