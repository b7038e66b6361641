"""
Configuration management.

User configuration lives in ~/.config/prisma-init/config.json and is merged
over DEFAULT_CONFIG. Two environment variables override the file:
PRISMA_CLOUD_SESSION_KEY and PRISMA_CLOUD_API_ENDPOINT.
"""

import copy
import json
import logging
import os
from pathlib import Path
from typing import Any

from .core.constants import DEFAULT_LOCAL_ENDPOINT, SANDBOX_EU1, SANDBOX_US1
from .core.models import Cluster

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "prisma-init"
CONFIG_FILE = CONFIG_DIR / "config.json"

ENV_SESSION_KEY = "PRISMA_CLOUD_SESSION_KEY"
ENV_API_ENDPOINT = "PRISMA_CLOUD_API_ENDPOINT"


DEFAULT_CONFIG: dict[str, Any] = {
    "version": "1.0",
    "cloud_api_endpoint": "https://api.cloud.prisma.sh",
    "cloud_session_key": None,
    "local_endpoint": DEFAULT_LOCAL_ENDPOINT,
    # Seconds to wait for reachability and API answers
    "probe_timeout": 2.0,
    "request_timeout": 10.0,
    "clusters": [
        {
            "name": SANDBOX_EU1,
            "endpoint": "https://eu1.prisma.sh",
            "shared": True,
        },
        {
            "name": SANDBOX_US1,
            "endpoint": "https://us1.prisma.sh",
            "shared": True,
        },
    ],
}


def deep_merge(base: dict, override: dict) -> dict:
    """Deep merge override into base."""

    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value

    return base


def load_config() -> dict[str, Any]:
    """Load configuration from file merged over defaults.

    A malformed or unreadable file is reported and the defaults are used.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    if CONFIG_FILE.exists():
        try:
            with open(CONFIG_FILE) as f:
                user_config = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Ignoring unreadable config file %s: %s", CONFIG_FILE, e)
        else:
            if isinstance(user_config, dict):
                deep_merge(config, user_config)
            else:
                logger.warning("Ignoring config file %s: top level is not an object", CONFIG_FILE)

    if session_key := os.environ.get(ENV_SESSION_KEY):
        config["cloud_session_key"] = session_key
    if api_endpoint := os.environ.get(ENV_API_ENDPOINT):
        config["cloud_api_endpoint"] = api_endpoint

    return config


def clusters_from_config(config: dict[str, Any]) -> list[Cluster]:
    """Build registered Cluster records from the ``clusters`` config list.

    Entries without a name or endpoint are skipped with a warning.
    """
    clusters = []
    for entry in config.get("clusters") or []:
        name = entry.get("name")
        endpoint = entry.get("endpoint")
        if not name or not endpoint:
            logger.warning("Skipping cluster entry without name or endpoint: %r", entry)
            continue
        clusters.append(
            Cluster(
                name=name,
                endpoint=endpoint,
                workspace_slug=entry.get("workspace_slug"),
                shared=bool(entry.get("shared", False)),
                is_private=bool(entry.get("is_private", False)),
                local=bool(entry.get("local", False)),
            )
        )
    return clusters
