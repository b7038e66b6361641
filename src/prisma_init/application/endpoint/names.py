"""Translate between internal cluster names and their menu aliases."""

from __future__ import annotations

from prisma_init.core.constants import SANDBOX_EU1, SANDBOX_US1

ENCODE_MAP = {
    SANDBOX_EU1: "sandbox-eu1",
    SANDBOX_US1: "sandbox-us1",
}

DECODE_MAP = {alias: name for name, alias in ENCODE_MAP.items()}


def encode_name(name: str) -> str:
    """Return the display alias of a cluster name, or the name itself."""
    return ENCODE_MAP.get(name, name)


def decode_name(display_name: str) -> str:
    """Replace the first occurrence of each known alias by its cluster name.

    Works on composite values such as ``myteam/sandbox-eu1``.
    """
    replaced = display_name
    for alias, name in DECODE_MAP.items():
        if alias in replaced:
            replaced = replaced.replace(alias, name, 1)
    return replaced
