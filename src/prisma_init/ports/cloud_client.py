"""Cloud client port definition."""

from __future__ import annotations

from typing import Any, Protocol


class CloudClient(Protocol):
    """Authenticated access to Prisma Cloud and cluster management APIs."""

    def is_authenticated(self) -> bool:
        """Return True if the user is logged in to Prisma Cloud."""

    def get_project(self, name: str, stage: str) -> dict[str, Any] | None:
        """Return project metadata, or None if the project does not exist."""
