"""Filesystem port definition."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class Filesystem(Protocol):
    """Directory access used by the environment prober."""

    def list_dir(self, path: Path) -> set[str]:
        """Return the entry names of a directory.

        Raises:
            OSError: If the directory is missing or unreadable.
        """
