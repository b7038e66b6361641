"""Local filesystem adapter for Filesystem port."""

from __future__ import annotations

from pathlib import Path

from prisma_init.ports.filesystem import Filesystem


class LocalFilesystem(Filesystem):
    """Filesystem adapter backed by the local disk."""

    def list_dir(self, path: Path) -> set[str]:
        return {entry.name for entry in path.iterdir()}
