"""Prompter port definition."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from prisma_init.core.models import MenuEntry


class Prompter(Protocol):
    """Single-question interactive input."""

    def select(self, message: str, entries: Sequence[MenuEntry], page_size: int | None = None) -> str:
        """Show a list of entries and return the value of the chosen one."""

    def ask(self, message: str, default: str | None = None, password: bool = False) -> str:
        """Ask for free text and return the answer (or the default)."""

    def confirm(self, message: str, default: bool = False) -> bool:
        """Ask a yes/no question."""
