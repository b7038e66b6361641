"""CLI command modules.

Each module exports a command function that is registered in cli.py.
"""

from __future__ import annotations
