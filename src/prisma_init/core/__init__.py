"""Core domain types, errors and exit codes.

Nothing in this package may import from ui, commands or the CLI modules.
"""
