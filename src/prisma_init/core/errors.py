"""
Error hierarchy for prisma-init.

Every error raised on purpose derives from PrismaInitError and carries a
user-facing message, an optional suggested action and an exit code. The CLI
error boundary (cli_common.handle_errors) renders them; everything else
propagates them untouched.
"""

from __future__ import annotations

from .exit_codes import EXIT_CONFIG, EXIT_INTERNAL, EXIT_NOT_FOUND, EXIT_USAGE


class PrismaInitError(Exception):
    """Base class for errors shown to the user."""

    exit_code: int = EXIT_INTERNAL

    def __init__(
        self,
        user_message: str,
        suggested_action: str | None = None,
        debug_context: str | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.suggested_action = suggested_action
        self.debug_context = debug_context


class ConfigError(PrismaInitError):
    """Configuration could not be loaded or is inconsistent."""

    exit_code = EXIT_CONFIG


class ClusterResolutionError(ConfigError):
    """No cluster could be determined from the selected menu entry."""

    def __init__(self, choice: str) -> None:
        super().__init__(
            user_message="Oops. Could not get cluster.",
            suggested_action="Check the clusters in your prisma-init config and try again",
            debug_context=f"choice={choice!r}",
        )
        self.choice = choice


class ProjectDirectoryError(PrismaInitError):
    """The project directory is missing or cannot be read."""

    exit_code = EXIT_NOT_FOUND

    def __init__(self, path: str, reason: str | None = None) -> None:
        super().__init__(
            user_message=f"Project directory not found or unreadable: {path}",
            suggested_action="Run the command from inside your project directory",
            debug_context=reason,
        )
        self.path = path


class InvalidInputError(PrismaInitError):
    """A prompt answer could not be parsed into the expected form."""

    exit_code = EXIT_USAGE

    def __init__(self, field: str, value: str, expected: str) -> None:
        super().__init__(
            user_message=f"Invalid {field}: {value!r}",
            suggested_action=f"Enter {expected}",
        )
        self.field = field
        self.value = value
