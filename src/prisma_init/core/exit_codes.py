"""
Exit codes for prisma-init.

Standardized exit codes following Unix conventions with semantic meaning.
All commands MUST use these constants for consistency.

Exit Code Semantics:
  0: Success - command completed successfully
  1: Not Found - target not found (project directory missing)
  2: Usage Error - bad flags, invalid inputs
  3: Config Error - config problems, cluster catalog inconsistencies
  5: Internal Error - unexpected failure
  130: Cancelled - user cancelled operation (SIGINT)

Note: Click/Typer argument parsing errors (EXIT_USAGE) occur before
commands run, so they emit to stderr without going through handle_errors.
"""

# Success
EXIT_SUCCESS = 0  # Command completed successfully

EXIT_NOT_FOUND = 1  # Target not found (project directory)
EXIT_USAGE = 2  # Invalid usage/arguments (Click default)
EXIT_CONFIG = 3  # Config or catalog error
EXIT_INTERNAL = 5  # Unexpected errors

# Cancellation (SIGINT convention)
EXIT_CANCELLED = 130  # User cancelled operation (SIGINT)

# Map exception types to exit codes
# Note: keyed by class name so this module never imports errors
EXIT_CODE_MAP = {
    "ProjectDirectoryError": EXIT_NOT_FOUND,
    "InvalidInputError": EXIT_USAGE,
    "ConfigError": EXIT_CONFIG,
    "ClusterResolutionError": EXIT_CONFIG,
}


def get_exit_code_for_exception(exc: Exception) -> int:
    """Return the appropriate exit code for an exception type.

    Walk up the exception's MRO to find a matching type in EXIT_CODE_MAP.
    Fall back to EXIT_INTERNAL if no specific mapping exists.

    Args:
        exc: The exception instance to map.

    Returns:
        The standardized exit code for the exception type.
    """
    for cls in type(exc).__mro__:
        if cls.__name__ in EXIT_CODE_MAP:
            return EXIT_CODE_MAP[cls.__name__]

    return EXIT_INTERNAL
