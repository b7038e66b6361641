"""Collect connection parameters for an existing database."""

from __future__ import annotations

from prisma_init.core.errors import InvalidInputError
from prisma_init.core.models import DatabaseCredentials, DatabaseType, MenuChoice
from prisma_init.ports.prompter import Prompter

MIN_PORT = 1
MAX_PORT = 65535

DATABASE_TYPE_CHOICES = (
    MenuChoice(
        value=DatabaseType.MYSQL.value,
        label="MySQL         MySQL compliant databases like MySQL or MariaDB",
    ),
    MenuChoice(
        value=DatabaseType.POSTGRES.value,
        label="PostgreSQL    PostgreSQL database",
    ),
)


def parse_database_type(value: str) -> DatabaseType:
    try:
        return DatabaseType(value.strip().lower())
    except ValueError:
        expected = " or ".join(t.value for t in DatabaseType)
        raise InvalidInputError("database type", value, expected) from None


def parse_port(value: str) -> int:
    """Parse a port number in 1..65535.

    Raises:
        InvalidInputError: The value is not an integer in range.
    """
    expected = f"a number between {MIN_PORT} and {MAX_PORT}"
    try:
        port = int(value.strip())
    except ValueError:
        raise InvalidInputError("port", value, expected) from None
    if not MIN_PORT <= port <= MAX_PORT:
        raise InvalidInputError("port", value, expected)
    return port


def collect_database_credentials(prompter: Prompter) -> DatabaseCredentials:
    """Ask for each connection field in turn.

    Type and port are validated as soon as they are entered; the remaining
    fields are taken as typed. A blank database name means "not needed".
    """
    database_type = parse_database_type(
        prompter.select("What kind of database do you want to deploy to?", DATABASE_TYPE_CHOICES)
    )
    host = prompter.ask("Enter database host")
    port = parse_port(prompter.ask("Enter database port"))
    user = prompter.ask("Enter database user")
    password = prompter.ask("Enter database password", password=True)
    database = prompter.ask("Enter database name (only needed when you already have data)", default="")
    already_data = prompter.confirm("Do you already have data in the database?", default=False)

    return DatabaseCredentials(
        type=database_type,
        host=host,
        port=port,
        user=user,
        password=password,
        database=database or None,
        already_data=already_data,
    )
