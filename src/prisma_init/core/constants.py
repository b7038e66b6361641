"""Shared constants for the endpoint dialog."""

# Where a Docker-backed Prisma server listens by default
DEFAULT_LOCAL_ENDPOINT = "http://localhost:4466"

# Name of the registry entry that points at the local server
LOCAL_CLUSTER_NAME = "local"

# Service and stage used when nothing has to be disambiguated
DEFAULT_SERVICE = "default"
DEFAULT_STAGE = "default"

# Stage suggested when the user is asked for one
SUGGESTED_STAGE = "dev"

# Presence of this file means the user already runs their own setup
COMPOSE_FILE_NAME = "docker-compose.yml"

# Internal names of the free sandbox clusters
SANDBOX_EU1 = "prisma-eu1"
SANDBOX_US1 = "prisma-us1"

# Fixed menu values
CHOICE_OTHER_SERVER = "Use other server"
CHOICE_LOCAL = "local"
CHOICE_NEW_DATABASE = "Create new database"
CHOICE_EXISTING_DATABASE = "Use existing database"
