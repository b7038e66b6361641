"""prisma-init: resolve where a Prisma project gets deployed."""

__version__ = "0.1.0"
