#!/usr/bin/env python3
"""Upgrade the newsdesk database to the latest Alembic revision."""

import sys

import logfire
from alembic import command
from alembic.config import Config

from newsdesk.config import Settings
from newsdesk.util.observability import configure_logfire


def main(revision: str = "head") -> int:
    """Run migrations, reporting failures to Logfire.

    Args:
        revision: Target revision (default: head)
    """
    settings = Settings()
    configure_logfire(settings)

    with logfire.span("run_migrations", revision=revision):
        try:
            command.upgrade(Config("alembic.ini"), revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # The deploy must not start against a half-migrated schema
            raise

    logfire.info("Database migrations completed", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
