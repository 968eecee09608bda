#!/usr/bin/env python3
"""Apply Alembic migrations, reporting failures to Logfire.

Usage: run_migrations.py [revision]   (defaults to "head")
"""

import sys
import logfire
from alembic import command
from alembic.config import Config

from forum.config import Settings
from forum.util.observability import configure_logfire


def main(revision: str = "head") -> int:
    """Upgrade the schema to ``revision``."""
    settings = Settings()
    configure_logfire(settings)

    with logfire.span("migrations.upgrade", revision=revision):
        try:
            command.upgrade(Config("alembic.ini"), revision)
        except Exception as e:
            logfire.error(
                "Schema upgrade failed",
                revision=revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Fail the deploy rather than start on a broken schema
            raise

    logfire.info("Schema upgraded", revision=revision, environment=settings.environment)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
