#!/usr/bin/env python3
"""Apply the users schema with Logfire error tracking.

Usage:
    python scripts/run_migrations.py [revision]

The revision defaults to ``head``.
"""

import sys
import logfire
from alembic import command
from alembic.config import Config

from peerrate.config import Settings
from peerrate.util.logging import setup_logging
from peerrate.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Upgrade the database to the requested revision."""
    settings = Settings()
    revision = argv[1] if len(argv) > 1 else "head"

    setup_logging(settings)
    configure_logfire(settings)

    try:
        logfire.info(
            "Starting database migrations",
            revision=revision,
            environment=settings.environment,
        )

        # migrations/env.py reads the URL from Settings, not alembic.ini
        command.upgrade(Config("alembic.ini"), revision)

        logfire.info("Database migrations completed", revision=revision)
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            revision=revision,
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails and doesn't start with broken schema
        raise


if __name__ == "__main__":
    sys.exit(main(sys.argv))
