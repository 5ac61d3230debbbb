#!/usr/bin/env python3
"""Run database migrations with Logfire error tracking.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py base --down  # drop everything
"""

import argparse
import sys
import logfire
from alembic import command
from alembic.config import Config

from quill.config import Settings
from quill.util.logging import setup_logging
from quill.util.observability import configure_logfire


def main(argv: list[str] | None = None) -> int:
    """Run migrations and log any errors to Logfire."""
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("revision", nargs="?", default="head")
    parser.add_argument(
        "--down", action="store_true", help="Downgrade to the revision instead"
    )
    args = parser.parse_args(argv)

    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    direction = "downgrade" if args.down else "upgrade"
    try:
        logfire.info(
            "Starting database migrations", direction=direction, revision=args.revision
        )

        alembic_cfg = Config("alembic.ini")
        if args.down:
            command.downgrade(alembic_cfg, args.revision)
        else:
            command.upgrade(alembic_cfg, args.revision)

        logfire.info("Database migrations completed successfully")
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails and doesn't start with broken schema
        raise


if __name__ == "__main__":
    sys.exit(main())
