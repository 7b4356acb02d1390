#!/usr/bin/env python3
"""Apply (or roll back) Alembic migrations.

Usage:
    python scripts/run_migrations.py             # upgrade to head
    python scripts/run_migrations.py -1 --down   # roll back one revision
"""

import argparse
import sys

import logfire
from alembic import command
from alembic.config import Config

from acadly.config import Settings
from acadly.util.observability import configure_observability


def main() -> int:
    parser = argparse.ArgumentParser(description="Run ACADLY database migrations")
    parser.add_argument("revision", nargs="?", default="head")
    parser.add_argument(
        "--down", action="store_true", help="Downgrade to the revision instead"
    )
    parser.add_argument("--config", default="alembic.ini", help="Alembic ini file")
    args = parser.parse_args()

    configure_observability(Settings())
    alembic_cfg = Config(args.config)
    direction = "downgrade" if args.down else "upgrade"

    with logfire.span(
        "Running {direction} to {revision}", direction=direction, revision=args.revision
    ):
        try:
            if args.down:
                command.downgrade(alembic_cfg, args.revision)
            else:
                command.upgrade(alembic_cfg, args.revision)
        except Exception:
            # The container must not start against a half-migrated schema
            logfire.exception("Migration failed", revision=args.revision)
            raise

    logfire.info("Migrations applied", direction=direction, revision=args.revision)
    return 0


if __name__ == "__main__":
    sys.exit(main())
