#!/usr/bin/env python3
"""Upgrade the database schema to the latest revision.

Runs before the API starts; a failure stops the deploy instead of serving
against a stale schema.
"""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from forum.config import Settings
from forum.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def main(target: str = "head") -> int:
    configure_logfire(Settings())

    with logfire.span("migrations.upgrade", target=target):
        try:
            command.upgrade(Config(str(ALEMBIC_INI)), target)
        except Exception:
            logfire.exception("Database migration failed", target=target)
            raise

    logfire.info("Database schema is up to date", target=target)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
