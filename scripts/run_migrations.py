#!/usr/bin/env python3
"""Bring the database schema up to date.

    python scripts/run_migrations.py                # upgrade to head
    python scripts/run_migrations.py 3c1f0e9a7b21   # upgrade to a revision
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from agora.config import Settings
from agora.util.observability import configure_logfire

ALEMBIC_INI = "alembic.ini"


def alembic_config(settings: Settings) -> Config:
    """Alembic config pointed at the configured database."""
    config = Config(ALEMBIC_INI)
    config.set_main_option("sqlalchemy.url", settings.database_url)
    return config


def main(argv: list[str]) -> int:
    settings = Settings()
    configure_logfire(settings)

    revision = argv[1] if len(argv) > 1 else "head"
    with logfire.span("migrations.upgrade", revision=revision):
        try:
            command.upgrade(alembic_config(settings), revision)
        except Exception:
            # The deploy must stop here instead of serving an old schema
            logfire.exception("Migration failed", revision=revision)
            raise

    logfire.info("Schema upgraded", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
