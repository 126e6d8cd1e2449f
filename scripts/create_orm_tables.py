"""Create the matchmaker tables (users, profiles) on the configured database.

The app only auto-creates tables for sqlite; MySQL schemas are created with
this script, once, on purpose:

    python scripts/create_orm_tables.py --confirm
    python scripts/create_orm_tables.py --confirm --db-url mysql+pymysql://...
"""
import argparse
import logging

from sqlalchemy import inspect

import matchmaker.models  # noqa: F401  # register tables on Base.metadata
from matchmaker.config import Settings, build_sqlalchemy_db_url, get_settings
from matchmaker.database import Base, build_engine, mask_db_url


logger = logging.getLogger("create_orm_tables")


def create_tables(settings: Settings) -> list[str]:
    """Create missing tables and return the names that were newly created."""
    engine = build_engine(settings)
    try:
        existing = set(inspect(engine).get_table_names())
        Base.metadata.create_all(bind=engine)
    finally:
        engine.dispose()
    return [table.name for table in Base.metadata.sorted_tables if table.name not in existing]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create the users and profiles tables.")
    parser.add_argument("--db-url", help="Override DB_URL / DB_* settings for this run.")
    parser.add_argument("--confirm", action="store_true", help="Required; this issues DDL.")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    settings = Settings(db_url=args.db_url) if args.db_url else get_settings()
    target = mask_db_url(build_sqlalchemy_db_url(settings))
    if not args.confirm:
        logger.error("not touching %s without --confirm", target)
        return 2

    created = create_tables(settings)
    for name in created:
        logger.info("created table %s on %s", name, target)
    if not created:
        logger.info("users and profiles already exist on %s", target)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
