from __future__ import annotations

from pathlib import Path

from sqlalchemy import create_engine, inspect

from create_orm_tables import create_tables, main
from matchmaker.config import Settings


def _tables(db_url: str) -> set[str]:
    engine = create_engine(db_url)
    try:
        return set(inspect(engine).get_table_names())
    finally:
        engine.dispose()


def test_create_tables_reports_users_and_profiles(tmp_path: Path) -> None:
    db_url = f"sqlite:///{tmp_path / 'fresh.db'}"

    assert create_tables(Settings(environment="test", db_url=db_url)) == ["users", "profiles"]
    assert {"users", "profiles"} <= _tables(db_url)
    assert create_tables(Settings(environment="test", db_url=db_url)) == []


def test_main_requires_confirm(tmp_path: Path) -> None:
    db_url = f"sqlite:///{tmp_path / 'untouched.db'}"

    assert main(["--db-url", db_url]) == 2
    assert _tables(db_url) == set()


def test_main_creates_tables_on_given_url(tmp_path: Path) -> None:
    db_url = f"sqlite:///{tmp_path / 'cli.db'}"

    assert main(["--confirm", "--db-url", db_url]) == 0
    assert {"users", "profiles"} <= _tables(db_url)
