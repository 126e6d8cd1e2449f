from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import pytest
from fastapi.testclient import TestClient

from helpers import TEST_SECRET


def pytest_configure() -> None:
    # Keep a developer's local .env out of the test run.
    os.environ["ENVIRONMENT"] = "test"


@pytest.fixture()
def settings(tmp_path: Path) -> Any:
    from matchmaker.config import Settings

    return Settings(
        environment="test",
        db_url=f"sqlite:///{tmp_path / 'test.db'}",
        identity_jwt_secret=TEST_SECRET,
        user_sync_retry_delay=0,
        log_level="WARNING",
    )


@pytest.fixture()
def app(settings: Any) -> Any:
    from matchmaker.main import create_app

    return create_app(settings)


@pytest.fixture()
def client(app: Any) -> Any:
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def db_session(app: Any) -> Any:
    session = app.state.session_factory()
    try:
        yield session
    finally:
        session.close()
