# database.py
import logging
from typing import Generator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from matchmaker.config import Settings, build_sqlalchemy_db_url


logger = logging.getLogger(__name__)

Base = declarative_base()


def _build_connect_args(db_url: str) -> dict:
    if db_url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


def mask_db_url(db_url: str) -> str:
    try:
        return str(make_url(db_url).set(password="***"))
    except Exception:
        return db_url


def build_engine(settings: Settings) -> Engine:
    db_url = build_sqlalchemy_db_url(settings)
    engine = create_engine(db_url, pool_pre_ping=True, future=True, connect_args=_build_connect_args(db_url))
    logger.info("SQLAlchemy ORM db_url=%s", mask_db_url(db_url))
    return engine


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, future=True)


def get_db(request: Request) -> Generator[Session, None, None]:
    session = request.app.state.session_factory()
    try:
        yield session
    finally:
        session.close()
