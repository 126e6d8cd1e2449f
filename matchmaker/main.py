# main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from matchmaker.config import Settings, build_sqlalchemy_db_url, get_settings
from matchmaker.database import Base, build_engine, build_session_factory
from matchmaker.errors import register_exception_handlers
from matchmaker.middleware import install_route_protection
from matchmaker.models import Profile, User  # noqa: F401  # register tables on Base.metadata
from matchmaker.routers import dashboard, health, profile


logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    application = FastAPI(
        title=settings.app_name,
        version=settings.version,
        debug=settings.debug,
    )

    # One pooled engine per process, handed to requests through app.state.
    engine = build_engine(settings)
    application.state.settings = settings
    application.state.engine = engine
    application.state.session_factory = build_session_factory(engine)

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_route_protection(application)
    register_exception_handlers(application)

    # Health endpoints (do not depend on API_PREFIX)
    application.include_router(health.router)

    application.include_router(profile.router, prefix=settings.api_prefix)
    application.include_router(dashboard.router)

    # Avoid accidental schema changes in shared MySQL databases.
    # For local/test sqlite usage, auto-create ORM tables is still convenient.
    if build_sqlalchemy_db_url(settings).startswith("sqlite"):
        Base.metadata.create_all(bind=engine)

    logger.info("app initialized environment=%s", settings.environment)
    return application
