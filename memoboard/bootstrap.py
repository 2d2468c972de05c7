"""Application startup and per-unit-of-work container scoping."""

from collections.abc import Iterator
from contextlib import contextmanager

import structlog

from memoboard import models  # noqa: F401
from memoboard.config import Settings, configure_logging, get_settings
from memoboard.core import Container, container
from memoboard.database import Base, dispose_engine, get_db, get_engine, initialize_database

logger = structlog.get_logger(__name__)


def startup(settings: Settings | None = None) -> Container:
    """
    Configure logging and the database, then return the shared container.

    Tables are created when missing.
    """
    settings = settings or get_settings()
    configure_logging(settings.ENVIRONMENT)
    initialize_database(settings)
    Base.metadata.create_all(bind=get_engine())

    logger.info(
        "memoboard_started",
        environment=settings.ENVIRONMENT,
        ai_enabled=settings.ai_enabled,
    )
    return container


@contextmanager
def container_scope() -> Iterator[Container]:
    """
    Bind a fresh database session to the container for one unit of work.

    Example:
        with container_scope() as scoped:
            use_case = scoped.create_board_use_case()
    """
    sessions = get_db()
    db = next(sessions)
    container.db.override(db)
    try:
        yield container
    finally:
        container.db.reset_override()
        sessions.close()


def shutdown() -> None:
    dispose_engine()
    logger.info("memoboard_stopped")
