"""Database engine, session and metadata configuration."""

import logging
from typing import Generator

from fastapi import Depends
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from .context import ServiceContext, get_context

logger = logging.getLogger(__name__)

Base = declarative_base()


def build_engine(database_url: str) -> Engine:
    """Create an engine for ``database_url``.

    SQLite connections are shared across FastAPI's worker threads, and an
    in-memory SQLite database is pinned to a single connection so every
    session sees the same data.
    """

    url = make_url(database_url)
    kwargs = {"future": True}
    if url.get_backend_name() == "sqlite":
        kwargs["connect_args"] = {"check_same_thread": False}
        if url.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
    return create_engine(url, **kwargs)


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


def verify_connection(engine: Engine) -> None:
    """Round-trip a trivial statement; raises ``SQLAlchemyError`` when unreachable."""

    with engine.connect() as connection:
        connection.execute(text("SELECT 1"))
    logger.info("database connected: %s", engine.url.render_as_string(hide_password=True))


def get_db(context: ServiceContext = Depends(get_context)) -> Generator[Session, None, None]:
    """Yield a database session for request lifetime."""

    db = context.session_factory()
    try:
        yield db
    finally:
        db.close()
