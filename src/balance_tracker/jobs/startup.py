"""Startup hook: connect to the database and reconcile the demo students."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from sqlalchemy.exc import SQLAlchemyError

from ..core.config import Settings
from ..core.context import ServiceContext
from ..core.database import Base, build_engine, build_session_factory, verify_connection
from ..services.reconciliation_service import reconcile

logger = logging.getLogger(__name__)


def open_context(settings: Settings) -> ServiceContext:
    """Connect to the configured database and make sure the schema exists.

    Connection errors propagate so the server never starts without a database.
    """

    engine = build_engine(settings.database_url)
    try:
        verify_connection(engine)
        Base.metadata.create_all(engine)
    except SQLAlchemyError:
        logger.exception("could not connect to the database")
        engine.dispose()
        raise
    return ServiceContext(settings=settings, engine=engine, session_factory=build_session_factory(engine))


def run_reconciliation(context: ServiceContext) -> dict[str, int]:
    """Apply the configured startup policy in its own transaction."""

    policy = context.settings.startup_policy
    session = context.session_factory()
    try:
        summary = reconcile(session, policy)
        session.commit()
        logger.info("startup policy %s applied: %s", policy.value, summary)
        return summary
    except SQLAlchemyError:
        session.rollback()
        logger.exception("startup policy %s failed", policy.value)
        raise
    finally:
        session.close()


def register_startup(app: FastAPI, settings: Settings) -> None:
    """Attach database lifecycle hooks to the FastAPI app."""

    @app.on_event("startup")
    def open_database() -> None:
        context = open_context(settings)
        app.state.context = context
        if not settings.admin_password:
            logger.warning("no admin password configured; teacher login is disabled")
        run_reconciliation(context)

    @app.on_event("shutdown")
    def close_database() -> None:
        context = getattr(app.state, "context", None)
        if context is not None:
            context.engine.dispose()
            logger.info("database connection closed")
