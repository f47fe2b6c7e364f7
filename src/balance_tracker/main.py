"""FastAPI application entrypoint for the balance tracker."""

import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from .api.v1.router import api_router
from .core.config import ConfigurationError, Settings, get_settings
from .core.logging_config import setup_logging
from .jobs import register_startup

logger = logging.getLogger(__name__)


async def _persistence_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("database error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"success": False, "message": "error"})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Instantiate and configure the FastAPI application.

    Raises ``ConfigurationError`` when no database URL is configured.
    """

    settings = settings or get_settings()
    setup_logging(settings.log_level)
    if not settings.database_url:
        logger.critical("BALANCE_TRACKER_DATABASE_URL is not set")
        raise ConfigurationError("database_url is required")

    app = FastAPI(title="Balance Tracker API", version="0.1.0")
    app.include_router(api_router, prefix="/api")
    app.add_exception_handler(SQLAlchemyError, _persistence_error_handler)
    register_startup(app, settings)
    return app


def run() -> None:
    """Serve the application with uvicorn using the configured host and port."""

    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
