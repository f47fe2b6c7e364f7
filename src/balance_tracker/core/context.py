"""Per-application dependencies shared by every request handler."""

from dataclasses import dataclass
from typing import Optional

from fastapi import Request
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from .config import Settings


@dataclass(frozen=True)
class ServiceContext:
    """Read-only state built once at startup and injected into handlers."""

    settings: Settings
    engine: Engine
    session_factory: sessionmaker

    @property
    def admin_secret(self) -> Optional[str]:
        return self.settings.admin_password


def get_context(request: Request) -> ServiceContext:
    """Return the context attached to the running application."""

    return request.app.state.context
