"""Application lifecycle jobs."""

from .startup import register_startup

__all__ = ["register_startup"]
