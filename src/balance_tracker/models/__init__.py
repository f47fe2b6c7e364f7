"""SQLAlchemy models for the balance tracker."""

from .student import Student

__all__ = ["Student"]
