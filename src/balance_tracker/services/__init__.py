"""Service layer exports."""

from . import reconciliation_service, student_service

__all__ = [
	"reconciliation_service",
	"student_service",
]
