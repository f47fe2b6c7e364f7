"""Public schema exports."""

from .auth import LoginRequest, LoginResult
from .student import (
	BalanceQuery,
	BalanceReading,
	BalanceUpdate,
	BalanceUpdateResult,
	OperationResult,
	StudentCreate,
	StudentCreateResult,
	StudentRead,
)

__all__ = [
	"BalanceQuery",
	"BalanceReading",
	"BalanceUpdate",
	"BalanceUpdateResult",
	"LoginRequest",
	"LoginResult",
	"OperationResult",
	"StudentCreate",
	"StudentCreateResult",
	"StudentRead",
]
