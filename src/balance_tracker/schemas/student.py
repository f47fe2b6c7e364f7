"""Pydantic schemas for student roster and balance endpoints."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from .types import StudentCode, StudentName


class StudentRead(BaseModel):
    """Public projection of a student record."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: Optional[str] = None
    balance: int


class BalanceUpdate(BaseModel):
    """Request body for incrementing (or decrementing) a balance."""

    model_config = ConfigDict(populate_by_name=True)

    student_id: StudentCode = Field(None, alias="studentId")
    amount: Any = Field(None, description="Delta to add; unparseable values count as 0.")


class BalanceUpdateResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool
    new_balance: Optional[int] = Field(None, alias="newBalance")
    message: Optional[str] = None


class StudentCreate(BaseModel):
    """Request body for creating a student."""

    id: StudentCode = None
    name: StudentName = None
    balance: Any = Field(None, description="Opening balance; 0 when absent or non-numeric.")


class StudentCreateResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool
    message: str
    new_student: Optional[StudentRead] = Field(None, alias="newStudent")


class OperationResult(BaseModel):
    """Generic ``success``/``message`` envelope."""

    success: bool
    message: Optional[str] = None


class BalanceQuery(BaseModel):
    code: StudentCode = None


class BalanceReading(BaseModel):
    balance: int
