"""Pydantic schemas for the login endpoint."""

from typing import Optional

from pydantic import BaseModel

from .types import StudentCode


class LoginRequest(BaseModel):
    """Credentials supplied with a login attempt.

    ``type`` selects the branch: ``"admin"`` checks the shared secret, any
    other value looks the code up as a student id.
    """

    code: StudentCode = None
    type: Optional[str] = None


class LoginResult(BaseModel):
    success: bool
    role: Optional[str] = None
    name: Optional[str] = None
    balance: Optional[int] = None
    message: Optional[str] = None
