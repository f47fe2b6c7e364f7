"""Login endpoint for teachers and students."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...core.context import ServiceContext, get_context
from ...core.database import get_db
from ...core.security import verify_admin_secret
from ...schemas import LoginRequest, LoginResult
from ...services import student_service

router = APIRouter(tags=["auth"])


@router.post(
    "/login",
    response_model=LoginResult,
    response_model_exclude_none=True,
    summary="Log in as the teacher or as a student",
    responses={
        200: {
            "description": "Login outcome",
            "content": {
                "application/json": {
                    "examples": {
                        "admin": {"value": {"success": True, "role": "admin"}},
                        "student": {
                            "value": {"success": True, "role": "student", "name": "Ariel Mizrahi", "balance": 85}
                        },
                        "rejected": {"value": {"success": False, "message": "code not found"}},
                    }
                }
            },
        }
    },
)
def login(
    payload: LoginRequest,
    context: ServiceContext = Depends(get_context),
    db: Session = Depends(get_db),
) -> LoginResult:
    """Check a teacher password or a student code.

    Example request body::

        {"code": "103", "type": "student"}
    """

    if payload.type == "admin":
        if verify_admin_secret(payload.code, context.admin_secret):
            return LoginResult(success=True, role="admin")
        return LoginResult(success=False, message="wrong password")

    student = student_service.find_student(db, payload.code)
    if student is None:
        return LoginResult(success=False, message="code not found")
    return LoginResult(success=True, role="student", name=student.name, balance=student.balance)
