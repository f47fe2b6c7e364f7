"""Student roster and balance endpoints."""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ...core.database import get_db
from ...schemas import (
    BalanceQuery,
    BalanceReading,
    BalanceUpdate,
    BalanceUpdateResult,
    OperationResult,
    StudentCreate,
    StudentCreateResult,
    StudentRead,
)
from ...services import student_service
from ...services.student_service import StudentRuleViolation

logger = logging.getLogger(__name__)

router = APIRouter(tags=["students"])


@router.get(
    "/students",
    response_model=List[StudentRead],
    summary="List all students",
    responses={
        200: {
            "description": "Every student record",
            "content": {
                "application/json": {
                    "example": [
                        {"id": "101", "name": "Yossi Cohen", "balance": 50},
                        {"id": "102", "name": "Dani Levi", "balance": 120},
                    ]
                }
            },
        }
    },
)
def list_students(db: Session = Depends(get_db)) -> List[StudentRead]:
    """Return the whole roster."""

    return list(student_service.list_students(db))


@router.post(
    "/update",
    response_model=BalanceUpdateResult,
    response_model_exclude_none=True,
    summary="Add to or subtract from a balance",
)
def update_balance(payload: BalanceUpdate, db: Session = Depends(get_db)) -> BalanceUpdateResult:
    """Increment a student's balance by ``amount`` (negative to subtract).

    Example request body::

        {"studentId": "102", "amount": -20}
    """

    new_balance = student_service.adjust_balance(db, student_id=payload.student_id, amount=payload.amount)
    if new_balance is None:
        db.rollback()
        return BalanceUpdateResult(success=False, message="not found")
    db.commit()
    return BalanceUpdateResult(success=True, new_balance=new_balance)


@router.post(
    "/create-student",
    response_model=StudentCreateResult,
    response_model_exclude_none=True,
    summary="Create a student",
)
def create_student(payload: StudentCreate, db: Session = Depends(get_db)) -> StudentCreateResult:
    """Register a new student code.

    Example request body::

        {"id": "104", "name": "Noa Friedman", "balance": 10}
    """

    try:
        student = student_service.create_student(
            db,
            student_id=payload.id,
            name=payload.name,
            balance=payload.balance,
        )
        db.commit()
        db.refresh(student)
    except StudentRuleViolation as exc:
        db.rollback()
        return StudentCreateResult(success=False, message=exc.detail)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("failed to save student %r", payload.id)
        return StudentCreateResult(success=False, message="error saving")

    logger.info("student %s created", student.id)
    return StudentCreateResult(
        success=True,
        message=f"student {student.name or student.id} created",
        new_student=StudentRead.model_validate(student),
    )


@router.post(
    "/wipe-students",
    response_model=OperationResult,
    response_model_exclude_none=True,
    summary="Delete every student",
)
def wipe_students(db: Session = Depends(get_db)) -> OperationResult:
    """Remove all student records. The demo students are not re-seeded."""

    try:
        removed = student_service.wipe_students(db)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("failed to wipe students")
        return OperationResult(success=False, message="error wiping")

    logger.warning("wiped %d student records", removed)
    return OperationResult(success=True, message="all students deleted")


@router.post(
    "/my-balance",
    response_model=BalanceReading,
    summary="Balance for a student code",
)
def my_balance(payload: BalanceQuery, db: Session = Depends(get_db)) -> BalanceReading:
    """Return the caller's balance; unknown codes read as 0."""

    balance = student_service.lookup_balance(db, payload.code)
    return BalanceReading(balance=balance if balance is not None else 0)


@router.delete(
    "/delete-student/{student_id}",
    response_model=OperationResult,
    response_model_exclude_none=True,
    summary="Delete one student",
)
def delete_student(student_id: str, db: Session = Depends(get_db)) -> OperationResult:
    """Permanently remove the student with ``student_id``."""

    if not student_service.delete_student(db, student_id):
        db.rollback()
        return OperationResult(success=False, message="not found")
    db.commit()
    logger.info("student %s deleted", student_id)
    return OperationResult(success=True, message="student deleted")
