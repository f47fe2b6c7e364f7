"""Domain logic for student records and balances."""

from __future__ import annotations

from typing import Any, Optional, Sequence

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from ..models import Student
from ..utils.numbers import coerce_int


class StudentRuleViolation(Exception):
    """Raised when a student operation breaks a domain rule."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


def find_student(session: Session, code: Optional[str]) -> Optional[Student]:
    """Return the student whose id is ``code``, or None."""

    if code is None:
        return None
    stmt = select(Student).where(Student.id == code)
    return session.execute(stmt).scalar_one_or_none()


def list_students(session: Session) -> Sequence[Student]:
    """Return every student in insertion order."""

    stmt = select(Student).order_by(Student.pk.asc())
    return session.execute(stmt).scalars().all()


def adjust_balance(session: Session, *, student_id: Optional[str], amount: Any) -> Optional[int]:
    """Atomically add ``amount`` to a balance and return the new value.

    The increment is evaluated by the database so concurrent adjustments are
    never lost. Returns None when no student has ``student_id``.
    """

    if student_id is None:
        return None
    delta = coerce_int(amount)
    stmt = (
        update(Student)
        .where(Student.id == student_id)
        .values(balance=Student.balance + delta)
        .execution_options(synchronize_session=False)
    )
    result = session.execute(stmt)
    if result.rowcount == 0:
        return None
    balance_stmt = select(Student.balance).where(Student.id == student_id)
    return session.execute(balance_stmt).scalar_one()


def create_student(
    session: Session,
    *,
    student_id: Optional[str],
    name: Optional[str],
    balance: Any = None,
) -> Student:
    """Insert a new student after checking the code is free.

    The check and the insert are separate statements; the unique constraint
    on ``students.id`` rejects a concurrent duplicate at flush time with an
    ``IntegrityError``.
    """

    if find_student(session, student_id) is not None:
        raise StudentRuleViolation("code already exists")

    student = Student(id=student_id, name=name, balance=coerce_int(balance))
    session.add(student)
    session.flush()
    return student


def delete_student(session: Session, student_id: str) -> bool:
    """Delete one student; return whether a record was removed."""

    stmt = delete(Student).where(Student.id == student_id).execution_options(synchronize_session=False)
    result = session.execute(stmt)
    return result.rowcount > 0


def wipe_students(session: Session) -> int:
    """Delete every student record and return how many were removed."""

    result = session.execute(delete(Student).execution_options(synchronize_session=False))
    return result.rowcount


def lookup_balance(session: Session, code: Optional[str]) -> Optional[int]:
    """Return the balance for ``code``, or None when the code is unknown."""

    if code is None:
        return None
    stmt = select(Student.balance).where(Student.id == code)
    return session.execute(stmt).scalar_one_or_none()
