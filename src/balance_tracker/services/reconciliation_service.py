"""Startup reconciliation of the fixed demo students."""

from __future__ import annotations

from sqlalchemy import and_, delete, func, or_, select
from sqlalchemy.orm import Session

from ..core.config import StartupPolicy
from ..models import Student


DEMO_STUDENTS = (
    {"id": "101", "name": "Yossi Cohen", "balance": 50},
    {"id": "102", "name": "Dani Levi", "balance": 120},
    {"id": "103", "name": "Ariel Mizrahi", "balance": 85},
)


def seed_if_empty(session: Session) -> dict[str, int]:
    """Insert the demo students when the collection holds no records."""

    count = session.execute(select(func.count()).select_from(Student)).scalar_one()
    if count:
        return {"seeded": 0}
    session.add_all([Student(**record) for record in DEMO_STUDENTS])
    session.flush()
    return {"seeded": len(DEMO_STUDENTS)}


def purge_demo_students(session: Session) -> dict[str, int]:
    """Delete records matching one of the demo (id, name) pairs."""

    matches = or_(
        *[and_(Student.id == record["id"], Student.name == record["name"]) for record in DEMO_STUDENTS]
    )
    result = session.execute(delete(Student).where(matches).execution_options(synchronize_session=False))
    return {"purged": result.rowcount}


def reconcile(session: Session, policy: StartupPolicy) -> dict[str, int]:
    """Apply exactly one startup policy and return its summary."""

    if policy is StartupPolicy.SEED_IF_EMPTY:
        return seed_if_empty(session)
    if policy is StartupPolicy.PURGE_FIXED_IDS:
        return purge_demo_students(session)
    return {}
