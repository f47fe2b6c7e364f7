import pytest
from sqlalchemy.exc import IntegrityError

from balance_tracker.models import Student
from balance_tracker.services import student_service
from balance_tracker.services.student_service import StudentRuleViolation


def test_lookup_balance_distinguishes_unknown_from_zero(session):
    session.add(Student(id="500", name="Zero", balance=0))
    session.commit()

    assert student_service.lookup_balance(session, "500") == 0
    assert student_service.lookup_balance(session, "501") is None
    assert student_service.lookup_balance(session, None) is None


def test_adjust_balance_returns_none_for_unknown(session):
    assert student_service.adjust_balance(session, student_id="missing", amount=5) is None
    assert student_service.adjust_balance(session, student_id=None, amount=5) is None


def test_adjust_balance_is_database_side_increment(session):
    session.add(Student(id="510", name="Inc", balance=10))
    session.commit()

    stale = student_service.find_student(session, "510")
    assert student_service.adjust_balance(session, student_id="510", amount=5) == 15
    assert student_service.adjust_balance(session, student_id="510", amount="2.5") == 17
    session.commit()

    session.refresh(stale)
    assert stale.balance == 17


def test_create_student_rejects_existing_code(session):
    student_service.create_student(session, student_id="520", name="A", balance=None)
    session.commit()

    with pytest.raises(StudentRuleViolation) as excinfo:
        student_service.create_student(session, student_id="520", name="B")
    assert excinfo.value.detail == "code already exists"


def test_unique_constraint_backstops_racing_insert(session):
    session.add(Student(id="530", name="First", balance=0))
    session.commit()

    session.add(Student(id="530", name="Racer", balance=0))
    with pytest.raises(IntegrityError):
        session.flush()
    session.rollback()


def test_delete_and_wipe_counts(session):
    session.add_all([Student(id=str(n), name=f"S{n}", balance=n) for n in range(540, 544)])
    session.commit()

    assert student_service.delete_student(session, "540") is True
    assert student_service.delete_student(session, "540") is False
    assert student_service.wipe_students(session) == 3
    session.commit()
    assert student_service.list_students(session) == []
