"""Student domain model."""

from sqlalchemy import Column, Integer, String, UniqueConstraint

from ..core.database import Base


class Student(Base):
    """A student record: the externally assigned code, a name and a balance."""

    __tablename__ = "students"
    __table_args__ = (
        UniqueConstraint("id", name="students_id_unique"),
    )

    pk = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String, nullable=False)
    name = Column(String)
    balance = Column(Integer, nullable=False, default=0)

    def __repr__(self) -> str:
        return f"Student(id={self.id!r}, name={self.name!r}, balance={self.balance!r})"
