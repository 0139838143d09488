# app/db/models/clearance.py
from sqlalchemy import Column, Integer, String, Boolean, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from app.db.base import Base


class ClearanceRecord(Base):
    """One ledger row per (student, requirement, school year, term).

    A missing row means "not cleared"; rows are only written on change.
    """
    __tablename__ = "clearance_records"
    __table_args__ = (
        UniqueConstraint("student_id", "requirement_id", "school_year", "term", name="uq_clearance_key"),
    )

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, ForeignKey("students.id", ondelete="CASCADE"), nullable=False, index=True)
    requirement_id = Column(Integer, ForeignKey("requirements.id"), nullable=False, index=True)
    school_year = Column(String, nullable=False)  # "2024-2025"
    term = Column(String, nullable=False)  # quarter or semester number, "1"
    is_cleared = Column(Boolean, nullable=False, default=False)

    student = relationship("Student", back_populates="clearance_records")
