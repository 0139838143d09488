# app/db/models/requirement.py
from sqlalchemy import Column, Integer, String, Enum, ForeignKey
from sqlalchemy.orm import relationship

from app.db.base import Base

SUBJECT = "subject"
ACCOUNT = "account"


class Requirement(Base):
    """A clearance item: a curriculum subject or an administrative account."""
    __tablename__ = "requirements"

    id = Column(Integer, primary_key=True, index=True)
    kind = Column(Enum(SUBJECT, ACCOUNT, name="requirement_kind"), nullable=False)
    name = Column(String, nullable=False)

    placements = relationship(
        "CurriculumPlacement", back_populates="subject", cascade="all, delete-orphan"
    )
    assignments = relationship(
        "SignatoryAssignment", back_populates="requirement", cascade="all, delete-orphan"
    )

    @property
    def display_type(self) -> str:
        return "Subject" if self.kind == SUBJECT else "Account"


class CurriculumPlacement(Base):
    """Places a subject into a grade level (and semester, for senior high)."""
    __tablename__ = "curriculum"

    id = Column(Integer, primary_key=True, index=True)
    subject_id = Column(Integer, ForeignKey("requirements.id", ondelete="CASCADE"), nullable=False)
    grade_level_id = Column(Integer, ForeignKey("grade_levels.id"), nullable=False)
    semester = Column(Integer, nullable=True)  # only for senior high
    display_order = Column(Integer, nullable=False, default=0)
    status = Column(Enum("active", "inactive", name="curriculum_status"), nullable=False, default="active")

    subject = relationship("Requirement", back_populates="placements")
    grade_level = relationship("GradeLevel")
