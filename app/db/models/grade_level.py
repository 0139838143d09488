# app/db/models/grade_level.py
import re

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from app.core.config import settings
from app.db.base import Base

_GRADE_NUMBER = re.compile(r"(\d+)")


def grade_number(name: str) -> int:
    """Numeric part of a grade level name: "Grade 10" -> 10.

    Names without a number sort after every numbered grade.
    """
    match = _GRADE_NUMBER.search(name or "")
    return int(match.group(1)) if match else 10**6


class GradeLevel(Base):
    __tablename__ = "grade_levels"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False)  # "Grade 7"

    sections = relationship("Section", back_populates="grade_level")

    @property
    def number(self) -> int:
        return grade_number(self.name)

    @property
    def is_senior(self) -> bool:
        # Senior high clears per semester, junior high per quarter
        return self.number >= settings.SENIOR_HIGH_START_GRADE
