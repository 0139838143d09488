# app/core/term_service.py
"""Active school year / term resolution.

The active term lives in the ``app_settings`` table and is changed by an
administrator. Every ledger call receives a resolved :class:`TermContext`
rather than reading the settings itself.
"""
import logging
import re
import threading
from dataclasses import dataclass
from datetime import date
from typing import Optional

from sqlalchemy.orm import Session

from app.core.errors import ValidationFailed
from app.db.models.app_setting import AppSetting
from app.db.models.grade_level import GradeLevel
from app.db.session import commit_or_raise

logger = logging.getLogger(__name__)

SCHOOL_YEAR_KEY = "active_school_year"
QUARTER_KEY = "active_quarter_jhs"
SEMESTER_KEY = "active_semester_shs"

VALID_QUARTERS = {"1", "2", "3", "4"}
VALID_SEMESTERS = {"1", "2"}

_SCHOOL_YEAR = re.compile(r"^(\d{4})-(\d{4})$")

# Settings are a single shared cell; serialize reads and writes
_term_lock = threading.Lock()


@dataclass(frozen=True)
class ActiveTerm:
    school_year: str
    term_name: str  # "Quarter" or "Semester"
    term_number: str


@dataclass(frozen=True)
class TermContext:
    school_year: str
    quarter: str
    semester: str

    def for_grade(self, grade_level: GradeLevel) -> ActiveTerm:
        if grade_level.is_senior:
            return ActiveTerm(self.school_year, "Semester", self.semester)
        return ActiveTerm(self.school_year, "Quarter", self.quarter)


def default_term(today: Optional[date] = None) -> TermContext:
    year = (today or date.today()).year
    return TermContext(school_year=f"{year}-{year + 1}", quarter="1", semester="1")


def get_active_term(db: Session) -> TermContext:
    defaults = default_term()
    with _term_lock:
        rows = db.query(AppSetting).filter(
            AppSetting.key.in_([SCHOOL_YEAR_KEY, QUARTER_KEY, SEMESTER_KEY])
        ).all()
        values = {row.key: row.value for row in rows}

    return TermContext(
        school_year=values.get(SCHOOL_YEAR_KEY, defaults.school_year),
        quarter=values.get(QUARTER_KEY, defaults.quarter),
        semester=values.get(SEMESTER_KEY, defaults.semester),
    )


def validate_term(school_year: str, quarter: str, semester: str) -> None:
    match = _SCHOOL_YEAR.match(school_year or "")
    if not match or int(match.group(2)) != int(match.group(1)) + 1:
        raise ValidationFailed(f"Invalid school year: {school_year!r}, expected e.g. '2024-2025'")
    if quarter not in VALID_QUARTERS:
        raise ValidationFailed(f"Invalid quarter: {quarter!r}")
    if semester not in VALID_SEMESTERS:
        raise ValidationFailed(f"Invalid semester: {semester!r}")


def update_active_term(db: Session, school_year: str, quarter: str, semester: str) -> TermContext:
    """Switch the active term. Existing clearance records are left untouched."""
    validate_term(school_year, quarter, semester)

    new_values = {SCHOOL_YEAR_KEY: school_year, QUARTER_KEY: quarter, SEMESTER_KEY: semester}
    with _term_lock:
        for key, value in new_values.items():
            row = db.query(AppSetting).filter(AppSetting.key == key).first()
            if row:
                row.value = value
            else:
                db.add(AppSetting(key=key, value=value))
        commit_or_raise(db)

    logger.info(f"Active term set to {school_year}, quarter {quarter}, semester {semester}")
    return TermContext(school_year=school_year, quarter=quarter, semester=semester)
