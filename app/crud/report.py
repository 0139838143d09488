# app/crud/report.py
from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.term_service import TermContext
from app.crud.assignment import requirements_by_section
from app.crud.section import get_grade_level, get_section
from app.db.models.clearance import ClearanceRecord
from app.db.models.grade_level import grade_number
from app.db.models.section import Section
from app.db.models.student import Student


def fully_cleared_students(db: Session, term: TermContext, grade_level_id: Optional[int] = None,
                           section_id: Optional[int] = None) -> List[Student]:
    """Students cleared on every requirement in scope for their section.

    Only students with a section are considered. Whether a student whose
    section has no requirements at all counts is a setting.
    """
    query = db.query(Student).join(Section, Student.section_id == Section.id)
    if grade_level_id is not None:
        get_grade_level(db, grade_level_id)
        query = query.filter(Section.grade_level_id == grade_level_id)
    if section_id is not None:
        get_section(db, section_id)
        query = query.filter(Student.section_id == section_id)
    students = query.all()
    if not students:
        return []

    scope = requirements_by_section(db, {s.section_id for s in students})

    rows = db.query(
        ClearanceRecord.student_id, ClearanceRecord.requirement_id, ClearanceRecord.term
    ).filter(
        ClearanceRecord.student_id.in_([s.id for s in students]),
        ClearanceRecord.school_year == term.school_year,
        ClearanceRecord.is_cleared.is_(True),
    ).all()
    cleared_keys = {tuple(row) for row in rows}

    result = []
    for student in students:
        required = scope[student.section_id]
        if not required and not settings.REPORT_VACUOUS_CLEARANCE:
            continue
        active = term.for_grade(student.section.grade_level)
        if all((student.id, requirement_id, active.term_number) in cleared_keys
               for requirement_id in required):
            result.append(student)

    return sorted(result, key=lambda s: (
        grade_number(s.section.grade_level.name),
        s.section.name.lower(),
        s.last_name.lower(),
        s.first_name.lower(),
    ))
