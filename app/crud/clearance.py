# app/crud/clearance.py
"""Clearance status ledger.

One boolean per (student, requirement, school year, term). Rows are written
lazily: a key with no row reads as "not cleared". That default is part of
the contract, so every read goes through :func:`read_statuses`.
"""
import logging
from typing import Dict, Iterable, List, Optional, Tuple

from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import ClearanceError, StaleContext, UpstreamFailure, ValidationFailed
from app.core.term_service import ActiveTerm, TermContext
from app.crud.assignment import is_in_scope, requirements_by_section, signatory_names_for
from app.crud.requirement import get_requirement
from app.crud.section import get_section
from app.crud.student import get_student_by_user_id, list_students
from app.db.models.clearance import ClearanceRecord
from app.db.models.requirement import Requirement
from app.db.models.student import Student
from app.db.session import commit_or_raise

logger = logging.getLogger(__name__)

# Dialects with INSERT ... ON CONFLICT DO UPDATE
_UPSERT_INSERTS = {"sqlite": sqlite_insert, "postgresql": postgresql_insert}
LEDGER_KEY = ["student_id", "requirement_id", "school_year", "term"]


def read_statuses(db: Session, student_ids: Iterable[int], requirement_id: int,
                  school_year: str, term: str) -> Dict[int, bool]:
    student_ids = list(student_ids)
    if not student_ids:
        return {}
    rows = db.query(ClearanceRecord.student_id, ClearanceRecord.is_cleared).filter(
        ClearanceRecord.student_id.in_(student_ids),
        ClearanceRecord.requirement_id == requirement_id,
        ClearanceRecord.school_year == school_year,
        ClearanceRecord.term == term,
    ).all()
    found = {student_id: is_cleared for student_id, is_cleared in rows}
    return {student_id: found.get(student_id, False) for student_id in student_ids}


def status_for_section(db: Session, section_id: int, requirement_id: int,
                       term: TermContext) -> Tuple[List[Tuple[Student, bool]], ActiveTerm]:
    """Roster of a section for one requirement in the section's active term.

    Sections outside every signatory's scope for the requirement have an
    empty roster: their students are not applicable, not "not cleared".
    """
    section = get_section(db, section_id)
    get_requirement(db, requirement_id)
    active = term.for_grade(section.grade_level)

    if not is_in_scope(db, requirement_id, section_id):
        return [], active

    students = list_students(db, section_id=section_id)
    statuses = read_statuses(
        db, (s.id for s in students), requirement_id, active.school_year, active.term_number
    )
    return [(student, statuses[student.id]) for student in students], active


def _upsert(db: Session, student_id: int, requirement_id: int, school_year: str,
            term: str, is_cleared: bool) -> None:
    """Write one ledger key in a single statement; the last writer wins."""
    dialect = db.get_bind().dialect.name
    if dialect not in _UPSERT_INSERTS:
        raise UpstreamFailure(f"Unsupported database dialect: {dialect}")

    statement = _UPSERT_INSERTS[dialect](ClearanceRecord).values(
        student_id=student_id,
        requirement_id=requirement_id,
        school_year=school_year,
        term=term,
        is_cleared=is_cleared,
    )
    db.execute(statement.on_conflict_do_update(
        index_elements=LEDGER_KEY,
        set_={"is_cleared": statement.excluded.is_cleared},
    ))


def _find_record(db: Session, student_id: int, requirement_id: int, school_year: str,
                 term: str) -> Optional[ClearanceRecord]:
    return db.query(ClearanceRecord).filter(
        ClearanceRecord.student_id == student_id,
        ClearanceRecord.requirement_id == requirement_id,
        ClearanceRecord.school_year == school_year,
        ClearanceRecord.term == term,
    ).first()


def set_status(db: Session, user_id: int, requirement_id: int, school_year: str, term: str,
               is_cleared: bool, active_term: TermContext, require_current: bool = True) -> ClearanceRecord:
    """Write one ledger entry.

    With ``require_current`` the (school year, term) pair must be the
    student's active term, so a client holding a stale term cannot write
    into it after an administrator moved the term forward.
    """
    student = get_student_by_user_id(db, user_id)
    requirement = get_requirement(db, requirement_id)
    term = str(term)

    if student.section is None or not is_in_scope(db, requirement_id, student.section_id):
        raise ValidationFailed(
            f"Student {student.student_id} is not in scope for {requirement.name}"
        )

    if require_current:
        current = active_term.for_grade(student.section.grade_level)
        if (school_year, term) != (current.school_year, current.term_number):
            raise StaleContext(
                f"{school_year} {current.term_name.lower()} {term} is not the active term "
                f"({current.school_year} {current.term_name.lower()} {current.term_number})"
            )

    _upsert(db, student.id, requirement_id, school_year, term, is_cleared)
    commit_or_raise(db)
    record = _find_record(db, student.id, requirement_id, school_year, term)
    logger.info(
        f"Clearance {student.student_id} / {requirement.name} / {school_year} T{term}: "
        f"{'cleared' if is_cleared else 'not cleared'}"
    )
    return record


def clear_all_uncleared(db: Session, section_id: int, requirement_id: int,
                        term: TermContext) -> Tuple[int, ActiveTerm]:
    """Mark every not-yet-cleared student of the section as cleared.

    Best effort: students are cleared one at a time, each write committed on
    its own. The first failure stops the batch and is reported; writes that
    already went through stay, and the caller re-reads the roster.
    """
    roster, active = status_for_section(db, section_id, requirement_id, term)
    pending = [student for student, cleared in roster if not cleared]

    cleared = 0
    for student in pending:
        try:
            _upsert(db, student.id, requirement_id, active.school_year, active.term_number, True)
            commit_or_raise(db)
        except SQLAlchemyError as exc:
            db.rollback()
            logger.exception(f"Clear-all stopped at student {student.student_id}")
            raise UpstreamFailure(
                f"Clearing stopped after {cleared} of {len(pending)} students"
            ) from exc
        except ClearanceError as exc:
            logger.error(f"Clear-all stopped at student {student.student_id}: {exc.message}")
            raise UpstreamFailure(
                f"Clearing stopped after {cleared} of {len(pending)} students: {exc.message}"
            ) from exc
        cleared += 1

    logger.info(
        f"Cleared {cleared} student(s) in section {section_id} for requirement {requirement_id}"
    )
    return cleared, active


def clearance_profile(db: Session, student: Student, term: TermContext
                      ) -> Tuple[Optional[ActiveTerm], List[Tuple[Requirement, List[str], bool]]]:
    """Every requirement in scope for the student, with status for the active term."""
    if student.section is None:
        return None, []

    active = term.for_grade(student.section.grade_level)
    requirement_ids = requirements_by_section(db, [student.section_id])[student.section_id]
    if not requirement_ids:
        return active, []

    requirements = db.query(Requirement).filter(Requirement.id.in_(requirement_ids)).all()
    cleared = {
        requirement_id for (requirement_id,) in db.query(ClearanceRecord.requirement_id).filter(
            ClearanceRecord.student_id == student.id,
            ClearanceRecord.school_year == active.school_year,
            ClearanceRecord.term == active.term_number,
            ClearanceRecord.is_cleared.is_(True),
        ).all()
    }

    items = [
        (requirement, signatory_names_for(db, requirement.id, student.section_id), requirement.id in cleared)
        for requirement in sorted(requirements, key=lambda r: (r.display_type, r.name.lower()))
    ]
    return active, items
