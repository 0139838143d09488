# app/crud/section.py
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.errors import NotFound, ValidationFailed
from app.db.models.grade_level import GradeLevel, grade_number
from app.db.models.section import Section
from app.db.models.signatory import AssignmentSection, FacultySignatorySection
from app.db.models.student import Student
from app.db.session import commit_or_raise

logger = logging.getLogger(__name__)


def sort_sections(sections) -> List[Section]:
    # "Grade 7" < "Grade 8" < ... < "Grade 12", numerically
    return sorted(sections, key=lambda s: (grade_number(s.grade_level.name), s.name.lower()))


def list_grade_levels(db: Session) -> List[GradeLevel]:
    return sorted(db.query(GradeLevel).all(), key=lambda g: g.number)


def get_grade_level(db: Session, grade_level_id: int) -> GradeLevel:
    grade_level = db.query(GradeLevel).filter(GradeLevel.id == grade_level_id).first()
    if not grade_level:
        raise NotFound(f"Grade level {grade_level_id} not found")
    return grade_level


def get_grade_level_by_name(db: Session, name: str) -> GradeLevel:
    grade_level = db.query(GradeLevel).filter(GradeLevel.name == (name or "").strip()).first()
    if not grade_level:
        raise ValidationFailed(f"Unknown grade level: {name}")
    return grade_level


def get_section(db: Session, section_id: int) -> Section:
    section = db.query(Section).filter(Section.id == section_id).first()
    if not section:
        raise NotFound(f"Section {section_id} not found")
    return section


def list_sections(db: Session, grade_level_id: Optional[int] = None) -> List[Section]:
    query = db.query(Section)
    if grade_level_id is not None:
        get_grade_level(db, grade_level_id)
        query = query.filter(Section.grade_level_id == grade_level_id)
    return sort_sections(query.all())


def _clean_name(name: Optional[str]) -> str:
    name = (name or "").strip()
    if not name:
        raise ValidationFailed("Section name is required")
    return name


def create_section(db: Session, grade_level: str, name: str) -> Section:
    section = Section(
        grade_level_id=get_grade_level_by_name(db, grade_level).id,
        name=_clean_name(name),
    )
    db.add(section)
    commit_or_raise(db, f"Section '{grade_level} - {section.name}' already exists")
    db.refresh(section)
    logger.info(f"Created section {section.id}: {grade_level} - {section.name}")
    return section


def update_section(db: Session, section_id: int, grade_level: Optional[str] = None,
                   name: Optional[str] = None) -> Section:
    section = get_section(db, section_id)
    if grade_level is not None:
        section.grade_level_id = get_grade_level_by_name(db, grade_level).id
    if name is not None:
        section.name = _clean_name(name)
    commit_or_raise(db, f"Section '{section.name}' already exists in that grade level")
    db.refresh(section)
    return section


def delete_section(db: Session, section_id: int) -> int:
    """Delete a section; its students become unassigned. Returns how many."""
    section = get_section(db, section_id)

    unassigned = db.query(Student).filter(Student.section_id == section_id).update(
        {Student.section_id: None}, synchronize_session="fetch"
    )
    db.query(AssignmentSection).filter(AssignmentSection.section_id == section_id).delete(
        synchronize_session="fetch"
    )
    db.query(FacultySignatorySection).filter(FacultySignatorySection.section_id == section_id).delete(
        synchronize_session="fetch"
    )
    db.delete(section)
    commit_or_raise(db)

    logger.info(f"Deleted section {section_id}, {unassigned} student(s) unassigned")
    return unassigned
