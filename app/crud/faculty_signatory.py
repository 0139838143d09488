# app/crud/faculty_signatory.py
"""Faculty members acting for signatory offices.

An administrator links a faculty member to a signatory and picks the
sections the faculty member handles for it, e.g. an adviser signing for
the Guidance Office in their own classes.
"""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.errors import NotFound
from app.crud.section import sort_sections
from app.crud.signatory import get_signatory
from app.db.models.section import Section
from app.db.models.signatory import FacultySignatory, FacultySignatorySection, Signatory
from app.db.session import commit_or_raise

logger = logging.getLogger(__name__)

FACULTY = "faculty"
SIGNATORY = "signatory"


def find_link(db: Session, faculty_id: int, signatory_id: int) -> Optional[FacultySignatory]:
    return db.query(FacultySignatory).filter(
        FacultySignatory.faculty_id == faculty_id,
        FacultySignatory.signatory_id == signatory_id,
    ).first()


def _check_actors(db: Session, faculty_id: int, signatory_id: int) -> None:
    get_signatory(db, faculty_id, FACULTY)
    get_signatory(db, signatory_id, SIGNATORY)


def assign_signatory(db: Session, faculty_id: int, signatory_id: int) -> FacultySignatory:
    """Link a faculty member to a signatory. Linking twice is a no-op."""
    _check_actors(db, faculty_id, signatory_id)
    link = find_link(db, faculty_id, signatory_id)
    if link:
        return link

    link = FacultySignatory(faculty_id=faculty_id, signatory_id=signatory_id)
    db.add(link)
    commit_or_raise(db, "Signatory is already assigned to this faculty member")
    db.refresh(link)
    logger.info(f"Faculty {faculty_id} now signs for signatory {signatory_id}")
    return link


def assign_sections(db: Session, faculty_id: int, signatory_id: int,
                    section_ids: List[int]) -> FacultySignatory:
    wanted = set(section_ids)
    found = {s.id for s in db.query(Section.id).filter(Section.id.in_(wanted)).all()} if wanted else set()
    missing = sorted(wanted - found)
    if missing:
        raise NotFound(f"Sections not found: {', '.join(map(str, missing))}")

    link = assign_signatory(db, faculty_id, signatory_id)
    added = sorted(wanted - {s.section_id for s in link.sections})
    for section_id in added:
        link.sections.append(FacultySignatorySection(section_id=section_id))

    if added:
        commit_or_raise(db)
        db.refresh(link)
        logger.info(f"Faculty {faculty_id} for signatory {signatory_id}: added sections {added}")
    return link


def signatories_for(db: Session, faculty_id: int) -> List[Signatory]:
    faculty = get_signatory(db, faculty_id, FACULTY)
    return sorted((link.signatory for link in faculty.acts_for), key=lambda s: s.name.lower())


def sections_for(db: Session, faculty_id: int, signatory_id: int) -> List[Section]:
    _check_actors(db, faculty_id, signatory_id)
    link = find_link(db, faculty_id, signatory_id)
    if not link:
        return []
    return sort_sections(s.section for s in link.sections)


def unassign_signatory(db: Session, faculty_id: int, signatory_id: int) -> None:
    _check_actors(db, faculty_id, signatory_id)
    link = find_link(db, faculty_id, signatory_id)
    if not link:
        raise NotFound(f"Signatory {signatory_id} is not assigned to faculty member {faculty_id}")
    db.delete(link)
    commit_or_raise(db)
    logger.info(f"Faculty {faculty_id} no longer signs for signatory {signatory_id}")
