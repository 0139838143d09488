# app/crud/assignment.py
"""Signatory x Requirement x Section assignment graph.

A signatory is assigned requirements (subjects or accounts); each such
pairing carries the set of sections it applies to. A student is in scope
for a requirement when their section is in some pairing's set.
"""
import logging
from typing import Dict, List, Optional, Set

from sqlalchemy.orm import Session

from app.core.errors import NotFound
from app.crud.requirement import get_requirement
from app.crud.section import sort_sections
from app.crud.signatory import get_signatory
from app.db.models.section import Section
from app.db.models.signatory import AssignmentSection, Signatory, SignatoryAssignment
from app.db.session import commit_or_raise

logger = logging.getLogger(__name__)


def find_assignment(db: Session, signatory_id: int, requirement_id: int) -> Optional[SignatoryAssignment]:
    return db.query(SignatoryAssignment).filter(
        SignatoryAssignment.signatory_id == signatory_id,
        SignatoryAssignment.requirement_id == requirement_id,
    ).first()


def assign_requirement(db: Session, signatory_id: int, requirement_id: int) -> SignatoryAssignment:
    """Pair a requirement with a signatory. Re-assigning is a no-op."""
    get_signatory(db, signatory_id)
    get_requirement(db, requirement_id)

    assignment = find_assignment(db, signatory_id, requirement_id)
    if assignment:
        return assignment

    assignment = SignatoryAssignment(signatory_id=signatory_id, requirement_id=requirement_id)
    db.add(assignment)
    commit_or_raise(db, "Requirement is already assigned to this signatory")
    db.refresh(assignment)
    logger.info(f"Assigned requirement {requirement_id} to signatory {signatory_id}")
    return assignment


def assign_sections(db: Session, signatory_id: int, requirement_id: int,
                    section_ids: List[int]) -> SignatoryAssignment:
    """Add sections to a pairing's scope (set union). Creates the pairing if needed."""
    wanted = set(section_ids)
    found = {s.id for s in db.query(Section.id).filter(Section.id.in_(wanted)).all()} if wanted else set()
    missing = sorted(wanted - found)
    if missing:
        raise NotFound(f"Sections not found: {', '.join(map(str, missing))}")

    assignment = assign_requirement(db, signatory_id, requirement_id)
    already = {link.section_id for link in assignment.sections}
    added = sorted(wanted - already)
    for section_id in added:
        assignment.sections.append(AssignmentSection(section_id=section_id))

    if added:
        commit_or_raise(db)
        db.refresh(assignment)
        logger.info(
            f"Signatory {signatory_id}, requirement {requirement_id}: added sections {added}"
        )
    return assignment


def _require_assignment(db: Session, signatory_id: int, requirement_id: int) -> SignatoryAssignment:
    get_signatory(db, signatory_id)
    get_requirement(db, requirement_id)
    assignment = find_assignment(db, signatory_id, requirement_id)
    if not assignment:
        raise NotFound(f"Requirement {requirement_id} is not assigned to signatory {signatory_id}")
    return assignment


def unassign_requirement(db: Session, signatory_id: int, requirement_id: int) -> None:
    """Drop the pairing and its sections. Clearance records are kept."""
    assignment = _require_assignment(db, signatory_id, requirement_id)
    db.delete(assignment)
    commit_or_raise(db)
    logger.info(f"Unassigned requirement {requirement_id} from signatory {signatory_id}")


def unassign_section(db: Session, signatory_id: int, requirement_id: int, section_id: int) -> None:
    assignment = _require_assignment(db, signatory_id, requirement_id)
    link = next((s for s in assignment.sections if s.section_id == section_id), None)
    if not link:
        raise NotFound(f"Section {section_id} is not in scope for this assignment")
    assignment.sections.remove(link)
    commit_or_raise(db)
    logger.info(
        f"Signatory {signatory_id}, requirement {requirement_id}: removed section {section_id}"
    )


def sections_for(db: Session, signatory_id: int, requirement_id: int) -> List[Section]:
    get_signatory(db, signatory_id)
    get_requirement(db, requirement_id)
    assignment = find_assignment(db, signatory_id, requirement_id)
    if not assignment:
        return []
    return sort_sections(link.section for link in assignment.sections)


def available_sections_for(db: Session, signatory_id: int, requirement_id: int) -> List[Section]:
    # Always recomputed: sections come and go while assignments are edited
    assigned = {s.id for s in sections_for(db, signatory_id, requirement_id)}
    return sort_sections(s for s in db.query(Section).all() if s.id not in assigned)


def assigned_items_for(db: Session, signatory_id: int, kind: Optional[str] = None) -> List[SignatoryAssignment]:
    signatory = get_signatory(db, signatory_id, kind)
    return sorted(
        signatory.assignments,
        key=lambda a: (a.requirement.display_type, a.requirement.name.lower()),
    )


def is_in_scope(db: Session, requirement_id: int, section_id: int) -> bool:
    return db.query(AssignmentSection.id).join(
        SignatoryAssignment, AssignmentSection.assignment_id == SignatoryAssignment.id
    ).filter(
        SignatoryAssignment.requirement_id == requirement_id,
        AssignmentSection.section_id == section_id,
    ).first() is not None


def requirements_by_section(db: Session, section_ids) -> Dict[int, Set[int]]:
    """section id -> ids of every requirement in scope for it, across all signatories."""
    scope: Dict[int, Set[int]] = {section_id: set() for section_id in section_ids}
    if not scope:
        return scope
    rows = (
        db.query(AssignmentSection.section_id, SignatoryAssignment.requirement_id)
        .select_from(AssignmentSection)
        .join(SignatoryAssignment, AssignmentSection.assignment_id == SignatoryAssignment.id)
        .filter(AssignmentSection.section_id.in_(list(scope)))
        .all()
    )
    for section_id, requirement_id in rows:
        scope[section_id].add(requirement_id)
    return scope


def signatory_names_for(db: Session, requirement_id: int, section_id: int) -> List[str]:
    rows = db.query(Signatory.name).join(
        SignatoryAssignment, SignatoryAssignment.signatory_id == Signatory.id
    ).join(
        AssignmentSection, AssignmentSection.assignment_id == SignatoryAssignment.id
    ).filter(
        SignatoryAssignment.requirement_id == requirement_id,
        AssignmentSection.section_id == section_id,
    ).order_by(Signatory.name).all()
    return [name for (name,) in rows]
