# app/crud/requirement.py
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.errors import Conflict, NotFound, ValidationFailed
from app.core.term_service import TermContext, VALID_SEMESTERS
from app.crud.section import get_grade_level
from app.db.models.clearance import ClearanceRecord
from app.db.models.grade_level import grade_number
from app.db.models.requirement import ACCOUNT, SUBJECT, CurriculumPlacement, Requirement
from app.db.session import commit_or_raise

logger = logging.getLogger(__name__)


def _label(kind: Optional[str]) -> str:
    return {SUBJECT: "Subject", ACCOUNT: "Account"}.get(kind, "Requirement")


def list_requirements(db: Session, kind: Optional[str] = None) -> List[Requirement]:
    query = db.query(Requirement)
    if kind:
        query = query.filter(Requirement.kind == kind)
    return query.order_by(Requirement.name).all()


def get_requirement(db: Session, requirement_id: int, kind: Optional[str] = None) -> Requirement:
    query = db.query(Requirement).filter(Requirement.id == requirement_id)
    if kind:
        query = query.filter(Requirement.kind == kind)
    requirement = query.first()
    if not requirement:
        raise NotFound(f"{_label(kind)} {requirement_id} not found")
    return requirement


def _clean_name(name: Optional[str], kind: str) -> str:
    name = (name or "").strip()
    if not name:
        raise ValidationFailed(f"{_label(kind)} name is required")
    return name


def create_requirement(db: Session, kind: str, name: str, grade_level_id: Optional[int] = None,
                       semester: Optional[int] = None, display_order: int = 0) -> Requirement:
    """Create a subject or account.

    A subject created with a grade level is also placed into the curriculum.
    Senior high placements need a semester; junior high ones never carry one.
    """
    if kind not in (SUBJECT, ACCOUNT):
        raise ValidationFailed(f"Unknown requirement kind: {kind}")

    requirement = Requirement(kind=kind, name=_clean_name(name, kind))

    if grade_level_id is not None:
        if kind != SUBJECT:
            raise ValidationFailed("Only subjects can be placed in a grade level")
        grade_level = get_grade_level(db, grade_level_id)
        if grade_level.is_senior:
            if semester is None or str(semester) not in VALID_SEMESTERS:
                raise ValidationFailed(f"{grade_level.name} subjects need a semester (1 or 2)")
        else:
            semester = None
        requirement.placements.append(CurriculumPlacement(
            grade_level_id=grade_level.id,
            semester=semester,
            display_order=display_order,
            status="active",
        ))

    db.add(requirement)
    commit_or_raise(db)
    db.refresh(requirement)
    logger.info(f"Created {kind} {requirement.id}: {requirement.name}")
    return requirement


def update_requirement(db: Session, requirement_id: int, name: str, kind: Optional[str] = None) -> Requirement:
    requirement = get_requirement(db, requirement_id, kind)
    requirement.name = _clean_name(name, requirement.kind)
    commit_or_raise(db)
    db.refresh(requirement)
    return requirement


def delete_requirement(db: Session, requirement_id: int, kind: Optional[str] = None) -> None:
    requirement = get_requirement(db, requirement_id, kind)

    # Clearance history is never deleted
    has_history = db.query(ClearanceRecord.id).filter(
        ClearanceRecord.requirement_id == requirement_id
    ).first()
    if has_history:
        raise Conflict(
            f"{requirement.name} has clearance records; deactivate its curriculum placement instead"
        )

    db.delete(requirement)
    commit_or_raise(db)
    logger.info(f"Deleted {requirement.kind} {requirement_id}")


def list_curriculum(db: Session, term: TermContext) -> List[CurriculumPlacement]:
    """Active placements: every junior high one, senior high only for the active semester."""
    placements = db.query(CurriculumPlacement).filter(CurriculumPlacement.status == "active").all()
    visible = [
        p for p in placements
        if not p.grade_level.is_senior or str(p.semester) == term.semester
    ]
    return sorted(visible, key=lambda p: (
        grade_number(p.grade_level.name), p.display_order, p.subject.name.lower()
    ))


def deactivate_placement(db: Session, placement_id: int) -> CurriculumPlacement:
    placement = db.query(CurriculumPlacement).filter(CurriculumPlacement.id == placement_id).first()
    if not placement:
        raise NotFound(f"Curriculum placement {placement_id} not found")
    placement.status = "inactive"
    commit_or_raise(db)
    db.refresh(placement)
    logger.info(f"Deactivated curriculum placement {placement_id} ({placement.subject.name})")
    return placement
