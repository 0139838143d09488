# app/api/subjects.py
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.deps import get_db, get_term_context
from app.core.term_service import TermContext
from app.crud import requirement as crud_requirement
from app.db.models.requirement import SUBJECT
from app.schemas.common import MessageOut
from app.schemas.requirement import (
    CurriculumOut,
    CurriculumSubjectOut,
    RequirementCreate,
    RequirementOut,
    RequirementUpdate,
    to_requirement_out,
)

router = APIRouter()


def to_curriculum_subject_out(placement) -> CurriculumSubjectOut:
    return CurriculumSubjectOut(
        requirement_id=placement.id,
        subject_id=placement.subject_id,
        subject_name=placement.subject.name,
        grade_level_id=placement.grade_level_id,
        grade_level=placement.grade_level.name,
        semester=placement.semester,
        display_order=placement.display_order,
        status=placement.status,
    )


@router.get("", response_model=List[RequirementOut])
def read_subjects(db: Session = Depends(get_db)):
    return [to_requirement_out(r) for r in crud_requirement.list_requirements(db, SUBJECT)]


@router.post("", response_model=RequirementOut, status_code=status.HTTP_201_CREATED)
def create_subject(subject_in: RequirementCreate, db: Session = Depends(get_db)):
    subject = crud_requirement.create_requirement(
        db,
        SUBJECT,
        subject_in.name,
        grade_level_id=subject_in.grade_level_id,
        semester=subject_in.semester,
        display_order=subject_in.display_order,
    )
    return to_requirement_out(subject)


@router.get("/curriculum", response_model=CurriculumOut)
def read_curriculum(db: Session = Depends(get_db), term: TermContext = Depends(get_term_context)):
    placements = crud_requirement.list_curriculum(db, term)
    return CurriculumOut(
        active_semester=term.semester,
        subjects=[to_curriculum_subject_out(p) for p in placements],
    )


@router.post("/curriculum/{placement_id}/deactivate", response_model=CurriculumSubjectOut)
def deactivate_curriculum_subject(placement_id: int, db: Session = Depends(get_db)):
    return to_curriculum_subject_out(crud_requirement.deactivate_placement(db, placement_id))


@router.put("/{subject_id}", response_model=RequirementOut)
def update_subject(subject_id: int, subject_in: RequirementUpdate, db: Session = Depends(get_db)):
    return to_requirement_out(
        crud_requirement.update_requirement(db, subject_id, subject_in.name, SUBJECT)
    )


@router.delete("/{subject_id}", response_model=MessageOut)
def delete_subject(subject_id: int, db: Session = Depends(get_db)):
    crud_requirement.delete_requirement(db, subject_id, SUBJECT)
    return {"message": "Subject deleted"}
