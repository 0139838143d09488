# app/api/assignments.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_db
from app.crud import assignment as crud_assignment
from app.schemas.assignment import AssignClassesRequest, AssignmentOut, AssignRequirementRequest
from app.schemas.common import MessageOut
from app.schemas.section import SectionOut, to_section_out

router = APIRouter()


def to_assignment_out(assignment) -> AssignmentOut:
    return AssignmentOut(
        assignment_id=assignment.id,
        signatory_id=assignment.signatory_id,
        requirement_id=assignment.requirement_id,
        section_ids=sorted(link.section_id for link in assignment.sections),
    )


@router.post("/assign-requirement", response_model=AssignmentOut)
def assign_requirement(request: AssignRequirementRequest, db: Session = Depends(get_db)):
    assignment = crud_assignment.assign_requirement(db, request.signatory_id, request.requirement_id)
    return to_assignment_out(assignment)


@router.post("/assign-classes", response_model=AssignmentOut)
def assign_classes(request: AssignClassesRequest, db: Session = Depends(get_db)):
    assignment = crud_assignment.assign_sections(
        db, request.signatory_id, request.requirement_id, request.section_ids
    )
    return to_assignment_out(assignment)


@router.get("/sections/{signatory_id}/{requirement_id}", response_model=List[SectionOut])
def read_assigned_sections(signatory_id: int, requirement_id: int, db: Session = Depends(get_db)):
    return [to_section_out(s) for s in crud_assignment.sections_for(db, signatory_id, requirement_id)]


@router.get("/available-sections/{signatory_id}/{requirement_id}", response_model=List[SectionOut])
def read_available_sections(signatory_id: int, requirement_id: int, db: Session = Depends(get_db)):
    sections = crud_assignment.available_sections_for(db, signatory_id, requirement_id)
    return [to_section_out(s) for s in sections]


@router.delete("/{signatory_id}/{requirement_id}", response_model=MessageOut)
def unassign_requirement(signatory_id: int, requirement_id: int, db: Session = Depends(get_db)):
    crud_assignment.unassign_requirement(db, signatory_id, requirement_id)
    return {"message": "Requirement unassigned"}


@router.delete("/{signatory_id}/{requirement_id}/sections/{section_id}", response_model=MessageOut)
def unassign_section(signatory_id: int, requirement_id: int, section_id: int,
                     db: Session = Depends(get_db)):
    crud_assignment.unassign_section(db, signatory_id, requirement_id, section_id)
    return {"message": "Section removed from assignment"}
