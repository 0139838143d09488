# app/api/faculty.py
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.deps import get_db
from app.crud import assignment as crud_assignment
from app.crud import faculty_signatory as crud_faculty_signatory
from app.crud import signatory as crud_signatory
from app.schemas.common import MessageOut
from app.schemas.section import SectionOut, to_section_out
from app.schemas.signatory import (
    AssignedItemOut,
    AssignedSignatoryOut,
    FacultySectionsRequest,
    FacultySignatoryOut,
    FacultySignatoryRequest,
    SignatoryCreate,
    SignatoryOut,
    SignatoryUpdate,
)

router = APIRouter()

KIND = "faculty"


@router.get("", response_model=List[SignatoryOut])
def read_faculty_members(db: Session = Depends(get_db)):
    return crud_signatory.list_signatories(db, KIND)


@router.post("", response_model=SignatoryOut, status_code=status.HTTP_201_CREATED)
def create_faculty(faculty_in: SignatoryCreate, db: Session = Depends(get_db)):
    return crud_signatory.create_signatory(db, faculty_in, kind=KIND)


@router.get("/{faculty_id}", response_model=SignatoryOut)
def read_faculty_member(faculty_id: int, db: Session = Depends(get_db)):
    return crud_signatory.get_signatory(db, faculty_id, KIND)


@router.get("/{faculty_id}/assignments", response_model=List[AssignedItemOut])
def read_faculty_assignments(faculty_id: int, db: Session = Depends(get_db)):
    # A faculty member signs for their own subjects through the same assignment graph
    assignments = crud_assignment.assigned_items_for(db, faculty_id, KIND)
    return [
        AssignedItemOut(
            assignment_id=a.id,
            requirement_id=a.requirement_id,
            name=a.requirement.name,
            type=a.requirement.display_type,
        )
        for a in assignments
    ]


def to_faculty_signatory_out(link) -> FacultySignatoryOut:
    return FacultySignatoryOut(
        faculty_id=link.faculty_id,
        signatory_id=link.signatory_id,
        signatory_name=link.signatory.name,
        section_ids=sorted(s.section_id for s in link.sections),
    )


@router.get("/{faculty_id}/signatories", response_model=List[AssignedSignatoryOut])
def read_faculty_signatories(faculty_id: int, db: Session = Depends(get_db)):
    return [
        AssignedSignatoryOut(signatory_id=s.id, signatory_name=s.name)
        for s in crud_faculty_signatory.signatories_for(db, faculty_id)
    ]


@router.post("/{faculty_id}/signatories", response_model=FacultySignatoryOut)
def assign_faculty_signatory(faculty_id: int, request: FacultySignatoryRequest,
                             db: Session = Depends(get_db)):
    link = crud_faculty_signatory.assign_signatory(db, faculty_id, request.signatory_id)
    return to_faculty_signatory_out(link)


@router.get("/{faculty_id}/signatories/{signatory_id}/sections", response_model=List[SectionOut])
def read_faculty_signatory_sections(faculty_id: int, signatory_id: int, db: Session = Depends(get_db)):
    sections = crud_faculty_signatory.sections_for(db, faculty_id, signatory_id)
    return [to_section_out(s) for s in sections]


@router.post("/{faculty_id}/signatories/{signatory_id}/sections", response_model=FacultySignatoryOut)
def assign_faculty_signatory_sections(faculty_id: int, signatory_id: int, request: FacultySectionsRequest,
                                      db: Session = Depends(get_db)):
    link = crud_faculty_signatory.assign_sections(db, faculty_id, signatory_id, request.section_ids)
    return to_faculty_signatory_out(link)


@router.delete("/{faculty_id}/signatories/{signatory_id}", response_model=MessageOut)
def unassign_faculty_signatory(faculty_id: int, signatory_id: int, db: Session = Depends(get_db)):
    crud_faculty_signatory.unassign_signatory(db, faculty_id, signatory_id)
    return {"message": "Signatory unassigned from faculty member"}


@router.put("/{faculty_id}", response_model=SignatoryOut)
def update_faculty(faculty_id: int, faculty_in: SignatoryUpdate, db: Session = Depends(get_db)):
    return crud_signatory.update_signatory(db, faculty_id, faculty_in, KIND)


@router.delete("/{faculty_id}", response_model=MessageOut)
def delete_faculty(faculty_id: int, db: Session = Depends(get_db)):
    crud_signatory.delete_signatory(db, faculty_id, KIND)
    return {"message": "Faculty member deleted"}
