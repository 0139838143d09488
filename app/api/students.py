# app/api/students.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.api.deps import get_db, get_term_context
from app.core.term_service import TermContext
from app.crud import clearance as crud_clearance
from app.crud import student as crud_student
from app.schemas.common import MessageOut
from app.schemas.settings import ActiveTermOut
from app.schemas.student import (
    ClearanceStatusItem,
    StudentClearanceProfile,
    StudentCreate,
    StudentOut,
    StudentUpdate,
    to_student_out,
)

router = APIRouter()


@router.get("", response_model=List[StudentOut])
def read_students(
    section_id: Optional[int] = Query(None, alias="sectionId"),
    db: Session = Depends(get_db),
):
    return [to_student_out(s) for s in crud_student.list_students(db, section_id=section_id)]


@router.get("/unassigned", response_model=List[StudentOut])
def read_unassigned_students(db: Session = Depends(get_db)):
    return [to_student_out(s) for s in crud_student.list_students(db, unassigned=True)]


@router.post("", response_model=StudentOut, status_code=status.HTTP_201_CREATED)
def create_student(student_in: StudentCreate, db: Session = Depends(get_db)):
    return to_student_out(crud_student.create_student(db, student_in))


@router.get("/{student_id}", response_model=StudentOut)
def read_student(student_id: str, db: Session = Depends(get_db)):
    return to_student_out(crud_student.get_student(db, student_id))


@router.get("/{student_id}/clearance", response_model=StudentClearanceProfile)
def read_student_clearance(
    student_id: str,
    db: Session = Depends(get_db),
    term: TermContext = Depends(get_term_context),
):
    student = crud_student.get_student(db, student_id)
    active, items = crud_clearance.clearance_profile(db, student, term)
    return StudentClearanceProfile(
        student=to_student_out(student),
        active_term=ActiveTermOut(
            school_year=active.school_year,
            term_name=active.term_name,
            term_number=active.term_number,
        ) if active else None,
        clearance_status=[
            ClearanceStatusItem(
                requirement_id=requirement.id,
                requirement_name=requirement.name,
                type=requirement.display_type,
                signatory_names=signatory_names,
                is_cleared=is_cleared,
            )
            for requirement, signatory_names, is_cleared in items
        ],
    )


@router.put("/{student_id}", response_model=StudentOut)
def update_student(student_id: str, student_update: StudentUpdate, db: Session = Depends(get_db)):
    student = crud_student.update_student(
        db,
        student_id,
        student_update.field_changes(),
        section=student_update.section_change(),
        password=student_update.password,
    )
    return to_student_out(student)


@router.delete("/{student_id}", response_model=MessageOut)
def delete_student(student_id: str, db: Session = Depends(get_db)):
    removed = crud_student.delete_student(db, student_id)
    return {"message": f"Student deleted with {removed} clearance record(s)"}
