# app/api/sections.py
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.deps import get_db
from app.crud import section as crud_section
from app.crud import student as crud_student
from app.schemas.common import MessageOut
from app.schemas.section import SectionCreate, SectionOut, SectionUpdate, to_section_out
from app.schemas.student import StudentOut, to_student_out

router = APIRouter()


@router.get("", response_model=List[SectionOut])
def read_sections(db: Session = Depends(get_db)):
    return [to_section_out(s) for s in crud_section.list_sections(db)]


@router.post("", response_model=SectionOut, status_code=status.HTTP_201_CREATED)
def create_section(section_in: SectionCreate, db: Session = Depends(get_db)):
    section = crud_section.create_section(db, section_in.grade_level, section_in.section_name)
    return to_section_out(section)


@router.get("/grade-level/{grade_level_id}", response_model=List[SectionOut])
def read_sections_for_grade_level(grade_level_id: int, db: Session = Depends(get_db)):
    return [to_section_out(s) for s in crud_section.list_sections(db, grade_level_id)]


@router.get("/{section_id}", response_model=SectionOut)
def read_section(section_id: int, db: Session = Depends(get_db)):
    return to_section_out(crud_section.get_section(db, section_id))


@router.get("/{section_id}/students", response_model=List[StudentOut])
def read_section_students(section_id: int, db: Session = Depends(get_db)):
    return [to_student_out(s) for s in crud_student.list_students(db, section_id=section_id)]


@router.put("/{section_id}", response_model=SectionOut)
def update_section(section_id: int, section_in: SectionUpdate, db: Session = Depends(get_db)):
    section = crud_section.update_section(
        db, section_id, grade_level=section_in.grade_level, name=section_in.section_name
    )
    return to_section_out(section)


@router.delete("/{section_id}", response_model=MessageOut)
def delete_section(section_id: int, db: Session = Depends(get_db)):
    unassigned = crud_section.delete_section(db, section_id)
    return {"message": f"Section deleted, {unassigned} student(s) unassigned"}
