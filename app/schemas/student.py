# app/schemas/student.py
from typing import List, Optional

from app.schemas.common import CamelModel, SectionChange
from app.schemas.settings import ActiveTermOut


class StudentCreate(CamelModel):
    student_id: str
    first_name: str
    middle_name: Optional[str] = None
    last_name: str
    section_id: Optional[int] = None
    password: Optional[str] = None


class StudentUpdate(CamelModel):
    student_id: Optional[str] = None
    first_name: Optional[str] = None
    middle_name: Optional[str] = None
    last_name: Optional[str] = None
    password: Optional[str] = None
    # omitted: keep the section, null: unassign, number: move
    section_id: Optional[int] = None

    def section_change(self) -> SectionChange:
        if "section_id" not in self.model_fields_set:
            return SectionChange.unchanged()
        if self.section_id is None:
            return SectionChange.clear()
        return SectionChange.set_to(self.section_id)

    def field_changes(self) -> dict:
        return self.model_dump(
            include={"student_id", "first_name", "middle_name", "last_name"},
            exclude_unset=True,
        )


class StudentOut(CamelModel):
    user_id: int
    student_id: str
    first_name: str
    middle_name: Optional[str] = None
    last_name: str
    role: str
    section_id: Optional[int] = None
    grade_level: Optional[str] = None
    section_name: Optional[str] = None


def to_student_out(student) -> StudentOut:
    section = student.section
    return StudentOut(
        user_id=student.id,
        student_id=student.student_id,
        first_name=student.first_name,
        middle_name=student.middle_name,
        last_name=student.last_name,
        role=student.role,
        section_id=student.section_id,
        grade_level=section.grade_level.name if section else None,
        section_name=section.name if section else None,
    )


class ClearanceStatusItem(CamelModel):
    requirement_id: int
    requirement_name: str
    type: str  # "Subject" / "Account"
    signatory_names: List[str]
    is_cleared: bool


class StudentClearanceProfile(CamelModel):
    student: StudentOut
    active_term: Optional[ActiveTermOut] = None  # None for unassigned students
    clearance_status: List[ClearanceStatusItem]
