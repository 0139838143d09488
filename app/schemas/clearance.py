# app/schemas/clearance.py
from typing import List, Optional

from pydantic import field_validator

from app.schemas.common import CamelModel


class StudentStatusOut(CamelModel):
    user_id: int
    student_id: str
    first_name: str
    middle_name: Optional[str] = None
    last_name: str
    is_cleared: bool


class SectionStatusOut(CamelModel):
    students: List[StudentStatusOut]
    school_year: str
    term: str
    term_name: str
    requirement_id: int
    section_id: int


class UpdateStatusRequest(CamelModel):
    user_id: int
    requirement_id: int
    school_year: str
    term: str
    is_cleared: bool

    @field_validator("term", mode="before")
    @classmethod
    def term_as_string(cls, value):
        # Clients send the quarter/semester either as 1 or "1"
        return str(value) if isinstance(value, int) else value


class ClearAllOut(CamelModel):
    cleared_count: int
    school_year: str
    term: str
