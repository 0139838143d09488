# app/schemas/report.py
from typing import List, Optional

from app.schemas.common import CamelModel


class FullyClearedStudentOut(CamelModel):
    user_id: int
    student_id: str
    first_name: str
    middle_name: Optional[str] = None
    last_name: str
    grade_level: str
    section_name: str


class FullyClearedReport(CamelModel):
    students: List[FullyClearedStudentOut]
    total_count: int
