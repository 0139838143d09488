# app/schemas/requirement.py
from typing import List, Optional

from app.schemas.common import CamelModel


class RequirementCreate(CamelModel):
    name: str
    grade_level_id: Optional[int] = None
    semester: Optional[int] = None
    display_order: int = 0


class RequirementUpdate(CamelModel):
    name: str


class RequirementOut(CamelModel):
    id: int
    name: str
    type: str


def to_requirement_out(requirement) -> RequirementOut:
    return RequirementOut(id=requirement.id, name=requirement.name, type=requirement.display_type)


class CurriculumSubjectOut(CamelModel):
    requirement_id: int  # curriculum placement id
    subject_id: int
    subject_name: str
    grade_level_id: int
    grade_level: str
    semester: Optional[int] = None
    display_order: int
    status: str


class CurriculumOut(CamelModel):
    active_semester: str
    subjects: List[CurriculumSubjectOut]


class AccountCreate(CamelModel):
    name: str
