# app/schemas/section.py
from typing import Optional

from app.schemas.common import CamelModel


class GradeLevelOut(CamelModel):
    id: int
    name: str


class SectionCreate(CamelModel):
    grade_level: str  # "Grade 7"
    section_name: str


class SectionUpdate(CamelModel):
    grade_level: Optional[str] = None
    section_name: Optional[str] = None


class SectionOut(CamelModel):
    section_id: int
    grade_level_id: int
    grade_level: str
    section_name: str


def to_section_out(section) -> SectionOut:
    return SectionOut(
        section_id=section.id,
        grade_level_id=section.grade_level_id,
        grade_level=section.grade_level.name,
        section_name=section.name,
    )
