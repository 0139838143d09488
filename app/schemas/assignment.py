# app/schemas/assignment.py
from typing import List

from app.schemas.common import CamelModel


class AssignRequirementRequest(CamelModel):
    signatory_id: int
    requirement_id: int


class AssignClassesRequest(CamelModel):
    signatory_id: int
    requirement_id: int
    section_ids: List[int]


class AssignmentOut(CamelModel):
    assignment_id: int
    signatory_id: int
    requirement_id: int
    section_ids: List[int]
