# app/schemas/signatory.py
from typing import List, Optional

from app.schemas.common import CamelModel


class SignatoryCreate(CamelModel):
    # Display name, e.g. "Library"; defaults to the person's full name
    name: Optional[str] = None
    first_name: str
    middle_name: Optional[str] = None
    last_name: str
    username: str
    password: str


class SignatoryUpdate(CamelModel):
    name: Optional[str] = None
    first_name: Optional[str] = None
    middle_name: Optional[str] = None
    last_name: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None


class SignatoryOut(CamelModel):
    id: int
    kind: str
    name: str
    first_name: str
    middle_name: Optional[str] = None
    last_name: str
    username: str


class AssignedItemOut(CamelModel):
    assignment_id: int
    requirement_id: int
    name: str
    type: str


class AssignedSignatoryOut(CamelModel):
    signatory_id: int
    signatory_name: str


class FacultySignatoryRequest(CamelModel):
    signatory_id: int


class FacultySectionsRequest(CamelModel):
    section_ids: List[int]


class FacultySignatoryOut(CamelModel):
    faculty_id: int
    signatory_id: int
    signatory_name: str
    section_ids: List[int]
