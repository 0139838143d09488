# app/db/__init__.py
# Importing app.db guarantees every model is registered on Base.metadata

from app.db.base import Base
from app.db.models.grade_level import GradeLevel
from app.db.models.section import Section
from app.db.models.student import Student
from app.db.models.requirement import Requirement, CurriculumPlacement
from app.db.models.signatory import (
    Signatory, SignatoryAssignment, AssignmentSection, FacultySignatory, FacultySignatorySection,
)
from app.db.models.clearance import ClearanceRecord
from app.db.models.app_setting import AppSetting

__all__ = [
    "Base", "GradeLevel", "Section", "Student", "Requirement", "CurriculumPlacement",
    "Signatory", "SignatoryAssignment", "AssignmentSection", "FacultySignatory",
    "FacultySignatorySection", "ClearanceRecord", "AppSetting",
]
