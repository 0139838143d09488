# app/crud/student.py
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.errors import Conflict, NotFound, ValidationFailed
from app.core.security import get_password_hash
from app.crud.section import get_section
from app.db.models.clearance import ClearanceRecord
from app.db.models.student import Student
from app.db.session import commit_or_raise
from app.schemas.common import SectionChange
from app.schemas.student import StudentCreate

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("student_id", "first_name", "last_name")


def _sort_key(student: Student):
    return (student.last_name.lower(), student.first_name.lower(), student.student_id)


def get_student(db: Session, student_id: str) -> Student:
    student = db.query(Student).filter(Student.student_id == student_id).first()
    if not student:
        raise NotFound(f"Student {student_id} not found")
    return student


def get_student_by_user_id(db: Session, user_id: int) -> Student:
    student = db.query(Student).filter(Student.id == user_id).first()
    if not student:
        raise NotFound(f"Student with user id {user_id} not found")
    return student


def list_students(db: Session, section_id: Optional[int] = None, unassigned: bool = False) -> List[Student]:
    query = db.query(Student)
    if unassigned:
        query = query.filter(Student.section_id.is_(None))
    elif section_id is not None:
        get_section(db, section_id)
        query = query.filter(Student.section_id == section_id)
    return sorted(query.all(), key=_sort_key)


def _validate_fields(fields: dict) -> dict:
    cleaned = dict(fields)
    for field in REQUIRED_FIELDS:
        if field in cleaned:
            value = (cleaned[field] or "").strip()
            if not value:
                raise ValidationFailed(f"{field} must not be blank")
            cleaned[field] = value
    if "middle_name" in cleaned:
        cleaned["middle_name"] = (cleaned["middle_name"] or "").strip() or None
    return cleaned


def create_student(db: Session, student_in: StudentCreate) -> Student:
    fields = _validate_fields(student_in.model_dump(
        include={"student_id", "first_name", "middle_name", "last_name"}
    ))
    if db.query(Student).filter(Student.student_id == fields["student_id"]).first():
        raise Conflict(f"Student ID {fields['student_id']} already exists")
    if student_in.section_id is not None:
        get_section(db, student_in.section_id)

    student = Student(**fields, section_id=student_in.section_id, role="student")
    if student_in.password:
        student.hashed_password = get_password_hash(student_in.password)

    db.add(student)
    commit_or_raise(db, f"Student ID {fields['student_id']} already exists")
    db.refresh(student)
    logger.info(f"Created student {student.student_id} (user id {student.id})")
    return student


def update_student(db: Session, student_id: str, changes: dict,
                   section: SectionChange = SectionChange.unchanged(),
                   password: Optional[str] = None) -> Student:
    student = get_student(db, student_id)
    fields = _validate_fields(changes)

    new_id = fields.get("student_id")
    if new_id and new_id != student.student_id:
        if db.query(Student).filter(Student.student_id == new_id).first():
            raise Conflict(f"Student ID {new_id} already exists")

    for field, value in fields.items():
        setattr(student, field, value)

    if section.action == "set":
        get_section(db, section.section_id)
        student.section_id = section.section_id
    elif section.action == "clear":
        student.section_id = None

    if password:
        student.hashed_password = get_password_hash(password)

    commit_or_raise(db, f"Student ID {student.student_id} already exists")
    db.refresh(student)
    logger.info(f"Updated student {student.student_id}, section change: {section.action}")
    return student


def delete_student(db: Session, student_id: str) -> int:
    """Delete a student along with every clearance record they own."""
    student = get_student(db, student_id)
    removed = db.query(ClearanceRecord).filter(ClearanceRecord.student_id == student.id).count()
    db.delete(student)
    commit_or_raise(db)
    logger.info(f"Deleted student {student_id} and {removed} clearance record(s)")
    return removed
