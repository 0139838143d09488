# app/db/models/student.py
from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship

from app.db.base import Base


class Student(Base):
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, index=True)  # userId
    student_id = Column(String, unique=True, index=True, nullable=False)  # assigned by the school
    first_name = Column(String, nullable=False)
    middle_name = Column(String, nullable=True)
    last_name = Column(String, nullable=False)
    role = Column(String, nullable=False, default="student")
    hashed_password = Column(String, nullable=True)

    # None: the student is not in any section
    section_id = Column(Integer, ForeignKey("sections.id", ondelete="SET NULL"), nullable=True)

    section = relationship("Section", back_populates="students")
    clearance_records = relationship(
        "ClearanceRecord", back_populates="student", cascade="all, delete-orphan"
    )
