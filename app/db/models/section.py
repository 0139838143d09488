# app/db/models/section.py
from sqlalchemy import Column, Integer, String, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from app.db.base import Base


class Section(Base):
    __tablename__ = "sections"
    __table_args__ = (UniqueConstraint("grade_level_id", "name", name="uq_section_grade_name"),)

    id = Column(Integer, primary_key=True, index=True)
    grade_level_id = Column(Integer, ForeignKey("grade_levels.id"), nullable=False)
    name = Column(String, nullable=False)  # "Rose"

    grade_level = relationship("GradeLevel", back_populates="sections")
    students = relationship("Student", back_populates="section")
