# app/db/models/signatory.py
from sqlalchemy import Column, Integer, String, Enum, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from app.db.base import Base


class Signatory(Base):
    """An actor that certifies requirements: a signatory office or a faculty member."""
    __tablename__ = "signatories"

    id = Column(Integer, primary_key=True, index=True)
    kind = Column(Enum("signatory", "faculty", name="signatory_kind"), nullable=False, default="signatory")
    name = Column(String, nullable=False)
    first_name = Column(String, nullable=False)
    middle_name = Column(String, nullable=True)
    last_name = Column(String, nullable=False)
    username = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)

    assignments = relationship(
        "SignatoryAssignment", back_populates="signatory", cascade="all, delete-orphan"
    )
    # Links where this faculty member signs for a signatory, and the reverse
    acts_for = relationship(
        "FacultySignatory", foreign_keys="FacultySignatory.faculty_id",
        back_populates="faculty", cascade="all, delete-orphan",
    )
    delegates = relationship(
        "FacultySignatory", foreign_keys="FacultySignatory.signatory_id",
        back_populates="signatory", cascade="all, delete-orphan",
    )


class SignatoryAssignment(Base):
    __tablename__ = "signatory_assignments"
    __table_args__ = (UniqueConstraint("signatory_id", "requirement_id", name="uq_signatory_requirement"),)

    id = Column(Integer, primary_key=True, index=True)
    signatory_id = Column(Integer, ForeignKey("signatories.id", ondelete="CASCADE"), nullable=False)
    requirement_id = Column(Integer, ForeignKey("requirements.id", ondelete="CASCADE"), nullable=False)

    signatory = relationship("Signatory", back_populates="assignments")
    requirement = relationship("Requirement", back_populates="assignments")
    sections = relationship(
        "AssignmentSection", back_populates="assignment", cascade="all, delete-orphan"
    )


class AssignmentSection(Base):
    __tablename__ = "assignment_sections"
    __table_args__ = (UniqueConstraint("assignment_id", "section_id", name="uq_assignment_section"),)

    id = Column(Integer, primary_key=True, index=True)
    assignment_id = Column(Integer, ForeignKey("signatory_assignments.id", ondelete="CASCADE"), nullable=False)
    section_id = Column(Integer, ForeignKey("sections.id", ondelete="CASCADE"), nullable=False)

    assignment = relationship("SignatoryAssignment", back_populates="sections")
    section = relationship("Section")


class FacultySignatory(Base):
    """A faculty member signing on behalf of a signatory office."""
    __tablename__ = "faculty_signatories"
    __table_args__ = (UniqueConstraint("faculty_id", "signatory_id", name="uq_faculty_signatory"),)

    id = Column(Integer, primary_key=True, index=True)
    faculty_id = Column(Integer, ForeignKey("signatories.id", ondelete="CASCADE"), nullable=False)
    signatory_id = Column(Integer, ForeignKey("signatories.id", ondelete="CASCADE"), nullable=False)

    faculty = relationship("Signatory", foreign_keys=[faculty_id], back_populates="acts_for")
    signatory = relationship("Signatory", foreign_keys=[signatory_id], back_populates="delegates")
    sections = relationship(
        "FacultySignatorySection", back_populates="link", cascade="all, delete-orphan"
    )


class FacultySignatorySection(Base):
    __tablename__ = "faculty_signatory_sections"
    __table_args__ = (UniqueConstraint("link_id", "section_id", name="uq_faculty_signatory_section"),)

    id = Column(Integer, primary_key=True, index=True)
    link_id = Column(Integer, ForeignKey("faculty_signatories.id", ondelete="CASCADE"), nullable=False)
    section_id = Column(Integer, ForeignKey("sections.id", ondelete="CASCADE"), nullable=False)

    link = relationship("FacultySignatory", back_populates="sections")
    section = relationship("Section")
