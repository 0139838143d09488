"""create clearance tables

Revision ID: 5b1e9c2d7a40
Revises:
Create Date: 2026-10-19 09:12:44.118203

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5b1e9c2d7a40'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

GRADE_LEVELS = ["Grade 7", "Grade 8", "Grade 9", "Grade 10", "Grade 11", "Grade 12"]


def upgrade() -> None:
    grade_levels = op.create_table(
        'grade_levels',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False, unique=True),
    )
    op.create_table(
        'sections',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('grade_level_id', sa.Integer(), sa.ForeignKey('grade_levels.id'), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.UniqueConstraint('grade_level_id', 'name', name='uq_section_grade_name'),
    )
    op.create_table(
        'students',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('student_id', sa.String(), nullable=False),
        sa.Column('first_name', sa.String(), nullable=False),
        sa.Column('middle_name', sa.String(), nullable=True),
        sa.Column('last_name', sa.String(), nullable=False),
        sa.Column('role', sa.String(), nullable=False),
        sa.Column('hashed_password', sa.String(), nullable=True),
        sa.Column('section_id', sa.Integer(), sa.ForeignKey('sections.id', ondelete='SET NULL'), nullable=True),
    )
    op.create_index('ix_students_student_id', 'students', ['student_id'], unique=True)
    op.create_table(
        'requirements',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('kind', sa.Enum('subject', 'account', name='requirement_kind'), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
    )
    op.create_table(
        'curriculum',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('subject_id', sa.Integer(), sa.ForeignKey('requirements.id', ondelete='CASCADE'), nullable=False),
        sa.Column('grade_level_id', sa.Integer(), sa.ForeignKey('grade_levels.id'), nullable=False),
        sa.Column('semester', sa.Integer(), nullable=True),
        sa.Column('display_order', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('status', sa.Enum('active', 'inactive', name='curriculum_status'),
                  nullable=False, server_default='active'),
    )
    op.create_table(
        'signatories',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('kind', sa.Enum('signatory', 'faculty', name='signatory_kind'), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('first_name', sa.String(), nullable=False),
        sa.Column('middle_name', sa.String(), nullable=True),
        sa.Column('last_name', sa.String(), nullable=False),
        sa.Column('username', sa.String(), nullable=False),
        sa.Column('hashed_password', sa.String(), nullable=False),
    )
    op.create_index('ix_signatories_username', 'signatories', ['username'], unique=True)
    op.create_table(
        'signatory_assignments',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('signatory_id', sa.Integer(), sa.ForeignKey('signatories.id', ondelete='CASCADE'), nullable=False),
        sa.Column('requirement_id', sa.Integer(), sa.ForeignKey('requirements.id', ondelete='CASCADE'), nullable=False),
        sa.UniqueConstraint('signatory_id', 'requirement_id', name='uq_signatory_requirement'),
    )
    op.create_table(
        'assignment_sections',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('assignment_id', sa.Integer(),
                  sa.ForeignKey('signatory_assignments.id', ondelete='CASCADE'), nullable=False),
        sa.Column('section_id', sa.Integer(), sa.ForeignKey('sections.id', ondelete='CASCADE'), nullable=False),
        sa.UniqueConstraint('assignment_id', 'section_id', name='uq_assignment_section'),
    )
    op.create_table(
        'clearance_records',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('student_id', sa.Integer(), sa.ForeignKey('students.id', ondelete='CASCADE'), nullable=False),
        sa.Column('requirement_id', sa.Integer(), sa.ForeignKey('requirements.id'), nullable=False),
        sa.Column('school_year', sa.String(), nullable=False),
        sa.Column('term', sa.String(), nullable=False),
        sa.Column('is_cleared', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.UniqueConstraint('student_id', 'requirement_id', 'school_year', 'term', name='uq_clearance_key'),
    )
    op.create_index('ix_clearance_records_student_id', 'clearance_records', ['student_id'])
    op.create_index('ix_clearance_records_requirement_id', 'clearance_records', ['requirement_id'])
    op.create_table(
        'app_settings',
        sa.Column('key', sa.String(), primary_key=True),
        sa.Column('value', sa.String(), nullable=False),
    )

    op.bulk_insert(grade_levels, [{'name': name} for name in GRADE_LEVELS])


def downgrade() -> None:
    op.drop_table('app_settings')
    op.drop_index('ix_clearance_records_requirement_id', table_name='clearance_records')
    op.drop_index('ix_clearance_records_student_id', table_name='clearance_records')
    op.drop_table('clearance_records')
    op.drop_table('assignment_sections')
    op.drop_table('signatory_assignments')
    op.drop_index('ix_signatories_username', table_name='signatories')
    op.drop_table('signatories')
    op.drop_table('curriculum')
    op.drop_table('requirements')
    op.drop_index('ix_students_student_id', table_name='students')
    op.drop_table('students')
    op.drop_table('sections')
    op.drop_table('grade_levels')
