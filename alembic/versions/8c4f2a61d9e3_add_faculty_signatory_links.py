"""add faculty signatory links

Revision ID: 8c4f2a61d9e3
Revises: 5b1e9c2d7a40
Create Date: 2026-10-19 15:40:02.517390

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '8c4f2a61d9e3'
down_revision: Union[str, None] = '5b1e9c2d7a40'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'faculty_signatories',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('faculty_id', sa.Integer(), sa.ForeignKey('signatories.id', ondelete='CASCADE'), nullable=False),
        sa.Column('signatory_id', sa.Integer(), sa.ForeignKey('signatories.id', ondelete='CASCADE'), nullable=False),
        sa.UniqueConstraint('faculty_id', 'signatory_id', name='uq_faculty_signatory'),
    )
    op.create_table(
        'faculty_signatory_sections',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('link_id', sa.Integer(),
                  sa.ForeignKey('faculty_signatories.id', ondelete='CASCADE'), nullable=False),
        sa.Column('section_id', sa.Integer(), sa.ForeignKey('sections.id', ondelete='CASCADE'), nullable=False),
        sa.UniqueConstraint('link_id', 'section_id', name='uq_faculty_signatory_section'),
    )


def downgrade() -> None:
    op.drop_table('faculty_signatory_sections')
    op.drop_table('faculty_signatories')
