"""Initial school administration schema

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-17 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001_initial_schema'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create schools, monitors, students, subjects, grades and observations."""
    op.create_table(
        'schools',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=False),
    )
    op.create_index('ix_schools_id', 'schools', ['id'])
    op.create_index('ix_schools_name', 'schools', ['name'])

    op.create_table(
        'monitors',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('national_id', sa.String(length=32), nullable=False),
        sa.Column('role', sa.String(length=16), nullable=False),
        sa.Column('school_id', sa.Integer(), sa.ForeignKey('schools.id'), nullable=True),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
    )
    op.create_index('ix_monitors_id', 'monitors', ['id'])
    op.create_index('ix_monitors_name', 'monitors', ['name'])
    op.create_index('ix_monitors_national_id', 'monitors', ['national_id'], unique=True)
    op.create_index('ix_monitors_school_id', 'monitors', ['school_id'])

    op.create_table(
        'students',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('number', sa.String(length=32), nullable=False),
        sa.Column('class_label', sa.String(length=32), nullable=False),
        sa.Column('year', sa.Integer(), nullable=False),
        sa.Column('school_id', sa.Integer(), sa.ForeignKey('schools.id'), nullable=False),
        sa.UniqueConstraint('number', 'school_id', name='uq_students_number_school'),
    )
    op.create_index('ix_students_id', 'students', ['id'])
    op.create_index('ix_students_name', 'students', ['name'])
    op.create_index('ix_students_school_id', 'students', ['school_id'])

    op.create_table(
        'subjects',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('school_id', sa.Integer(), sa.ForeignKey('schools.id'), nullable=False),
    )
    op.create_index('ix_subjects_id', 'subjects', ['id'])
    op.create_index('ix_subjects_name', 'subjects', ['name'])
    op.create_index('ix_subjects_school_id', 'subjects', ['school_id'])

    op.create_table(
        'grades',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('student_id', sa.Integer(), sa.ForeignKey('students.id'), nullable=False),
        sa.Column('subject_id', sa.Integer(), sa.ForeignKey('subjects.id'), nullable=False),
        sa.Column('value', sa.Float(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('school_id', sa.Integer(), sa.ForeignKey('schools.id'), nullable=False),
    )
    op.create_index('ix_grades_id', 'grades', ['id'])
    op.create_index('ix_grades_student_id', 'grades', ['student_id'])
    op.create_index('ix_grades_subject_id', 'grades', ['subject_id'])
    op.create_index('ix_grades_school_id', 'grades', ['school_id'])

    op.create_table(
        'observations',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('student_id', sa.Integer(), sa.ForeignKey('students.id'), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('discipline', sa.String(length=255), nullable=False),
        sa.Column('polarity', sa.String(length=16), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('consequence', sa.Text(), nullable=True),
    )
    op.create_index('ix_observations_id', 'observations', ['id'])
    op.create_index('ix_observations_student_id', 'observations', ['student_id'])
    op.create_index('ix_observations_discipline', 'observations', ['discipline'])


def downgrade() -> None:
    """Drop every table, children first."""
    op.drop_table('observations')
    op.drop_table('grades')
    op.drop_table('subjects')
    op.drop_table('students')
    op.drop_table('monitors')
    op.drop_table('schools')
