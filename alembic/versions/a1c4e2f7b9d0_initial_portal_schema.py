"""Initial portal schema: identities, profiles, coursework, submissions, grades, attendance

Revision ID: a1c4e2f7b9d0
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'a1c4e2f7b9d0'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _content_columns():
    return [
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('description', sa.String(), nullable=False),
        sa.Column('target_phase', sa.String(), nullable=False, index=True),
        sa.Column('created_by', sa.String(), sa.ForeignKey('profiles.id', ondelete='SET NULL'), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    """Create every portal table, including the uniqueness rules the services rely on."""
    op.create_table(
        'auth_users',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('email', sa.String(), nullable=False, unique=True, index=True),
        sa.Column('hashed_password', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_table(
        'profiles',
        sa.Column('id', sa.String(), sa.ForeignKey('auth_users.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('email', sa.String(), nullable=False, unique=True, index=True),
        sa.Column('full_name', sa.String(), nullable=False),
        sa.Column('role', sa.String(), nullable=False, index=True),
        sa.Column('phase', sa.String(), nullable=True, index=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_table(
        'assignments',
        *_content_columns(),
        sa.Column('instructions', sa.String(), nullable=True),
        sa.Column('due_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('document_url', sa.String(), nullable=True),
    )
    op.create_table(
        'quizzes',
        *_content_columns(),
        sa.Column('instructions', sa.String(), nullable=True),
        sa.Column('time_limit_minutes', sa.Integer(), nullable=False),
        sa.Column('start_time', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_table(
        'projects',
        *_content_columns(),
        sa.Column('guidelines', sa.String(), nullable=True),
        sa.Column('due_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('is_collaborative', sa.Boolean(), nullable=False),
    )
    op.create_table(
        'submissions',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('assignment_id', sa.String(), sa.ForeignKey('assignments.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('student_id', sa.String(), sa.ForeignKey('profiles.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('github_url', sa.String(), nullable=False),
        sa.Column('video_url', sa.String(), nullable=False),
        sa.Column('submitted_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('status', sa.String(), nullable=False),
        sa.UniqueConstraint('assignment_id', 'student_id', name='uq_submissions_assignment_student'),
    )
    op.create_table(
        'quiz_submissions',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('quiz_id', sa.String(), sa.ForeignKey('quizzes.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('student_id', sa.String(), sa.ForeignKey('profiles.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('github_url', sa.String(), nullable=True),
        sa.Column('video_url', sa.String(), nullable=True),
        sa.Column('started_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('submitted_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('status', sa.String(), nullable=False),
        sa.UniqueConstraint('quiz_id', 'student_id', name='uq_quiz_submissions_quiz_student'),
    )
    op.create_table(
        'project_submissions',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('project_id', sa.String(), sa.ForeignKey('projects.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('student_id', sa.String(), sa.ForeignKey('profiles.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('github_url', sa.String(), nullable=False),
        sa.Column('video_url', sa.String(), nullable=False),
        sa.Column('submitted_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('status', sa.String(), nullable=False),
        sa.UniqueConstraint('project_id', 'student_id', name='uq_project_submissions_project_student'),
    )
    op.create_table(
        'grades',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('student_id', sa.String(), sa.ForeignKey('profiles.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('assignment_id', sa.String(), sa.ForeignKey('assignments.id', ondelete='CASCADE'), nullable=True),
        sa.Column('quiz_id', sa.String(), sa.ForeignKey('quizzes.id', ondelete='CASCADE'), nullable=True),
        sa.Column('project_id', sa.String(), sa.ForeignKey('projects.id', ondelete='CASCADE'), nullable=True),
        sa.Column('submission_id', sa.String(), sa.ForeignKey('submissions.id', ondelete='CASCADE'), nullable=True, unique=True),
        sa.Column('quiz_submission_id', sa.String(), sa.ForeignKey('quiz_submissions.id', ondelete='CASCADE'), nullable=True, unique=True),
        sa.Column('project_submission_id', sa.String(), sa.ForeignKey('project_submissions.id', ondelete='CASCADE'), nullable=True, unique=True),
        sa.Column('grade', sa.Float(), nullable=False),
        sa.Column('max_grade', sa.Float(), nullable=False),
        sa.Column('feedback', sa.String(), nullable=True),
        sa.Column('graded_by', sa.String(), sa.ForeignKey('profiles.id', ondelete='SET NULL'), nullable=True),
        sa.Column('graded_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_table(
        'attendance',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('student_id', sa.String(), sa.ForeignKey('profiles.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('date', sa.Date(), nullable=False, index=True),
        sa.Column('status', sa.String(), nullable=False),
        sa.Column('notes', sa.String(), nullable=True),
        sa.Column('recorded_by', sa.String(), sa.ForeignKey('profiles.id', ondelete='SET NULL'), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint('student_id', 'date', name='uq_attendance_student_date'),
    )


def downgrade() -> None:
    """Drop every portal table, children first."""
    for table in ('attendance', 'grades', 'project_submissions', 'quiz_submissions', 'submissions',
                  'projects', 'quizzes', 'assignments', 'profiles', 'auth_users'):
        op.drop_table(table)
