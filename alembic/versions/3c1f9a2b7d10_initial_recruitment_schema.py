"""initial recruitment schema

Revision ID: 3c1f9a2b7d10
Revises:
Create Date: 2026-10-16 09:12:44.218305

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3c1f9a2b7d10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _enum(name: str, *values: str) -> sa.Enum:
    return sa.Enum(*values, name=name, native_enum=False, length=32)


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('first_name', sa.String(255), nullable=False),
        sa.Column('last_name', sa.String(255), nullable=False),
        sa.Column('role', _enum('user_role', 'candidate', 'requester', 'admin'), nullable=False),
        sa.Column('department', sa.String(255)),
        sa.Column('phone', sa.String(64)),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_email', 'users', ['email'], unique=True)
    op.create_index('ix_users_role', 'users', ['role'])

    op.create_table(
        'jobs',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('requirements', sa.Text(), nullable=False),
        sa.Column('department', sa.String(255), nullable=False),
        sa.Column('location', sa.String(255)),
        sa.Column('salary_range', sa.String(255)),
        sa.Column('employment_type', sa.String(64), nullable=False),
        sa.Column('status', _enum('job_status', 'draft', 'pending_approval', 'approved', 'published', 'closed'),
                  nullable=False),
        sa.Column('created_by', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('approved_by', sa.Integer(), sa.ForeignKey('users.id')),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.Column('published_at', sa.DateTime()),
        sa.Column('closed_at', sa.DateTime()),
    )
    op.create_index('ix_jobs_id', 'jobs', ['id'])
    op.create_index('ix_jobs_title', 'jobs', ['title'])
    op.create_index('ix_jobs_status', 'jobs', ['status'])
    op.create_index('ix_jobs_created_by', 'jobs', ['created_by'])

    op.create_table(
        'cv_files',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('candidate_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('file_name', sa.String(255), nullable=False),
        sa.Column('file_type', _enum('file_type', 'pdf', 'docx', 'jpg', 'png'), nullable=False),
        sa.Column('file_size', sa.Integer(), nullable=False),
        sa.Column('file_path', sa.String(1024), nullable=False),
        sa.Column('uploaded_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_cv_files_id', 'cv_files', ['id'])
    op.create_index('ix_cv_files_candidate_id', 'cv_files', ['candidate_id'])

    op.create_table(
        'ai_parsed_data',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('cv_file_id', sa.Integer(), sa.ForeignKey('cv_files.id'), nullable=False),
        sa.Column('parsed_data', sa.JSON(), nullable=False),
        sa.Column('processing_status',
                  _enum('processing_status', 'pending', 'processing', 'completed', 'failed'),
                  nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_ai_parsed_data_id', 'ai_parsed_data', ['id'])
    op.create_index('ix_ai_parsed_data_cv_file_id', 'ai_parsed_data', ['cv_file_id'], unique=True)
    op.create_index('ix_ai_parsed_data_processing_status', 'ai_parsed_data', ['processing_status'])

    op.create_table(
        'applications',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('job_id', sa.Integer(), sa.ForeignKey('jobs.id'), nullable=False),
        sa.Column('candidate_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('cv_file_id', sa.Integer(), sa.ForeignKey('cv_files.id'), nullable=False),
        sa.Column('ai_parsed_data_id', sa.Integer(), sa.ForeignKey('ai_parsed_data.id')),
        sa.Column('status', _enum('application_status', 'pending', 'ai_processing', 'shortlisted', 'rejected',
                                  'interview_scheduled', 'interviewed', 'offer_made', 'offer_accepted',
                                  'offer_rejected', 'hired'),
                  nullable=False),
        sa.Column('ai_match_score', sa.Integer()),
        sa.Column('cover_letter', sa.Text()),
        sa.Column('notes', sa.Text()),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_applications_id', 'applications', ['id'])
    op.create_index('ix_applications_job_id', 'applications', ['job_id'])
    op.create_index('ix_applications_candidate_id', 'applications', ['candidate_id'])
    op.create_index('ix_applications_status', 'applications', ['status'])

    op.create_table(
        'interviews',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('application_id', sa.Integer(), sa.ForeignKey('applications.id'), nullable=False),
        sa.Column('interviewer_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('scheduled_at', sa.DateTime(), nullable=False),
        sa.Column('duration_minutes', sa.Integer(), nullable=False),
        sa.Column('location', sa.String(255)),
        sa.Column('meeting_link', sa.String(1024)),
        sa.Column('status', _enum('interview_status', 'scheduled', 'completed', 'cancelled', 'rescheduled'),
                  nullable=False),
        sa.Column('notes', sa.Text()),
        sa.Column('feedback', sa.Text()),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_interviews_id', 'interviews', ['id'])
    op.create_index('ix_interviews_application_id', 'interviews', ['application_id'])
    op.create_index('ix_interviews_interviewer_id', 'interviews', ['interviewer_id'])
    op.create_index('ix_interviews_scheduled_at', 'interviews', ['scheduled_at'])

    op.create_table(
        'notifications',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('type', _enum('notification_type', 'application_status', 'interview_invitation',
                                'job_approval', 'weekly_report'),
                  nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('email_sent', sa.Boolean(), nullable=False),
        sa.Column('read_at', sa.DateTime()),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_notifications_id', 'notifications', ['id'])
    op.create_index('ix_notifications_user_id', 'notifications', ['user_id'])

    op.create_table(
        'reports',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('requester_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('report_type', sa.String(64), nullable=False),
        sa.Column('report_data', sa.JSON(), nullable=False),
        sa.Column('file_path', sa.String(1024)),
        sa.Column('generated_at', sa.DateTime(), nullable=False),
        sa.Column('week_start', sa.DateTime(), nullable=False),
        sa.Column('week_end', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_reports_id', 'reports', ['id'])
    op.create_index('ix_reports_requester_id', 'reports', ['requester_id'])


def downgrade() -> None:
    """Downgrade schema."""
    for table in ('reports', 'notifications', 'interviews', 'applications',
                  'ai_parsed_data', 'cv_files', 'jobs', 'users'):
        op.drop_table(table)
