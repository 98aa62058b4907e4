"""baseline_schema

Revision ID: 3b1f6c2d9a10
Revises: 
Create Date: 2026-10-18 09:12:41.503112

Creates users, profiles, postings and applications. Skips tables that already
exist so databases bootstrapped with create_all can be stamped forward.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect


# revision identifiers, used by Alembic.
revision: str = '3b1f6c2d9a10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

user_role = sa.Enum('job_seeker', 'company', 'administrator', name='user_role')
verification_status = sa.Enum('pending', 'verified', 'rejected', name='verification_status')
job_type = sa.Enum('internship', 'volunteer', name='job_type')
application_status = sa.Enum('pending', 'accepted', 'rejected', 'withdrawn', name='application_status')


def table_exists(table_name: str) -> bool:
    """Check if a table exists in the database."""
    bind = op.get_bind()
    inspector = inspect(bind)
    return table_name in inspector.get_table_names()


def upgrade() -> None:
    if not table_exists('users'):
        op.create_table('users',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('email', sa.String(), nullable=False),
            sa.Column('password_hash', sa.String(), nullable=False),
            sa.Column('role', user_role, nullable=False),
            sa.Column('first_name', sa.String(), nullable=False),
            sa.Column('last_name', sa.String(), nullable=False),
            sa.Column('phone', sa.String(), nullable=True),
            sa.Column('created_at', sa.DateTime(), nullable=False),
            sa.Column('updated_at', sa.DateTime(), nullable=False),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_users_id'), 'users', ['id'], unique=False)
        op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)

    if not table_exists('job_seeker_profiles'):
        op.create_table('job_seeker_profiles',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('user_id', sa.Integer(), nullable=False),
            sa.Column('bio', sa.Text(), nullable=True),
            sa.Column('skills', sa.Text(), nullable=True),
            sa.Column('education', sa.Text(), nullable=True),
            sa.Column('experience', sa.Text(), nullable=True),
            sa.Column('resume_url', sa.String(), nullable=True),
            sa.Column('created_at', sa.DateTime(), nullable=False),
            sa.Column('updated_at', sa.DateTime(), nullable=False),
            sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_job_seeker_profiles_id'), 'job_seeker_profiles', ['id'], unique=False)
        op.create_index(op.f('ix_job_seeker_profiles_user_id'), 'job_seeker_profiles', ['user_id'], unique=True)

    if not table_exists('company_profiles'):
        op.create_table('company_profiles',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('user_id', sa.Integer(), nullable=False),
            sa.Column('company_name', sa.String(), nullable=False),
            sa.Column('description', sa.Text(), nullable=True),
            sa.Column('website', sa.String(), nullable=True),
            sa.Column('location', sa.String(), nullable=True),
            sa.Column('industry', sa.String(), nullable=True),
            sa.Column('credentials_file_url', sa.String(), nullable=True),
            sa.Column('verification_status', verification_status, nullable=False),
            sa.Column('created_at', sa.DateTime(), nullable=False),
            sa.Column('updated_at', sa.DateTime(), nullable=False),
            sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_company_profiles_id'), 'company_profiles', ['id'], unique=False)
        op.create_index(op.f('ix_company_profiles_user_id'), 'company_profiles', ['user_id'], unique=True)
        op.create_index(op.f('ix_company_profiles_company_name'), 'company_profiles', ['company_name'], unique=False)

    if not table_exists('job_postings'):
        op.create_table('job_postings',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('company_id', sa.Integer(), nullable=False),
            sa.Column('title', sa.String(), nullable=False),
            sa.Column('description', sa.Text(), nullable=False),
            sa.Column('type', job_type, nullable=False),
            sa.Column('location', sa.String(), nullable=True),
            sa.Column('requirements', sa.Text(), nullable=True),
            sa.Column('duration', sa.String(), nullable=True),
            sa.Column('compensation', sa.String(), nullable=True),
            sa.Column('application_deadline', sa.DateTime(), nullable=True),
            sa.Column('is_active', sa.Boolean(), nullable=False),
            sa.Column('created_at', sa.DateTime(), nullable=False),
            sa.Column('updated_at', sa.DateTime(), nullable=False),
            sa.ForeignKeyConstraint(['company_id'], ['company_profiles.id'], ondelete='CASCADE'),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index('idx_job_postings_active_created', 'job_postings', ['is_active', 'created_at'], unique=False)
        op.create_index(op.f('ix_job_postings_id'), 'job_postings', ['id'], unique=False)
        op.create_index(op.f('ix_job_postings_company_id'), 'job_postings', ['company_id'], unique=False)
        op.create_index(op.f('ix_job_postings_title'), 'job_postings', ['title'], unique=False)
        op.create_index(op.f('ix_job_postings_type'), 'job_postings', ['type'], unique=False)
        op.create_index(op.f('ix_job_postings_is_active'), 'job_postings', ['is_active'], unique=False)
        op.create_index(op.f('ix_job_postings_created_at'), 'job_postings', ['created_at'], unique=False)

    if not table_exists('job_applications'):
        op.create_table('job_applications',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('job_posting_id', sa.Integer(), nullable=False),
            sa.Column('job_seeker_id', sa.Integer(), nullable=False),
            sa.Column('status', application_status, nullable=False),
            sa.Column('cover_letter', sa.Text(), nullable=True),
            sa.Column('applied_at', sa.DateTime(), nullable=False),
            sa.Column('updated_at', sa.DateTime(), nullable=False),
            sa.ForeignKeyConstraint(['job_posting_id'], ['job_postings.id'], ondelete='CASCADE'),
            sa.ForeignKeyConstraint(['job_seeker_id'], ['job_seeker_profiles.id'], ondelete='CASCADE'),
            sa.PrimaryKeyConstraint('id'),
            sa.UniqueConstraint('job_posting_id', 'job_seeker_id', name='uq_application_posting_seeker')
        )
        op.create_index(op.f('ix_job_applications_id'), 'job_applications', ['id'], unique=False)
        op.create_index(op.f('ix_job_applications_job_posting_id'), 'job_applications', ['job_posting_id'], unique=False)
        op.create_index(op.f('ix_job_applications_job_seeker_id'), 'job_applications', ['job_seeker_id'], unique=False)
        op.create_index(op.f('ix_job_applications_applied_at'), 'job_applications', ['applied_at'], unique=False)


def downgrade() -> None:
    op.drop_table('job_applications')
    op.drop_table('job_postings')
    op.drop_table('company_profiles')
    op.drop_table('job_seeker_profiles')
    op.drop_table('users')
    bind = op.get_bind()
    for enum_type in (application_status, job_type, verification_status, user_role):
        enum_type.drop(bind, checkfirst=True)
