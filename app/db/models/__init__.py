"""
Database models module.

This module imports all database models to ensure they are registered with SQLAlchemy's Base.metadata
before table creation.

All models must be imported here to be included in database migrations and table creation.
"""
from app.db.models.user import User, UserRole
from app.db.models.job_seeker_profile import JobSeekerProfile
from app.db.models.company_profile import CompanyProfile, VerificationStatus
from app.db.models.job_posting import JobPosting, JobType
from app.db.models.job_application import JobApplication, ApplicationStatus

__all__ = [
    "User",
    "UserRole",
    "JobSeekerProfile",
    "CompanyProfile",
    "VerificationStatus",
    "JobPosting",
    "JobType",
    "JobApplication",
    "ApplicationStatus",
]
