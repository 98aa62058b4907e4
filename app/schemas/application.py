"""
Pydantic schemas for job applications.
"""
from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field, field_validator

from app.db.models.company_profile import VerificationStatus
from app.db.models.job_application import ApplicationStatus
from app.schemas.common import blank_to_none


class JobApplicationCreate(BaseModel):
    """A job seeker applying to a posting."""
    job_posting_id: int
    job_seeker_id: int
    cover_letter: Optional[str] = None
    
    @field_validator("cover_letter", mode="before")
    @classmethod
    def empty_to_none(cls, v):
        return blank_to_none(v)


class ApplicationStatusUpdate(BaseModel):
    status: ApplicationStatus = Field(..., description="pending, accepted, rejected or withdrawn")


class JobApplicationResponse(BaseModel):
    id: int
    job_posting_id: int
    job_seeker_id: int
    status: ApplicationStatus
    cover_letter: Optional[str] = None
    applied_at: datetime
    updated_at: datetime
    
    class Config:
        from_attributes = True


class JobApplicantDetails(BaseModel):
    """One applicant row on a company's posting view."""
    id: int
    job_seeker_name: str
    job_seeker_email: str
    cover_letter: Optional[str] = None
    status: ApplicationStatus
    applied_at: datetime
    updated_at: datetime


class ApplicationWithDetails(BaseModel):
    """Application joined with posting, company and applicant for the admin view."""
    id: int
    job_title: str
    company_name: str
    company_verification_status: VerificationStatus
    job_seeker_name: str
    job_seeker_email: str
    status: ApplicationStatus
    cover_letter: Optional[str] = None
    applied_at: datetime
    updated_at: datetime
