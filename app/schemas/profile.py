"""
Pydantic schemas for job seeker and company profiles.
"""
from typing import Optional, Literal
from datetime import datetime
from pydantic import BaseModel, Field, field_validator, model_validator

from app.db.models.company_profile import VerificationStatus
from app.schemas.common import blank_to_none, reject_explicit_nulls

JOB_SEEKER_TEXT_FIELDS = ("bio", "skills", "education", "experience", "resume_url")
COMPANY_TEXT_FIELDS = ("description", "website", "location", "industry", "credentials_file_url")


class JobSeekerProfileCreate(BaseModel):
    """Create a job seeker profile for an existing user. Empty strings are stored as null."""
    user_id: int = Field(..., description="Owning user ID")
    bio: Optional[str] = None
    skills: Optional[str] = None
    education: Optional[str] = None
    experience: Optional[str] = None
    resume_url: Optional[str] = None
    
    @field_validator(*JOB_SEEKER_TEXT_FIELDS, mode="before")
    @classmethod
    def empty_to_none(cls, v):
        return blank_to_none(v)


class JobSeekerProfileUpdate(BaseModel):
    """
    Partial update. Omitted fields stay as they are; explicit null or an empty string clears a field.
    """
    bio: Optional[str] = None
    skills: Optional[str] = None
    education: Optional[str] = None
    experience: Optional[str] = None
    resume_url: Optional[str] = None
    
    @field_validator(*JOB_SEEKER_TEXT_FIELDS, mode="before")
    @classmethod
    def empty_to_none(cls, v):
        return blank_to_none(v)


class JobSeekerProfileResponse(BaseModel):
    id: int
    user_id: int
    bio: Optional[str] = None
    skills: Optional[str] = None
    education: Optional[str] = None
    experience: Optional[str] = None
    resume_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    
    class Config:
        from_attributes = True


class CompanyProfileCreate(BaseModel):
    """Create a company profile for an existing user. Empty strings are stored as null."""
    user_id: int = Field(..., description="Owning user ID")
    company_name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    industry: Optional[str] = None
    credentials_file_url: Optional[str] = None
    
    @field_validator(*COMPANY_TEXT_FIELDS, mode="before")
    @classmethod
    def empty_to_none(cls, v):
        return blank_to_none(v)
    
    class Config:
        json_schema_extra = {
            "example": {
                "user_id": 1,
                "company_name": "Acme",
                "description": "Community tech nonprofit",
                "website": "https://acme.example.org",
                "location": "Berlin",
                "industry": "Education"
            }
        }


class CompanyProfileUpdate(BaseModel):
    """Partial update for a company profile. company_name may be omitted but never nulled."""
    company_name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    industry: Optional[str] = None
    credentials_file_url: Optional[str] = None
    
    @field_validator(*COMPANY_TEXT_FIELDS, mode="before")
    @classmethod
    def empty_to_none(cls, v):
        return blank_to_none(v)
    
    @model_validator(mode="after")
    def check_required_not_null(self):
        reject_explicit_nulls(self, ("company_name",))
        return self


class CompanyVerificationUpdate(BaseModel):
    """Administrative verdict on a company. Cannot move a company back to pending."""
    status: Literal["verified", "rejected"] = Field(..., description="verified or rejected")


class CompanyCredentialsUpload(BaseModel):
    credentials_file_url: str = Field(..., min_length=1, description="Location of the uploaded credentials file")


class CompanyProfileResponse(BaseModel):
    id: int
    user_id: int
    company_name: str
    description: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    industry: Optional[str] = None
    credentials_file_url: Optional[str] = None
    verification_status: VerificationStatus
    created_at: datetime
    updated_at: datetime
    
    class Config:
        from_attributes = True
