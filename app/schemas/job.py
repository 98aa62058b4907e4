"""
Pydantic schemas for job posting endpoints.
"""
from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field, field_validator, model_validator

from app.core import config
from app.db.models.job_posting import JobType
from app.schemas.common import blank_to_none, reject_explicit_nulls

OPTIONAL_POSTING_FIELDS = ("location", "requirements", "duration", "compensation")


class JobPostingCreate(BaseModel):
    """
    Schema for publishing a new posting.
    
    New postings are always active, so there is no is_active field here.
    """
    company_id: int = Field(..., description="Owning company profile ID")
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    type: JobType = Field(..., description="internship or volunteer")
    location: Optional[str] = None
    requirements: Optional[str] = None
    duration: Optional[str] = Field(None, description='e.g. "3 months", "Summer 2024"')
    compensation: Optional[str] = Field(None, description='e.g. "Unpaid", "Stipend: $500/month"')
    application_deadline: Optional[datetime] = None
    
    @field_validator(*OPTIONAL_POSTING_FIELDS, mode="before")
    @classmethod
    def empty_to_none(cls, v):
        return blank_to_none(v)
    
    class Config:
        json_schema_extra = {
            "example": {
                "company_id": 1,
                "title": "Data Science Intern",
                "description": "Work with our analytics team on real datasets.",
                "type": "internship",
                "location": "Remote",
                "duration": "3 months",
                "compensation": "Stipend: $500/month",
                "application_deadline": "2026-12-01T00:00:00"
            }
        }


class JobPostingUpdate(BaseModel):
    """Schema for updating an existing posting. Only provided fields change."""
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, min_length=1)
    type: Optional[JobType] = None
    location: Optional[str] = None
    requirements: Optional[str] = None
    duration: Optional[str] = None
    compensation: Optional[str] = None
    application_deadline: Optional[datetime] = None
    is_active: Optional[bool] = None
    
    @field_validator(*OPTIONAL_POSTING_FIELDS, mode="before")
    @classmethod
    def empty_to_none(cls, v):
        return blank_to_none(v)
    
    @model_validator(mode="after")
    def check_required_not_null(self):
        reject_explicit_nulls(self, ("title", "description", "type", "is_active"))
        return self


class JobPostingResponse(BaseModel):
    """Schema for job posting response."""
    id: int
    company_id: int
    title: str
    description: str
    type: JobType
    location: Optional[str] = None
    requirements: Optional[str] = None
    duration: Optional[str] = None
    compensation: Optional[str] = None
    application_deadline: Optional[datetime] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime
    
    class Config:
        from_attributes = True


class JobSearchParams(BaseModel):
    """
    Filters for searching active postings. All provided filters combine with AND.
    """
    query: Optional[str] = Field(None, description="Case-insensitive match on title or description")
    type: Optional[JobType] = Field(None, description="Exact job type")
    location: Optional[str] = Field(None, description="Case-insensitive partial location match")
    company_id: Optional[int] = Field(None, description="Exact owning company")
    limit: int = Field(config.SEARCH_DEFAULT_LIMIT, ge=1, le=config.SEARCH_MAX_LIMIT, description="Page size")
    offset: int = Field(0, ge=0, description="Rows to skip")
