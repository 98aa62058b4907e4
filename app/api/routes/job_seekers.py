"""
Job seeker profile endpoints.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.schemas.profile import (
    JobSeekerProfileCreate,
    JobSeekerProfileUpdate,
    JobSeekerProfileResponse,
)
from app.schemas.application import JobApplicationResponse
from app.services import profile_service, application_service

router = APIRouter(prefix="/job-seekers", tags=["Job Seekers"])


@router.post("", status_code=status.HTTP_201_CREATED, response_model=JobSeekerProfileResponse)
def create_profile(data: JobSeekerProfileCreate, db: Session = Depends(get_db)):
    profile = profile_service.create_job_seeker_profile(db, data)
    return JobSeekerProfileResponse.model_validate(profile)


@router.patch("/{profile_id}", response_model=JobSeekerProfileResponse)
def update_profile(profile_id: int, data: JobSeekerProfileUpdate, db: Session = Depends(get_db)):
    """
    Partial update. Omitted fields are left alone; null clears a field.
    """
    profile = profile_service.update_job_seeker_profile(db, profile_id, data)
    return JobSeekerProfileResponse.model_validate(profile)


@router.get("/by-user/{user_id}", response_model=Optional[JobSeekerProfileResponse])
def get_profile_for_user(user_id: int, db: Session = Depends(get_db)):
    profile = profile_service.get_job_seeker_profile(db, user_id)
    return JobSeekerProfileResponse.model_validate(profile) if profile else None


@router.get("/{profile_id}/applications", response_model=List[JobApplicationResponse])
def list_applications(profile_id: int, db: Session = Depends(get_db)):
    """Applications submitted by this job seeker, most recent first."""
    return [
        JobApplicationResponse.model_validate(application)
        for application in application_service.get_user_applications(db, profile_id)
    ]
