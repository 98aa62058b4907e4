"""
Company profile endpoints, including verification and credentials.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.schemas.profile import (
    CompanyProfileCreate,
    CompanyProfileUpdate,
    CompanyProfileResponse,
    CompanyVerificationUpdate,
    CompanyCredentialsUpload,
)
from app.schemas.job import JobPostingResponse
from app.services import profile_service, job_posting_service

router = APIRouter(prefix="/companies", tags=["Companies"])


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CompanyProfileResponse)
def create_company(data: CompanyProfileCreate, db: Session = Depends(get_db)):
    profile = profile_service.create_company_profile(db, data)
    return CompanyProfileResponse.model_validate(profile)


@router.patch("/{company_id}", response_model=CompanyProfileResponse)
def update_company(company_id: int, data: CompanyProfileUpdate, db: Session = Depends(get_db)):
    profile = profile_service.update_company_profile(db, company_id, data)
    return CompanyProfileResponse.model_validate(profile)


@router.get("/by-user/{user_id}", response_model=Optional[CompanyProfileResponse])
def get_company_for_user(user_id: int, db: Session = Depends(get_db)):
    profile = profile_service.get_company_profile(db, user_id)
    return CompanyProfileResponse.model_validate(profile) if profile else None


@router.patch("/{company_id}/verification", response_model=CompanyProfileResponse)
def update_verification(company_id: int, data: CompanyVerificationUpdate, db: Session = Depends(get_db)):
    """Mark a company verified or rejected."""
    profile = profile_service.update_company_verification(db, company_id, data.status)
    return CompanyProfileResponse.model_validate(profile)


@router.put("/{company_id}/credentials", response_model=CompanyProfileResponse)
def upload_credentials(company_id: int, data: CompanyCredentialsUpload, db: Session = Depends(get_db)):
    profile = profile_service.upload_company_credentials(db, company_id, data.credentials_file_url)
    return CompanyProfileResponse.model_validate(profile)


@router.get("/{company_id}/jobs", response_model=List[JobPostingResponse])
def list_company_jobs(company_id: int, db: Session = Depends(get_db)):
    """All postings of a company, active or not."""
    return [
        JobPostingResponse.model_validate(posting)
        for posting in job_posting_service.get_company_job_postings(db, company_id)
    ]
