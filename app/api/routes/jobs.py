"""
Job posting endpoints.

Provides CRUD for postings, the public search, and per-posting applicant lists.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, status, Query
from sqlalchemy.orm import Session

from app.core import config
from app.db.models.job_posting import JobType
from app.db.session import get_db
from app.schemas.common import DeleteResponse
from app.schemas.job import (
    JobPostingCreate,
    JobPostingUpdate,
    JobPostingResponse,
    JobSearchParams,
)
from app.schemas.application import JobApplicationResponse, JobApplicantDetails
from app.services import job_posting_service, application_service

router = APIRouter(prefix="/jobs", tags=["Jobs"])


@router.post("", status_code=status.HTTP_201_CREATED, response_model=JobPostingResponse)
def create_job(data: JobPostingCreate, db: Session = Depends(get_db)):
    """
    Publish a posting. It starts active regardless of the request body.
    """
    posting = job_posting_service.create_job_posting(db, data)
    return JobPostingResponse.model_validate(posting)


@router.get("", response_model=List[JobPostingResponse])
def list_jobs(db: Session = Depends(get_db)):
    """Every posting including inactive ones (admin view)."""
    return [JobPostingResponse.model_validate(posting) for posting in job_posting_service.get_all_job_postings(db)]


@router.get("/search", response_model=List[JobPostingResponse])
def search_jobs(
    query: Optional[str] = Query(None, description="Search in title and description"),
    type: Optional[JobType] = Query(None, description="internship or volunteer"),
    location: Optional[str] = Query(None, description="Partial location match"),
    company_id: Optional[int] = Query(None, description="Only this company's postings"),
    limit: int = Query(config.SEARCH_DEFAULT_LIMIT, ge=1, le=config.SEARCH_MAX_LIMIT, description="Page size"),
    offset: int = Query(0, ge=0, description="Rows to skip"),
    db: Session = Depends(get_db)
):
    """
    Search active postings, newest first.
    """
    params = JobSearchParams(
        query=query,
        type=type,
        location=location,
        company_id=company_id,
        limit=limit,
        offset=offset,
    )
    return [
        JobPostingResponse.model_validate(posting)
        for posting in job_posting_service.search_job_postings(db, params)
    ]


@router.get("/{job_posting_id}", response_model=Optional[JobPostingResponse])
def get_job(job_posting_id: int, db: Session = Depends(get_db)):
    """Return the posting (even if inactive), or null."""
    posting = job_posting_service.get_job_posting(db, job_posting_id)
    return JobPostingResponse.model_validate(posting) if posting else None


@router.patch("/{job_posting_id}", response_model=JobPostingResponse)
def update_job(job_posting_id: int, data: JobPostingUpdate, db: Session = Depends(get_db)):
    """
    Update only provided fields. Send is_active=false to take a posting out of search.
    """
    posting = job_posting_service.update_job_posting(db, job_posting_id, data)
    return JobPostingResponse.model_validate(posting)


@router.delete("/{job_posting_id}", response_model=DeleteResponse)
def delete_job(job_posting_id: int, db: Session = Depends(get_db)):
    return DeleteResponse(deleted=job_posting_service.delete_job_posting(db, job_posting_id))


@router.get("/{job_posting_id}/applications", response_model=List[JobApplicationResponse])
def list_job_applications(job_posting_id: int, db: Session = Depends(get_db)):
    return [
        JobApplicationResponse.model_validate(application)
        for application in application_service.get_job_applications_for_job(db, job_posting_id)
    ]


@router.get("/{job_posting_id}/applicants", response_model=List[JobApplicantDetails])
def list_job_applicants(job_posting_id: int, db: Session = Depends(get_db)):
    """Applications for a posting with applicant name and email."""
    return application_service.get_job_applications_with_details(db, job_posting_id)
