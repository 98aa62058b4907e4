"""
Unit tests for job posting CRUD.
"""
from datetime import datetime

import pytest
from pydantic import ValidationError

from app.db.models.job_posting import JobPosting, JobType
from app.db.models.job_application import JobApplication
from app.schemas.job import JobPostingCreate, JobPostingUpdate
from app.schemas.application import JobApplicationCreate
from app.services import job_posting_service, application_service
from app.services.exceptions import NotFoundError


def test_create_job_posting(db, make_company):
    company = make_company()
    deadline = datetime(2026, 12, 1, 0, 0)
    
    posting = job_posting_service.create_job_posting(db, JobPostingCreate(
        company_id=company.id,
        title="Data Science Intern",
        description="Work with real datasets",
        type=JobType.INTERNSHIP,
        location="Remote",
        duration="3 months",
        compensation="Stipend: $500/month",
        application_deadline=deadline,
    ))
    
    assert posting.id is not None
    assert posting.company_id == company.id
    assert posting.type == JobType.INTERNSHIP
    assert posting.location == "Remote"
    assert posting.requirements is None
    assert posting.application_deadline == deadline
    assert posting.is_active is True


def test_create_job_posting_ignores_is_active_from_caller(db, make_company):
    company = make_company()
    
    data = JobPostingCreate(**{
        "company_id": company.id,
        "title": "Beach cleanup",
        "description": "Saturday mornings",
        "type": "volunteer",
        "is_active": False,
    })
    posting = job_posting_service.create_job_posting(db, data)
    
    assert posting.is_active is True


def test_create_job_posting_unknown_company(db):
    with pytest.raises(NotFoundError):
        job_posting_service.create_job_posting(db, JobPostingCreate(
            company_id=999999, title="Intern", description="x", type=JobType.INTERNSHIP,
        ))


def test_create_job_posting_requires_title_and_description():
    with pytest.raises(ValidationError):
        JobPostingCreate(company_id=1, title="", description="x", type="internship")
    with pytest.raises(ValidationError):
        JobPostingCreate(company_id=1, title="x", description="", type="internship")
    with pytest.raises(ValidationError):
        JobPostingCreate(company_id=1, title="x", description="x", type="full_time")


def test_update_job_posting_partial(db, make_company):
    company = make_company()
    posting = job_posting_service.create_job_posting(db, JobPostingCreate(
        company_id=company.id,
        title="Intern",
        description="Original",
        type=JobType.INTERNSHIP,
        location="Berlin",
        compensation="Unpaid",
    ))
    before = posting.updated_at
    
    updated = job_posting_service.update_job_posting(
        db, posting.id, JobPostingUpdate(title="Senior Intern", compensation=None)
    )
    
    assert updated.title == "Senior Intern"
    assert updated.compensation is None
    assert updated.description == "Original"
    assert updated.location == "Berlin"
    assert updated.type == JobType.INTERNSHIP
    assert updated.is_active is True
    assert updated.updated_at > before


def test_update_job_posting_deactivate(db, make_company, make_posting):
    posting = make_posting(make_company().id)
    before = posting.updated_at
    
    updated = job_posting_service.update_job_posting(db, posting.id, JobPostingUpdate(is_active=False))
    
    assert updated.is_active is False
    assert updated.title == "Intern"
    assert updated.updated_at > before


def test_update_job_posting_blank_text_clears_field(db, make_company, make_posting):
    posting = make_posting(make_company().id, location="Berlin")
    
    updated = job_posting_service.update_job_posting(db, posting.id, JobPostingUpdate(location=""))
    
    assert updated.location is None


def test_update_job_posting_rejects_null_required_fields():
    for field in ("title", "description", "type", "is_active"):
        with pytest.raises(ValidationError):
            JobPostingUpdate(**{field: None})


def test_update_job_posting_not_found(db):
    with pytest.raises(NotFoundError):
        job_posting_service.update_job_posting(db, 999999, JobPostingUpdate(title="x"))


def test_delete_job_posting_removes_applications(db, make_company, make_seeker, make_posting):
    posting = make_posting(make_company().id)
    other = make_posting(posting.company_id, title="Other")
    seeker = make_seeker()
    application_service.create_job_application(db, JobApplicationCreate(job_posting_id=posting.id, job_seeker_id=seeker.id))
    application_service.create_job_application(db, JobApplicationCreate(job_posting_id=other.id, job_seeker_id=seeker.id))
    
    assert job_posting_service.delete_job_posting(db, posting.id) is True
    
    assert job_posting_service.get_job_posting(db, posting.id) is None
    assert db.query(JobApplication).filter(JobApplication.job_posting_id == posting.id).count() == 0
    assert db.query(JobApplication).filter(JobApplication.job_posting_id == other.id).count() == 1


def test_delete_job_posting_missing_returns_false(db):
    assert job_posting_service.delete_job_posting(db, 999999) is False


def test_get_job_posting(db, make_company, make_posting):
    posting = make_posting(make_company().id)
    assert job_posting_service.get_job_posting(db, posting.id).title == "Intern"
    assert job_posting_service.get_job_posting(db, 999999) is None


def test_get_all_job_postings_includes_inactive(db, make_company, make_posting):
    company = make_company()
    active = make_posting(company.id, title="Active")
    inactive = make_posting(company.id, title="Inactive")
    job_posting_service.update_job_posting(db, inactive.id, JobPostingUpdate(is_active=False))
    
    postings = job_posting_service.get_all_job_postings(db)
    
    assert {p.id for p in postings} == {active.id, inactive.id}


def test_get_company_job_postings(db, make_company, make_posting):
    acme = make_company("Acme")
    globex = make_company("Globex")
    make_posting(acme.id, title="A1")
    make_posting(acme.id, title="A2")
    make_posting(globex.id, title="G1")
    
    titles = [p.title for p in job_posting_service.get_company_job_postings(db, acme.id)]
    
    assert titles == ["A1", "A2"]
    assert job_posting_service.get_company_job_postings(db, 999999) == []
    assert db.query(JobPosting).count() == 3
