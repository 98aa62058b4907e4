"""
Unit tests for job seeker and company profiles.
"""
import pytest
from pydantic import ValidationError

from app.db.models.user import UserRole
from app.db.models.company_profile import VerificationStatus
from app.schemas.profile import (
    JobSeekerProfileCreate,
    JobSeekerProfileUpdate,
    CompanyProfileCreate,
    CompanyProfileUpdate,
    CompanyVerificationUpdate,
)
from app.services import profile_service
from app.services.exceptions import (
    NotFoundError,
    ForeignKeyViolationError,
    DuplicateProfileError,
)


# ============================================
# JOB SEEKER PROFILES
# ============================================

def test_create_job_seeker_profile(db, make_user):
    user = make_user()
    
    profile = profile_service.create_job_seeker_profile(db, JobSeekerProfileCreate(
        user_id=user.id,
        bio="Curious student",
        skills='["python", "sql"]',
        education="BSc",
        experience="",
        resume_url="https://example.com/cv.pdf",
    ))
    
    assert profile.id is not None
    assert profile.user_id == user.id
    assert profile.bio == "Curious student"
    assert profile.skills == '["python", "sql"]'
    assert profile.experience is None  # empty string normalized
    assert profile.resume_url == "https://example.com/cv.pdf"


def test_create_job_seeker_profile_defaults_to_nulls(db, make_user):
    user = make_user()
    profile = profile_service.create_job_seeker_profile(db, JobSeekerProfileCreate(user_id=user.id))
    
    assert profile.bio is None
    assert profile.skills is None
    assert profile.education is None
    assert profile.experience is None
    assert profile.resume_url is None


def test_create_job_seeker_profile_unknown_user(db):
    with pytest.raises(ForeignKeyViolationError):
        profile_service.create_job_seeker_profile(db, JobSeekerProfileCreate(user_id=999999))


def test_create_second_job_seeker_profile_rejected(db, make_user):
    user = make_user()
    profile_service.create_job_seeker_profile(db, JobSeekerProfileCreate(user_id=user.id))
    
    with pytest.raises(DuplicateProfileError):
        profile_service.create_job_seeker_profile(db, JobSeekerProfileCreate(user_id=user.id, bio="again"))


def test_update_job_seeker_profile_partial(db, make_user):
    user = make_user()
    profile = profile_service.create_job_seeker_profile(db, JobSeekerProfileCreate(
        user_id=user.id, bio="Old bio", skills="python", education="BSc",
    ))
    before = profile.updated_at
    
    updated = profile_service.update_job_seeker_profile(
        db, profile.id, JobSeekerProfileUpdate(bio="New bio", education=None)
    )
    
    assert updated.bio == "New bio"
    assert updated.education is None  # explicit null clears
    assert updated.skills == "python"  # omitted stays
    assert updated.updated_at > before


def test_update_job_seeker_profile_empty_request_still_touches(db, make_user):
    user = make_user()
    profile = profile_service.create_job_seeker_profile(db, JobSeekerProfileCreate(user_id=user.id, bio="Bio"))
    before = profile.updated_at
    
    updated = profile_service.update_job_seeker_profile(db, profile.id, JobSeekerProfileUpdate())
    
    assert updated.bio == "Bio"
    assert updated.updated_at > before


def test_update_job_seeker_profile_blank_text_clears_field(db, make_user):
    user = make_user()
    profile = profile_service.create_job_seeker_profile(db, JobSeekerProfileCreate(user_id=user.id, skills="python"))
    
    update = JobSeekerProfileUpdate(skills="", bio="")
    assert update.model_dump(exclude_unset=True) == {"skills": None, "bio": None}
    
    updated = profile_service.update_job_seeker_profile(db, profile.id, update)
    assert updated.skills is None


def test_update_job_seeker_profile_not_found(db):
    with pytest.raises(NotFoundError):
        profile_service.update_job_seeker_profile(db, 999999, JobSeekerProfileUpdate(bio="x"))


def test_get_job_seeker_profile(db, make_user):
    user = make_user()
    profile = profile_service.create_job_seeker_profile(db, JobSeekerProfileCreate(user_id=user.id))
    
    assert profile_service.get_job_seeker_profile(db, user.id).id == profile.id
    assert profile_service.get_job_seeker_profile(db, 999999) is None


# ============================================
# COMPANY PROFILES
# ============================================

def test_create_company_profile(db, make_user):
    user = make_user(role=UserRole.COMPANY)
    
    company = profile_service.create_company_profile(db, CompanyProfileCreate(
        user_id=user.id,
        company_name="Acme",
        website="",
        location="Berlin",
    ))
    
    assert company.company_name == "Acme"
    assert company.website is None
    assert company.location == "Berlin"
    assert company.credentials_file_url is None
    assert company.verification_status == VerificationStatus.PENDING


def test_create_company_profile_requires_name():
    with pytest.raises(ValidationError):
        CompanyProfileCreate(user_id=1, company_name="")


def test_create_company_profile_unknown_user(db):
    with pytest.raises(ForeignKeyViolationError):
        profile_service.create_company_profile(db, CompanyProfileCreate(user_id=999999, company_name="Ghost"))


def test_update_company_profile_partial(db, make_company):
    company = make_company()
    profile_service.update_company_profile(db, company.id, CompanyProfileUpdate(industry="Education", location="Paris"))
    before = company.updated_at
    
    updated = profile_service.update_company_profile(db, company.id, CompanyProfileUpdate(company_name="Acme Labs"))
    
    assert updated.company_name == "Acme Labs"
    assert updated.industry == "Education"
    assert updated.location == "Paris"
    assert updated.updated_at > before


def test_update_company_profile_blank_text_clears_field(db, make_company):
    company = make_company()
    profile_service.update_company_profile(db, company.id, CompanyProfileUpdate(website="https://acme.example.org"))
    
    updated = profile_service.update_company_profile(db, company.id, CompanyProfileUpdate(website=""))
    
    assert updated.website is None


def test_update_company_profile_name_cannot_be_nulled():
    with pytest.raises(ValidationError):
        CompanyProfileUpdate(company_name=None)


def test_update_company_profile_not_found(db):
    with pytest.raises(NotFoundError):
        profile_service.update_company_profile(db, 999999, CompanyProfileUpdate(industry="x"))


def test_get_company_profile(db, make_company):
    company = make_company()
    assert profile_service.get_company_profile(db, company.user_id).id == company.id
    assert profile_service.get_company_profile(db, 999999) is None


def test_update_company_verification(db, make_company):
    company = make_company()
    before = company.updated_at
    
    verified = profile_service.update_company_verification(db, company.id, "verified")
    assert verified.verification_status == VerificationStatus.VERIFIED
    assert verified.updated_at > before
    
    rejected = profile_service.update_company_verification(db, company.id, "rejected")
    assert rejected.verification_status == VerificationStatus.REJECTED


def test_update_company_verification_cannot_reset_to_pending(db, make_company):
    company = make_company()
    
    with pytest.raises(ValueError):
        profile_service.update_company_verification(db, company.id, "pending")
    with pytest.raises(ValidationError):
        CompanyVerificationUpdate(status="pending")


def test_update_company_verification_not_found(db):
    with pytest.raises(NotFoundError):
        profile_service.update_company_verification(db, 999999, "verified")


def test_upload_company_credentials(db, make_company):
    company = make_company()
    before = company.updated_at
    
    updated = profile_service.upload_company_credentials(db, company.id, "https://files.example.com/acme.pdf")
    
    assert updated.credentials_file_url == "https://files.example.com/acme.pdf"
    assert updated.updated_at > before


def test_upload_company_credentials_not_found(db):
    with pytest.raises(NotFoundError):
        profile_service.upload_company_credentials(db, 999999, "https://files.example.com/x.pdf")
