"""
Profile service for job seeker and company profiles.

Handles creation against an existing user, partial updates and company
verification/credentials.
"""
import logging
from typing import Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.db.base import utcnow, advance_updated_at
from app.db.models.user import User
from app.db.models.job_seeker_profile import JobSeekerProfile
from app.db.models.company_profile import CompanyProfile, VerificationStatus
from app.schemas.profile import (
    JobSeekerProfileCreate,
    JobSeekerProfileUpdate,
    CompanyProfileCreate,
    CompanyProfileUpdate,
)
from app.services.exceptions import (
    MarketplaceError,
    NotFoundError,
    ForeignKeyViolationError,
    DuplicateProfileError,
)

logger = logging.getLogger(__name__)


def _require_user(db: Session, user_id: int) -> User:
    user = db.get(User, user_id)
    if not user:
        raise ForeignKeyViolationError(f"User with id {user_id} does not exist")
    return user


def _apply_partial_update(instance, update_data: dict) -> None:
    for field, value in update_data.items():
        setattr(instance, field, value)
    advance_updated_at(instance)


# ============================================
# JOB SEEKER PROFILES
# ============================================

def create_job_seeker_profile(db: Session, data: JobSeekerProfileCreate) -> JobSeekerProfile:
    """
    Create the job seeker profile of an existing user.
    
    Raises:
        ForeignKeyViolationError: If user_id does not reference a user
        DuplicateProfileError: If the user already has a job seeker profile
    """
    try:
        _require_user(db, data.user_id)
        
        existing = db.query(JobSeekerProfile).filter(JobSeekerProfile.user_id == data.user_id).first()
        if existing:
            raise DuplicateProfileError(f"User {data.user_id} already has a job seeker profile")
        
        now = utcnow()
        profile = JobSeekerProfile(**data.model_dump(), created_at=now, updated_at=now)
        db.add(profile)
        db.commit()
        db.refresh(profile)
        
        logger.info(f"Job seeker profile created: profile_id={profile.id}, user_id={profile.user_id}")
        return profile
        
    except MarketplaceError as e:
        db.rollback()
        logger.warning(f"Job seeker profile creation rejected: {e.message}")
        raise
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Job seeker profile creation violated a constraint: {e.orig}")
        raise ForeignKeyViolationError(f"Could not create profile for user {data.user_id}")
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to create job seeker profile: {e}", exc_info=True)
        raise


def update_job_seeker_profile(db: Session, profile_id: int, data: JobSeekerProfileUpdate) -> JobSeekerProfile:
    """
    Update only the fields present in the request; explicit nulls clear a field.
    
    Raises:
        NotFoundError: If the profile does not exist
    """
    try:
        profile = db.get(JobSeekerProfile, profile_id)
        if not profile:
            raise NotFoundError(f"Job seeker profile with id {profile_id} not found")
        
        _apply_partial_update(profile, data.model_dump(exclude_unset=True))
        db.commit()
        db.refresh(profile)
        
        logger.info(f"Job seeker profile updated: profile_id={profile.id}")
        return profile
        
    except MarketplaceError:
        db.rollback()
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to update job seeker profile: {e}", exc_info=True)
        raise


def get_job_seeker_profile(db: Session, user_id: int) -> Optional[JobSeekerProfile]:
    """Return the job seeker profile owned by user_id, or None."""
    return db.query(JobSeekerProfile).filter(JobSeekerProfile.user_id == user_id).first()


# ============================================
# COMPANY PROFILES
# ============================================

def create_company_profile(db: Session, data: CompanyProfileCreate) -> CompanyProfile:
    """
    Create the company profile of an existing user. Verification starts as pending.
    
    Raises:
        ForeignKeyViolationError: If user_id does not reference a user
        DuplicateProfileError: If the user already has a company profile
    """
    try:
        _require_user(db, data.user_id)
        
        existing = db.query(CompanyProfile).filter(CompanyProfile.user_id == data.user_id).first()
        if existing:
            raise DuplicateProfileError(f"User {data.user_id} already has a company profile")
        
        now = utcnow()
        profile = CompanyProfile(
            **data.model_dump(),
            verification_status=VerificationStatus.PENDING,
            created_at=now,
            updated_at=now,
        )
        db.add(profile)
        db.commit()
        db.refresh(profile)
        
        logger.info(f"Company profile created: company_id={profile.id}, user_id={profile.user_id}")
        return profile
        
    except MarketplaceError as e:
        db.rollback()
        logger.warning(f"Company profile creation rejected: {e.message}")
        raise
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Company profile creation violated a constraint: {e.orig}")
        raise ForeignKeyViolationError(f"Could not create company profile for user {data.user_id}")
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to create company profile: {e}", exc_info=True)
        raise


def update_company_profile(db: Session, company_id: int, data: CompanyProfileUpdate) -> CompanyProfile:
    """
    Partial update of a company profile.
    
    Raises:
        NotFoundError: If the profile does not exist
    """
    try:
        profile = db.get(CompanyProfile, company_id)
        if not profile:
            raise NotFoundError(f"Company profile with id {company_id} not found")
        
        _apply_partial_update(profile, data.model_dump(exclude_unset=True))
        db.commit()
        db.refresh(profile)
        
        logger.info(f"Company profile updated: company_id={profile.id}")
        return profile
        
    except MarketplaceError:
        db.rollback()
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to update company profile: {e}", exc_info=True)
        raise


def get_company_profile(db: Session, user_id: int) -> Optional[CompanyProfile]:
    """Return the company profile owned by user_id, or None."""
    return db.query(CompanyProfile).filter(CompanyProfile.user_id == user_id).first()


def update_company_verification(db: Session, company_id: int, status: str) -> CompanyProfile:
    """
    Record an administrator's verdict on a company.
    
    Args:
        db: Database session
        company_id: Company profile ID
        status: "verified" or "rejected"
        
    Raises:
        ValueError: If status would reset the company to pending
        NotFoundError: If the profile does not exist
    """
    new_status = VerificationStatus(status)
    if new_status == VerificationStatus.PENDING:
        raise ValueError("Status must be either 'verified' or 'rejected'")
    
    try:
        profile = db.get(CompanyProfile, company_id)
        if not profile:
            raise NotFoundError("Company profile not found")
        
        profile.verification_status = new_status
        advance_updated_at(profile)
        db.commit()
        db.refresh(profile)
        
        logger.info(f"Company verification updated: company_id={profile.id}, status={new_status.value}")
        return profile
        
    except MarketplaceError:
        db.rollback()
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to update company verification: {e}", exc_info=True)
        raise


def upload_company_credentials(db: Session, company_id: int, credentials_file_url: str) -> CompanyProfile:
    """
    Attach the location of an uploaded credentials document to a company.
    
    Raises:
        NotFoundError: If the profile does not exist
    """
    try:
        profile = db.get(CompanyProfile, company_id)
        if not profile:
            raise NotFoundError("Company profile not found")
        
        profile.credentials_file_url = credentials_file_url
        advance_updated_at(profile)
        db.commit()
        db.refresh(profile)
        
        logger.info(f"Company credentials uploaded: company_id={profile.id}")
        return profile
        
    except MarketplaceError:
        db.rollback()
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to upload company credentials: {e}", exc_info=True)
        raise
