"""
Application service.

Applying to postings, status changes by the company, and the applicant
listings used by company and admin views.
"""
import logging
from typing import List, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.db.base import utcnow, advance_updated_at
from app.db.models.user import User
from app.db.models.company_profile import CompanyProfile
from app.db.models.job_posting import JobPosting
from app.db.models.job_seeker_profile import JobSeekerProfile
from app.db.models.job_application import JobApplication, ApplicationStatus
from app.schemas.application import (
    JobApplicationCreate,
    JobApplicantDetails,
    ApplicationWithDetails,
)
from app.services.exceptions import (
    MarketplaceError,
    NotFoundError,
    PostingNotFoundError,
    PostingInactiveError,
    SeekerNotFoundError,
    DuplicateApplicationError,
)

logger = logging.getLogger(__name__)


def create_job_application(db: Session, data: JobApplicationCreate) -> JobApplication:
    """
    Submit an application from a job seeker to a posting.
    
    Checks run in this order so the error names the first real problem:
    1. Posting exists
    2. Posting is active
    3. Job seeker profile exists
    4. No earlier application for the same (posting, seeker) pair
    
    The unique constraint on (job_posting_id, job_seeker_id) backs up check 4
    when two requests race.
    
    Raises:
        PostingNotFoundError, PostingInactiveError, SeekerNotFoundError,
        DuplicateApplicationError
    """
    try:
        posting = db.get(JobPosting, data.job_posting_id)
        if not posting:
            raise PostingNotFoundError(data.job_posting_id)
        
        if not posting.is_active:
            raise PostingInactiveError()
        
        seeker = db.get(JobSeekerProfile, data.job_seeker_id)
        if not seeker:
            raise SeekerNotFoundError(data.job_seeker_id)
        
        existing = db.query(JobApplication).filter(
            JobApplication.job_posting_id == data.job_posting_id,
            JobApplication.job_seeker_id == data.job_seeker_id,
        ).first()
        if existing:
            raise DuplicateApplicationError()
        
        now = utcnow()
        application = JobApplication(
            job_posting_id=data.job_posting_id,
            job_seeker_id=data.job_seeker_id,
            cover_letter=data.cover_letter,
            status=ApplicationStatus.PENDING,
            applied_at=now,
            updated_at=now,
        )
        db.add(application)
        db.commit()
        db.refresh(application)
        
        logger.info(
            f"Application created: application_id={application.id}, "
            f"job_posting_id={application.job_posting_id}, job_seeker_id={application.job_seeker_id}"
        )
        return application
        
    except MarketplaceError as e:
        db.rollback()
        logger.warning(
            f"Application rejected: job_posting_id={data.job_posting_id}, "
            f"job_seeker_id={data.job_seeker_id}, reason={e.message}"
        )
        raise
    except IntegrityError:
        db.rollback()
        logger.warning(
            f"Application rejected by unique constraint: job_posting_id={data.job_posting_id}, "
            f"job_seeker_id={data.job_seeker_id}"
        )
        raise DuplicateApplicationError()
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to create application: {e}", exc_info=True)
        raise


def update_application_status(db: Session, application_id: int, status: ApplicationStatus) -> JobApplication:
    """
    Set an application's status. Any of the four statuses is accepted from any state.
    
    Raises:
        NotFoundError: If the application does not exist
    """
    try:
        application = db.get(JobApplication, application_id)
        if not application:
            raise NotFoundError(f"Job application with id {application_id} not found")
        
        previous = application.status
        application.status = ApplicationStatus(status)
        advance_updated_at(application)
        db.commit()
        db.refresh(application)
        
        logger.info(
            f"Application status updated: application_id={application.id}, "
            f"{previous.value} -> {application.status.value}"
        )
        return application
        
    except MarketplaceError:
        db.rollback()
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to update application status: {e}", exc_info=True)
        raise


def get_job_applications_for_job(db: Session, job_posting_id: int) -> List[JobApplication]:
    """All applications for a posting, whatever their status."""
    return (
        db.query(JobApplication)
        .filter(JobApplication.job_posting_id == job_posting_id)
        .order_by(JobApplication.id)
        .all()
    )


def get_user_applications(db: Session, job_seeker_id: int) -> List[JobApplication]:
    """All applications by one job seeker, most recently applied first."""
    return (
        db.query(JobApplication)
        .filter(JobApplication.job_seeker_id == job_seeker_id)
        .order_by(JobApplication.applied_at.desc(), JobApplication.id.desc())
        .all()
    )


def get_job_applications_with_details(db: Session, job_posting_id: int) -> List[JobApplicantDetails]:
    """Applicants of one posting with their name and email."""
    rows = (
        db.query(JobApplication, User)
        .join(JobSeekerProfile, JobApplication.job_seeker_id == JobSeekerProfile.id)
        .join(User, JobSeekerProfile.user_id == User.id)
        .filter(JobApplication.job_posting_id == job_posting_id)
        .order_by(JobApplication.applied_at.desc(), JobApplication.id.desc())
        .all()
    )
    
    return [
        JobApplicantDetails(
            id=application.id,
            job_seeker_name=user.full_name,
            job_seeker_email=user.email,
            cover_letter=application.cover_letter,
            status=application.status,
            applied_at=application.applied_at,
            updated_at=application.updated_at,
        )
        for application, user in rows
    ]


def get_all_applications(db: Session, job_posting_id: Optional[int] = None) -> List[ApplicationWithDetails]:
    """
    Every application joined with posting title, company name and verification
    status, and the applicant's name and email.
    
    Args:
        db: Database session
        job_posting_id: Optionally restrict to one posting
    """
    query = (
        db.query(JobApplication, JobPosting, CompanyProfile, User)
        .join(JobPosting, JobApplication.job_posting_id == JobPosting.id)
        .join(CompanyProfile, JobPosting.company_id == CompanyProfile.id)
        .join(JobSeekerProfile, JobApplication.job_seeker_id == JobSeekerProfile.id)
        .join(User, JobSeekerProfile.user_id == User.id)
    )
    if job_posting_id is not None:
        query = query.filter(JobApplication.job_posting_id == job_posting_id)
    
    rows = query.order_by(JobApplication.applied_at.desc(), JobApplication.id.desc()).all()
    
    return [
        ApplicationWithDetails(
            id=application.id,
            job_title=posting.title,
            company_name=company.company_name,
            company_verification_status=company.verification_status,
            job_seeker_name=user.full_name,
            job_seeker_email=user.email,
            status=application.status,
            cover_letter=application.cover_letter,
            applied_at=application.applied_at,
            updated_at=application.updated_at,
        )
        for application, posting, company, user in rows
    ]
