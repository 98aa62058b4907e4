"""
Job posting service.

CRUD for postings owned by a company plus the public search over active postings.
"""
import logging
from typing import List, Optional
from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.db.base import utcnow, advance_updated_at
from app.db.models.company_profile import CompanyProfile
from app.db.models.job_posting import JobPosting
from app.schemas.job import JobPostingCreate, JobPostingUpdate, JobSearchParams
from app.services.exceptions import MarketplaceError, NotFoundError

logger = logging.getLogger(__name__)


def create_job_posting(db: Session, data: JobPostingCreate) -> JobPosting:
    """
    Publish a posting for an existing company. New postings are always active.
    
    Raises:
        NotFoundError: If the company does not exist
    """
    try:
        company = db.get(CompanyProfile, data.company_id)
        if not company:
            raise NotFoundError(f"Company with id {data.company_id} not found")
        
        now = utcnow()
        posting = JobPosting(
            **data.model_dump(),
            is_active=True,
            created_at=now,
            updated_at=now,
        )
        db.add(posting)
        db.commit()
        db.refresh(posting)
        
        logger.info(f"Job posting created: job_posting_id={posting.id}, company_id={posting.company_id}")
        return posting
        
    except MarketplaceError as e:
        db.rollback()
        logger.warning(f"Job posting creation rejected: {e.message}")
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to create job posting: {e}", exc_info=True)
        raise


def update_job_posting(db: Session, job_posting_id: int, data: JobPostingUpdate) -> JobPosting:
    """
    Update only the provided fields, including is_active.
    
    Raises:
        NotFoundError: If the posting does not exist
    """
    try:
        posting = db.get(JobPosting, job_posting_id)
        if not posting:
            raise NotFoundError(f"Job posting with id {job_posting_id} not found")
        
        update_data = data.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            setattr(posting, field, value)
        advance_updated_at(posting)
        
        db.commit()
        db.refresh(posting)
        
        logger.info(f"Job posting updated: job_posting_id={posting.id}, fields={sorted(update_data)}")
        return posting
        
    except MarketplaceError:
        db.rollback()
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to update job posting: {e}", exc_info=True)
        raise


def delete_job_posting(db: Session, job_posting_id: int) -> bool:
    """
    Delete a posting and its applications.
    
    Returns:
        True if a posting was removed, False if it did not exist
    """
    try:
        posting = db.get(JobPosting, job_posting_id)
        if not posting:
            return False
        
        db.delete(posting)
        db.commit()
        
        logger.info(f"Job posting deleted: job_posting_id={job_posting_id}")
        return True
        
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to delete job posting {job_posting_id}: {e}", exc_info=True)
        raise


def get_job_posting(db: Session, job_posting_id: int) -> Optional[JobPosting]:
    return db.get(JobPosting, job_posting_id)


def get_all_job_postings(db: Session) -> List[JobPosting]:
    return db.query(JobPosting).order_by(JobPosting.id).all()


def get_company_job_postings(db: Session, company_id: int) -> List[JobPosting]:
    return (
        db.query(JobPosting)
        .filter(JobPosting.company_id == company_id)
        .order_by(JobPosting.id)
        .all()
    )


def search_job_postings(db: Session, params: JobSearchParams) -> List[JobPosting]:
    """
    Search active postings.
    
    query matches title or description (case-insensitive substring), type and
    company_id are exact, location is a case-insensitive substring. Results are
    newest first and paginated with limit/offset.
    """
    query = db.query(JobPosting).filter(JobPosting.is_active.is_(True))
    
    if params.query:
        search_term = f"%{params.query}%"
        query = query.filter(
            or_(
                JobPosting.title.ilike(search_term),
                JobPosting.description.ilike(search_term)
            )
        )
    
    if params.type:
        query = query.filter(JobPosting.type == params.type)
    
    if params.location:
        query = query.filter(JobPosting.location.ilike(f"%{params.location}%"))
    
    if params.company_id is not None:
        query = query.filter(JobPosting.company_id == params.company_id)
    
    results = (
        query.order_by(JobPosting.created_at.desc(), JobPosting.id.desc())
        .offset(params.offset)
        .limit(params.limit)
        .all()
    )
    
    logger.debug(
        f"Job search: query={params.query!r}, type={params.type}, location={params.location!r}, "
        f"company_id={params.company_id}, limit={params.limit}, offset={params.offset}, hits={len(results)}"
    )
    return results
