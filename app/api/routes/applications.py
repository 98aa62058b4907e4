"""
Job application endpoints.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, status, Query
from fastapi.responses import Response
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.schemas.application import (
    JobApplicationCreate,
    ApplicationStatusUpdate,
    JobApplicationResponse,
    ApplicationWithDetails,
)
from app.services import application_service, job_posting_service
from app.services.export_service import export_applications_xlsx, export_filename, XLSX_MEDIA_TYPE

router = APIRouter(prefix="/applications", tags=["Applications"])


# ✅ APPLY TO A POSTING
@router.post("", status_code=status.HTTP_201_CREATED, response_model=JobApplicationResponse)
def create_application(data: JobApplicationCreate, db: Session = Depends(get_db)):
    application = application_service.create_job_application(db, data)
    return JobApplicationResponse.model_validate(application)


# ✅ ADMIN LISTING WITH POSTING / COMPANY / APPLICANT DETAILS
@router.get("", response_model=List[ApplicationWithDetails])
def list_applications(db: Session = Depends(get_db)):
    return application_service.get_all_applications(db)


@router.get("/export.xlsx")
def export_applications(
    job_posting_id: Optional[int] = Query(None, description="Only applications for this posting"),
    db: Session = Depends(get_db)
):
    """Download the applicant listing as an Excel workbook."""
    content = export_applications_xlsx(db, job_posting_id=job_posting_id)
    posting = job_posting_service.get_job_posting(db, job_posting_id) if job_posting_id else None
    filename = export_filename(posting.title if posting else None)
    return Response(
        content=content,
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


# ✅ COMPANY DECISION ON AN APPLICATION
@router.patch("/{application_id}/status", response_model=JobApplicationResponse)
def update_status(application_id: int, data: ApplicationStatusUpdate, db: Session = Depends(get_db)):
    application = application_service.update_application_status(db, application_id, data.status)
    return JobApplicationResponse.model_validate(application)
