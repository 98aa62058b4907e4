"""
Applicant export service.

Renders the admin/company applicant listing as an Excel workbook download.
"""
import io
import logging
import re
from datetime import datetime, timezone
from typing import Optional
from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.styles import Font
from sqlalchemy.orm import Session

from app.services.application_service import get_all_applications

logger = logging.getLogger(__name__)

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
SHEET_NAME = "Applicants"

EXPORT_COLUMNS = [
    ("id", "Application ID"),
    ("job_title", "Job Title"),
    ("company_name", "Company"),
    ("company_verification_status", "Company Verification"),
    ("job_seeker_name", "Job Seeker Name"),
    ("job_seeker_email", "Job Seeker Email"),
    ("status", "Application Status"),
    ("cover_letter", "Cover Letter"),
    ("applied_at", "Applied Date"),
    ("updated_at", "Updated Date"),
]

# Leading characters a spreadsheet program may evaluate as a formula
FORMULA_PREFIXES = ("=", "+", "-", "@")


def _cell_value(value):
    if value is None:
        return None
    if hasattr(value, "value"):
        return value.value.capitalize()
    if isinstance(value, str):
        return ILLEGAL_CHARACTERS_RE.sub("", value)
    return value


def export_filename(job_title: Optional[str] = None) -> str:
    """
    File name for a download, e.g. ``Data_Intern_applicants_2026-05-01.xlsx``.
    """
    today = datetime.now(timezone.utc).date().isoformat()
    if not job_title:
        return f"applications_{today}.xlsx"
    safe_title = re.sub(r"[^A-Za-z0-9_-]+", "_", job_title).strip("_") or "job"
    return f"{safe_title}_applicants_{today}.xlsx"


def export_applications_xlsx(db: Session, job_posting_id: Optional[int] = None) -> bytes:
    """
    Build an .xlsx workbook of applications with posting, company and applicant details.

    Args:
        db: Database session
        job_posting_id: Restrict the export to one posting

    Returns:
        Workbook bytes with a bold header row on the "Applicants" sheet
    """
    applications = get_all_applications(db, job_posting_id=job_posting_id)

    workbook = Workbook()
    sheet = workbook.active
    sheet.title = SHEET_NAME
    sheet.append([header for _, header in EXPORT_COLUMNS])
    for cell in sheet[1]:
        cell.font = Font(bold=True)

    for application in applications:
        sheet.append([_cell_value(getattr(application, field)) for field, _ in EXPORT_COLUMNS])
        for cell in sheet[sheet.max_row]:
            # Free text from applicants is stored as a literal string, never a formula
            if isinstance(cell.value, str) and cell.value.startswith(FORMULA_PREFIXES):
                cell.data_type = "s"
            elif isinstance(cell.value, datetime):
                cell.number_format = "yyyy-mm-dd hh:mm:ss"

    buffer = io.BytesIO()
    workbook.save(buffer)

    logger.info(f"Applications exported: rows={len(applications)}, job_posting_id={job_posting_id}")
    return buffer.getvalue()
