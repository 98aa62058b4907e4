"""
JobPosting model for internship and volunteer opportunities published by a company.
"""
from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean, ForeignKey, Index, Enum
from sqlalchemy.orm import relationship
import enum
from app.db.base import Base, utcnow


class JobType(str, enum.Enum):
    """Kinds of opportunity a posting can offer."""
    INTERNSHIP = "internship"
    VOLUNTEER = "volunteer"


class JobPosting(Base):
    """
    JobPosting model.
    
    Inactive postings are hidden from search but stay readable and editable.
    """
    __tablename__ = "job_postings"

    id = Column(Integer, primary_key=True, index=True)
    company_id = Column(
        Integer,
        ForeignKey("company_profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    
    # Posting details
    title = Column(String, nullable=False, index=True)
    description = Column(Text, nullable=False)
    type = Column(Enum(JobType, name="job_type", values_callable=lambda e: [m.value for m in e]), nullable=False, index=True)
    location = Column(String, nullable=True)
    requirements = Column(Text, nullable=True)
    duration = Column(String, nullable=True)  # e.g. "3 months", "Summer 2024"
    compensation = Column(String, nullable=True)  # e.g. "Unpaid", "Stipend: $500/month"
    application_deadline = Column(DateTime, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False, index=True)
    
    # Timestamps
    created_at = Column(DateTime, default=utcnow, nullable=False, index=True)
    updated_at = Column(DateTime, default=utcnow, nullable=False)
    
    # Relationships
    company = relationship("CompanyProfile", back_populates="job_postings")
    applications = relationship(
        "JobApplication",
        back_populates="job_posting",
        cascade="all, delete",
    )
    
    # Indexes
    __table_args__ = (
        Index("idx_job_postings_active_created", "is_active", "created_at"),
    )
    
    def __repr__(self):
        return f"<JobPosting(id={self.id}, company_id={self.company_id}, title='{self.title}')>"
