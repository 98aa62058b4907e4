from sqlalchemy import Column, Integer, Text, DateTime, ForeignKey, UniqueConstraint, Enum
from sqlalchemy.orm import relationship
import enum
from app.db.base import Base, utcnow


class ApplicationStatus(str, enum.Enum):
    """Lifecycle of an application. New applications start as pending."""
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    WITHDRAWN = "withdrawn"


class JobApplication(Base):
    __tablename__ = "job_applications"

    id = Column(Integer, primary_key=True, index=True)
    job_posting_id = Column(
        Integer,
        ForeignKey("job_postings.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    job_seeker_id = Column(
        Integer,
        ForeignKey("job_seeker_profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    status = Column(
        Enum(ApplicationStatus, name="application_status", values_callable=lambda e: [m.value for m in e]),
        default=ApplicationStatus.PENDING,
        nullable=False,
    )
    cover_letter = Column(Text, nullable=True)
    applied_at = Column(DateTime, default=utcnow, nullable=False, index=True)
    updated_at = Column(DateTime, default=utcnow, nullable=False)

    job_posting = relationship("JobPosting", back_populates="applications")
    job_seeker = relationship("JobSeekerProfile", back_populates="applications")

    # Authoritative guard against concurrent duplicate applications
    __table_args__ = (
        UniqueConstraint("job_posting_id", "job_seeker_id", name="uq_application_posting_seeker"),
    )

    def __repr__(self):
        return (
            f"<JobApplication(id={self.id}, job_posting_id={self.job_posting_id}, "
            f"job_seeker_id={self.job_seeker_id}, status='{self.status}')>"
        )
