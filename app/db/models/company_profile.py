from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Enum
from sqlalchemy.orm import relationship
import enum
from app.db.base import Base, utcnow


class VerificationStatus(str, enum.Enum):
    """Administrative trust state of a company."""
    PENDING = "pending"
    VERIFIED = "verified"
    REJECTED = "rejected"


class CompanyProfile(Base):
    """
    Company extension of a User.
    
    Owns job postings; deleting the company removes all of them.
    """
    __tablename__ = "company_profiles"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        index=True,
    )
    company_name = Column(String, nullable=False, index=True)
    description = Column(Text, nullable=True)
    website = Column(String, nullable=True)
    location = Column(String, nullable=True)
    industry = Column(String, nullable=True)
    credentials_file_url = Column(String, nullable=True)
    verification_status = Column(
        Enum(VerificationStatus, name="verification_status", values_callable=lambda e: [m.value for m in e]),
        default=VerificationStatus.PENDING,
        nullable=False,
    )
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, nullable=False)

    user = relationship("User", back_populates="company_profile")
    job_postings = relationship(
        "JobPosting",
        back_populates="company",
        cascade="all, delete",
    )

    def __repr__(self):
        return f"<CompanyProfile(id={self.id}, company_name='{self.company_name}')>"
