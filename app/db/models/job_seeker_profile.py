from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from app.db.base import Base, utcnow


class JobSeekerProfile(Base):
    """
    Job seeker extension of a User.
    
    One per user. Deleting the profile removes every application it submitted.
    """
    __tablename__ = "job_seeker_profiles"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        index=True,
    )
    bio = Column(Text, nullable=True)
    skills = Column(Text, nullable=True)  # free text or JSON-encoded list, stored as given
    education = Column(Text, nullable=True)
    experience = Column(Text, nullable=True)
    resume_url = Column(String, nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, nullable=False)

    user = relationship("User", back_populates="job_seeker_profile")
    applications = relationship(
        "JobApplication",
        back_populates="job_seeker",
        cascade="all, delete",
    )

    def __repr__(self):
        return f"<JobSeekerProfile(id={self.id}, user_id={self.user_id})>"
