"""
Shared fixtures: in-memory SQLite database, FastAPI client and small factories.
"""
import os

# Must be set before app modules read their configuration
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.db import models  # noqa: F401  registers tables
from app.db.base import Base
from app.db.session import get_db
from app.db.models.user import UserRole
from app.db.models.job_posting import JobType
from app.schemas.auth import RegisterRequest
from app.schemas.profile import JobSeekerProfileCreate, CompanyProfileCreate
from app.schemas.job import JobPostingCreate
from app.services import user_service, profile_service, job_posting_service


# Setup in-memory SQLite database for testing
TEST_DATABASE_URL = "sqlite:///:memory:"
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


def override_get_db():
    """Override get_db dependency for testing."""
    db = TestSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(scope="function", autouse=True)
def setup_db():
    """Create and drop tables for each test."""
    Base.metadata.create_all(bind=test_engine)
    yield
    Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def db():
    """Provide a database session for tests."""
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def make_user(db):
    """Factory: register a user through the service layer."""
    counter = {"n": 0}

    def _make_user(role=UserRole.JOB_SEEKER, email=None, password="password123",
                   first_name="Test", last_name="User", phone=None):
        counter["n"] += 1
        return user_service.register_user(db, RegisterRequest(
            email=email or f"user{counter['n']}@example.com",
            password=password,
            role=role,
            first_name=first_name,
            last_name=last_name,
            phone=phone,
        ))

    return _make_user


@pytest.fixture
def make_company(db, make_user):
    """Factory: company user plus company profile."""
    def _make_company(company_name="Acme", email=None):
        user = make_user(role=UserRole.COMPANY, email=email)
        return profile_service.create_company_profile(
            db, CompanyProfileCreate(user_id=user.id, company_name=company_name)
        )

    return _make_company


@pytest.fixture
def make_seeker(db, make_user):
    """Factory: job seeker user plus job seeker profile."""
    def _make_seeker(email=None, first_name="Sam", last_name="Seeker"):
        user = make_user(role=UserRole.JOB_SEEKER, email=email, first_name=first_name, last_name=last_name)
        return profile_service.create_job_seeker_profile(db, JobSeekerProfileCreate(user_id=user.id))

    return _make_seeker


@pytest.fixture
def make_posting(db):
    """Factory: active posting for a given company."""
    def _make_posting(company_id, title="Intern", description="Help our team",
                      type=JobType.INTERNSHIP, location=None):
        return job_posting_service.create_job_posting(db, JobPostingCreate(
            company_id=company_id,
            title=title,
            description=description,
            type=type,
            location=location,
        ))

    return _make_posting
