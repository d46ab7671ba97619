"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- FastAPI test client
- An isolated upload directory
- Sample employee/job payloads
"""

import os
import shutil
import tempfile
from pathlib import Path

# Tests own the schema; skip the background Postgres connect loop
os.environ.setdefault("DB_CONNECT_ON_STARTUP", "false")
os.environ.setdefault("JSON_LOGS", "false")
# Storage and the /uploads mount are both built from UPLOAD_DIR at import
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="onboarding-test-uploads-")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db
from app.core.storage import storage
from app.models import Employee, JobPosting  # noqa: F401  register tables
from main import app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64
PDF_BYTES = b"%PDF-1.4\nFake PDF content for testing"


@pytest.fixture
def db_session():
    """
    Create a fresh database session for each test.
    Tables are dropped after the test completes.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


def _empty(directory: Path) -> None:
    if not directory.exists():
        return
    for entry in directory.iterdir():
        if entry.is_dir():
            shutil.rmtree(entry)
        else:
            entry.unlink()


@pytest.fixture
def upload_dir():
    """
    The upload directory shared by the storage singleton and the /uploads
    mount, emptied before and after each test.
    """
    directory = Path(storage.base_dir)
    directory.mkdir(parents=True, exist_ok=True)
    _empty(directory)
    yield directory
    _empty(directory)


@pytest.fixture
def client(db_session, upload_dir):
    """
    FastAPI test client with overridden database dependency.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def employee_form():
    """Scalar fields of a fresher's onboarding form"""
    return {
        "emp_name": "Priya Sharma",
        "emp_email": "priya.sharma@example.com",
        "emp_dob": "1996-04-12",
        "emp_mobile": "9876543210",
        "emp_address": "12 MG Road",
        "emp_city": "Hyderabad",
        "emp_state": "Telangana",
        "emp_zipcode": "500001",
        "emp_bank": "State Bank of India",
        "emp_account": "123456789012",
        "emp_ifsc": "SBIN0000123",
        "emp_bank_branch": "Ameerpet",
        "emp_job_role": "Backend Developer",
        "emp_department": "Engineering",
        "emp_experience_status": "Fresher",
        "emp_company_name": "",
        "emp_years_of_experience": "",
        "emp_joining_date": "2024-07-01",
        "ssc_school": "Kendriya Vidyalaya",
        "ssc_year": "2012",
        "ssc_grade": "9.2",
        "inter_college": "Narayana Junior College",
        "inter_year": "2014",
        "inter_grade": "94%",
        "inter_branch": "MPC",
        "grad_college": "JNTU",
        "grad_year": "2018",
        "grad_grade": "8.1",
        "grad_degree": "B.Tech",
        "grad_branch": "CSE",
        "emp_terms_accepted": "true",
    }


@pytest.fixture
def profile_pic():
    return {"emp_profile_pic": ("photo.png", PNG_BYTES, "image/png")}


@pytest.fixture
def experience_documents():
    """The four documents an experienced candidate must upload"""
    return {
        "emp_salary_slip": ("salary.pdf", PDF_BYTES, "application/pdf"),
        "emp_offer_letter": ("offer.pdf", PDF_BYTES, "application/pdf"),
        "emp_relieving_letter": ("relieving.pdf", PDF_BYTES, "application/pdf"),
        "emp_experience_certificate": ("experience.pdf", PDF_BYTES, "application/pdf"),
    }


@pytest.fixture
def sample_job_data():
    """Sample job posting data for testing"""
    return {
        "title": "Senior Python Developer",
        "description": "Build and run our onboarding services with FastAPI and PostgreSQL.",
        "skillSet": "Python, FastAPI ,PostgreSQL, ,Docker",
        "experience": 4.5,
        "type": "Full-time",
        "location": "Hyderabad (Hybrid)",
        "salary": "18-24 LPA",
        "deadline": "2024-12-31",
    }
