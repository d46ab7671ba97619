"""
CRUD operations for JobPosting model.
"""

from typing import List, Optional, Tuple
from sqlalchemy.orm import Session
from app.models.job_posting import JobPosting
from app.schemas.job_posting import JobPostingCreateRequest


def create(db: Session, job_data: JobPostingCreateRequest) -> JobPosting:
    """
    Create a new job posting in the database.

    Args:
        db: Database session
        job_data: Validated job posting data

    Returns:
        Created JobPosting instance with id
    """
    db_job = JobPosting(
        title=job_data.title,
        description=job_data.description,
        skill_set=list(job_data.skill_set),
        experience=job_data.experience,
        job_type=job_data.job_type,
        location=job_data.location,
        salary=job_data.salary,
        deadline=job_data.deadline,
    )

    db.add(db_job)
    db.commit()
    db.refresh(db_job)

    return db_job


def get_by_id(db: Session, job_id: int) -> Optional[JobPosting]:
    return db.query(JobPosting).filter(JobPosting.id == job_id).first()


def get_page(db: Session, page: int = 1, limit: int = 10) -> Tuple[List[JobPosting], int]:
    """
    Retrieve one page of job postings, newest first.

    Args:
        db: Database session
        page: 1-based page number
        limit: Page size

    Returns:
        (postings on this page, total number of postings)
    """
    total = db.query(JobPosting).count()
    jobs = (
        db.query(JobPosting)
        .order_by(JobPosting.created_at.desc(), JobPosting.id.desc())
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )
    return jobs, total
