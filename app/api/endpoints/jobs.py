import logging
import math
from fastapi import APIRouter, HTTPException, Depends, Query
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.errors import server_error
from app.crud import job_posting as job_crud
from app.schemas.job_posting import (
    JobPostingCreateRequest,
    JobPostingListResponse,
    JobPostingResponse,
)

router = APIRouter(prefix="/jobs", tags=["Job Postings"])
logger = logging.getLogger(__name__)

MAX_PAGE_SIZE = 100


@router.post("", status_code=201, response_model=JobPostingResponse)
def create_job(
    request: JobPostingCreateRequest,
    db: Session = Depends(get_db)
):
    """
    Create a new job posting.

    `skillSet` may be sent as a list or as a comma-separated string; it is
    stored as a list of trimmed skill names.
    """
    try:
        new_job = job_crud.create(db, request)
    except Exception as e:
        db.rollback()
        logger.error(f"Error creating job posting: {e}")
        raise server_error("Database error", e)

    logger.info(f"Created job posting {new_job.id}: {new_job.title}")
    return new_job


@router.get("", response_model=JobPostingListResponse)
def list_jobs(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1),
    db: Session = Depends(get_db)
):
    """
    List job postings, newest first, one page at a time.

    Args:
        page: 1-based page number (default: 1)
        limit: Page size (default: 10, max: 100)
    """
    if limit > MAX_PAGE_SIZE:
        limit = MAX_PAGE_SIZE

    try:
        jobs, total = job_crud.get_page(db, page=page, limit=limit)
    except Exception as e:
        logger.error(f"Error listing job postings: {e}")
        raise server_error("Database error", e)

    return JobPostingListResponse(
        jobs=[JobPostingResponse.model_validate(job) for job in jobs],
        total=total,
        page=page,
        limit=limit,
        total_pages=math.ceil(total / limit) if total else 0,
    )


@router.get("/{job_id}", response_model=JobPostingResponse)
def get_job(job_id: int, db: Session = Depends(get_db)):
    """
    Retrieve a job posting by ID.
    """
    try:
        job = job_crud.get_by_id(db, job_id)
    except Exception as e:
        logger.error(f"Error fetching job posting {job_id}: {e}")
        raise server_error("Database error", e)

    if not job:
        raise HTTPException(status_code=404, detail="Job not found")

    return job
