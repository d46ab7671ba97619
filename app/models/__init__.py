"""
Database models package.
"""

from app.models.employee import Employee
from app.models.job_posting import JobPosting

__all__ = ["Employee", "JobPosting"]
