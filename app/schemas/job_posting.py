from pydantic import BaseModel, Field, field_validator
from typing import Any, List, Optional
from datetime import date, datetime
from decimal import Decimal


class JobPostingCreateRequest(BaseModel):
    """
    Schema for creating a job posting.

    Accepts the camelCase keys the frontend sends (skillSet, type);
    skillSet may be a list or a single comma-separated string.
    """
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    skill_set: List[str] = Field(default_factory=list, alias="skillSet")
    experience: Optional[Decimal] = Field(None, ge=0, max_digits=4, decimal_places=1)
    job_type: Optional[str] = Field(None, alias="type", max_length=50)
    location: Optional[str] = Field(None, max_length=255)
    salary: Optional[str] = Field(None, max_length=100)
    deadline: Optional[date] = None

    @field_validator("title", "description", mode="before")
    @classmethod
    def strip_text(cls, v: Any) -> Any:
        return v.strip() if isinstance(v, str) else v

    @field_validator("skill_set", mode="before")
    @classmethod
    def parse_skill_set(cls, v: Any) -> List[str]:
        """Split comma-separated skills and drop blanks"""
        if v is None:
            return []
        if isinstance(v, str):
            v = v.split(",")
        if isinstance(v, (list, tuple)):
            return [str(skill).strip() for skill in v if str(skill).strip()]
        return v

    @field_validator("salary", mode="before")
    @classmethod
    def salary_as_text(cls, v: Any) -> Any:
        if isinstance(v, (int, float, Decimal)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("experience", "deadline", "job_type", "location", "salary", mode="before")
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    class Config:
        populate_by_name = True


class JobPostingResponse(BaseModel):
    """Schema for job posting response"""
    id: int
    title: str
    description: str
    skill_set: List[str] = Field(default_factory=list, alias="skillSet")
    experience: Optional[float] = None
    job_type: Optional[str] = Field(None, alias="type")
    location: Optional[str] = None
    salary: Optional[str] = None
    deadline: Optional[date] = None
    created_at: Optional[datetime] = Field(None, alias="createdAt")

    class Config:
        from_attributes = True
        populate_by_name = True


class JobPostingListResponse(BaseModel):
    """One page of job postings plus paging totals"""
    jobs: List[JobPostingResponse]
    total: int
    page: int
    limit: int
    total_pages: int = Field(..., alias="totalPages")

    class Config:
        populate_by_name = True
