from sqlalchemy import Column, Integer, String, Text, Numeric, Date, DateTime, JSON, func
from sqlalchemy.dialects.postgresql import JSONB
from app.core.database import Base


class JobPosting(Base):
    """
    A job opening published by HR. Has no file attachments.
    """
    __tablename__ = "job_postings"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=False)

    # List of skill strings; JSONB on Postgres, plain JSON elsewhere
    skill_set = Column(JSON().with_variant(JSONB(), "postgresql"), nullable=False, default=list)

    experience = Column(Numeric(4, 1), nullable=True)  # years, e.g. 2.5
    job_type = Column(String(50), nullable=True)
    location = Column(String(255), nullable=True)
    salary = Column(String(100), nullable=True)
    deadline = Column(Date, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)

    def __repr__(self):
        return f"<JobPosting(id={self.id}, title='{self.title}')>"
