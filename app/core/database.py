import asyncio
import logging
from typing import Callable, Optional

from sqlalchemy import create_engine
from sqlalchemy.ext.declarative import declarative_base
from sqlalchemy.orm import sessionmaker
from app.core.config import settings

logger = logging.getLogger(__name__)

# Create SQLAlchemy engine
engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,  # Verify connections before using them
    pool_size=10,  # Connection pool size
    max_overflow=20  # Allow up to 20 connections beyond pool_size
)

# Create SessionLocal class
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create Base class for models
Base = declarative_base()


def get_db():
    """
    Dependency function to get database session.
    Used in FastAPI endpoints with Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None):
    """
    Initialize database.

    Imports the models so they register on Base.metadata, then creates any
    missing tables. create_all only issues CREATE TABLE for tables that do
    not exist yet, so it is safe alongside "alembic upgrade head".
    """
    from app.models import employee, job_posting  # noqa: F401  Import models to register them
    Base.metadata.create_all(bind=bind or engine)


async def connect_with_retry(
    connect: Optional[Callable[[], None]] = None,
    delay: Optional[float] = None,
) -> int:
    """
    Keep trying to reach the database until it answers.

    Runs `connect` (init_db by default) in a worker thread. Any failure is
    logged and retried after `delay` seconds, with no attempt limit.

    Returns:
        Number of attempts it took
    """
    connect = connect or init_db
    delay = settings.DB_CONNECT_RETRY_SECONDS if delay is None else delay

    attempt = 0
    while True:
        attempt += 1
        try:
            await asyncio.to_thread(connect)
            logger.info(f"Connected to database and verified tables (attempt {attempt})")
            return attempt
        except Exception as e:
            logger.error(f"Database connection error (attempt {attempt}): {e}. Retrying in {delay}s")
            await asyncio.sleep(delay)
