import logging
from typing import Generator, Optional
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import QueuePool

from .config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()


def build_engine(database_url: str) -> Engine:
    """Create the engine for a database URL; SQLite gets no pool sizing"""
    url = make_url(database_url)
    options = {"echo": settings.debug, "pool_pre_ping": True}
    if url.get_backend_name() == "sqlite":
        # Sessions are opened from FastAPI's threadpool
        options["connect_args"] = {"check_same_thread": False}
    else:
        options.update(
            poolclass=QueuePool,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_recycle=300,
        )
    logger.info(f"Using database {url.render_as_string(hide_password=True)}")
    return create_engine(url, **options)


engine = build_engine(settings.database_url)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for models
Base = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """
    Request-scoped session for FastAPI dependencies.

    Rolled back if the request fails, always closed afterwards.
    """
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def init_db(bind: Optional[Engine] = None) -> bool:
    """
    Create the task table when it is missing.

    Returns:
        bool: True if successful, False otherwise
    """
    from ..models import tarefa  # noqa: F401  registers the table on Base

    try:
        Base.metadata.create_all(bind=bind or engine)
    except Exception as e:
        logger.error(f"Failed to create tables: {e}")
        return False
    logger.info("Task table ready")
    return True


def check_db_connection(bind: Optional[Engine] = None) -> bool:
    """Run ``SELECT 1``; False when the database cannot be reached"""
    try:
        with (bind or engine).connect() as connection:
            connection.execute(text("SELECT 1"))
    except Exception as e:
        logger.error(f"Database connection check failed: {e}")
        return False
    return True
