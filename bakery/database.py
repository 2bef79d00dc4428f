"""Database connection and session management."""
from functools import lru_cache
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, Session

from bakery.config import get_settings


def get_database_url() -> str:
    """Return the configured database URL.

    For SQLite files, the parent directory is created so a fresh checkout
    can start without any setup.
    """
    url = get_settings().DATABASE_URL
    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite" and parsed.database not in (None, "", ":memory:"):
        Path(parsed.database).parent.mkdir(parents=True, exist_ok=True)
    return url


@lru_cache
def get_engine():
    """Create SQLAlchemy engine (cached)."""
    url = get_database_url()
    connect_args = {}
    if url.startswith("sqlite"):
        # FastAPI serves sync routes from a threadpool
        connect_args["check_same_thread"] = False
    return create_engine(url, pool_pre_ping=True, connect_args=connect_args)


def get_session() -> Session:
    """Create a new database session."""
    SessionLocal = sessionmaker(bind=get_engine())
    return SessionLocal()


def get_db():
    """Dependency for FastAPI routes that need a database session."""
    db = get_session()
    try:
        yield db
    finally:
        db.close()
