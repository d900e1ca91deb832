from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from app.core.config import get_settings

# Session factory - bound to the engine the first time get_engine() runs
# autocommit=False: Changes require explicit commit
# autoflush=False: Don't auto-flush before queries
SessionLocal = sessionmaker(autocommit=False, autoflush=False)

# Base class for all database models
Base = declarative_base()

_engine: Optional[Engine] = None


def create_db_engine(database_url: str, **kwargs) -> Engine:
    """Create an engine, allowing SQLite connections to be shared across threads"""
    if database_url.startswith("sqlite"):
        # FastAPI runs sync work in a threadpool; SQLite connections default to one thread
        connect_args = kwargs.pop("connect_args", {})
        connect_args.setdefault("check_same_thread", False)
        kwargs["connect_args"] = connect_args
    return create_engine(database_url, **kwargs)


def get_engine() -> Engine:
    """Return the process-wide engine, creating it from settings on first use"""
    global _engine
    if _engine is None:
        _engine = create_db_engine(get_settings().DATABASE_URL)
        SessionLocal.configure(bind=_engine)
    return _engine


def get_db():
    """
    Dependency for getting database session.

    The session is closed after the request completes, even if the handler raised.
    """
    get_engine()
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
