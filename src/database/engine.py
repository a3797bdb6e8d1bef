"""Database engine and session management."""
from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker


def build_engine(database_url: str) -> Engine:
    """Create an engine, making SQLite usable from FastAPI's worker threads."""
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(
        database_url,
        echo=False,  # Set to True for SQL logging
        pool_pre_ping=True,  # Verify connections before using
        connect_args=connect_args,
    )


def init_db(engine: Engine) -> None:
    """Create all tables that do not exist yet."""
    from src.database.models import Base

    Base.metadata.create_all(bind=engine)


@contextmanager
def session_scope(session_factory: sessionmaker) -> Generator[Session, None, None]:
    """Get database session context manager.

    Usage:
        with session_scope(SessionLocal) as db:
            db.query(VoteRecordRow).all()
    """
    db = session_factory()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
