"""
Database Setup
SQLAlchemy engine, session factory and declarative base
"""

import logging
from typing import Generator

from sqlalchemy import create_engine, text
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from booklog.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()


def create_db_engine(database_url: str, echo: bool = False):
    """Create an engine; SQLite connections are shared across threadpool workers"""
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(database_url, echo=echo, connect_args=connect_args, pool_pre_ping=True)


engine = create_db_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """FastAPI dependency yielding one session per request"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None):
    """Create all tables that do not exist yet"""
    # Register models on Base.metadata
    from booklog import models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)


def check_connection(bind=None) -> str:
    """
    Open a connection and run a trivial query

    Returns:
        Database dialect name

    Raises:
        sqlalchemy.exc.SQLAlchemyError: if the database is unreachable
    """
    bind = bind or engine
    with bind.connect() as conn:
        conn.execute(text("SELECT 1"))
    logger.debug(f"Database connection OK ({bind.dialect.name})")
    return bind.dialect.name
