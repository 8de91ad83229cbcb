"""
Database configuration and session management.
"""

import logging
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from app.config import settings

logger = logging.getLogger("nutrition.database")

# Create SQLAlchemy Base
Base = declarative_base()


def make_engine(url: str = None, echo: bool = None) -> Engine:
    """Create an engine for the record store.

    In-memory SQLite URLs share a single connection so every session sees the
    same tables.
    """
    url = url or settings.database_url
    echo = settings.db_echo if echo is None else echo
    kwargs = {"echo": echo, "future": True}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
    return create_engine(url, **kwargs)


def make_session_factory(bind: Engine) -> sessionmaker:
    return sessionmaker(bind=bind, future=True, expire_on_commit=False)


# Create engine
engine = make_engine()

# Create session factory
SessionLocal = make_session_factory(engine)


def init_database(bind: Engine = None):
    """Initialize database schema"""
    bind = bind or engine
    with bind.begin() as conn:
        Base.metadata.create_all(bind=conn)
    logger.info("Database tables created successfully")

