"""Database engine and helpers.

This module configures the SQLModel/SQLAlchemy engine from
`settings.DATABASE_URL` and provides the helpers used by the application
and tests. By default the database is a SQLite file `students.db` at the
repository root.
"""

import logging

from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from .config import settings

logger = logging.getLogger(__name__)

IN_MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")


def build_engine(url: str, echo: bool = False):
    """Create an engine for `url`.

    SQLite connections are shared with FastAPI's worker threads, so the
    same-thread check is disabled. An in-memory SQLite database only exists
    for the lifetime of its connection; `StaticPool` keeps that single
    connection alive for the whole engine.
    """
    kwargs = {"echo": echo}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
    if url in IN_MEMORY_URLS:
        kwargs["poolclass"] = StaticPool
    return create_engine(url, **kwargs)


engine = build_engine(settings.DATABASE_URL)


def create_db_and_tables(bind=None):
    """Create database tables using SQLModel metadata.

    Schema changes are not migrated; tables that already exist are left
    untouched.
    """
    # registers the table on SQLModel.metadata
    from . import models  # noqa: F401

    bind = bind or engine
    logger.info("creating tables on %s", bind.url.render_as_string(hide_password=True))
    SQLModel.metadata.create_all(bind)


def get_session():
    """Yield a database `Session` for FastAPI dependency injection.

    The generator yields a session and ensures it is closed when the
    request scope finishes.
    """
    with Session(engine) as session:
        yield session
