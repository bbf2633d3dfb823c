"""
Connection Engine (SQLAlchemy)

Purpose
-------
Centralizes database initialization for the application:
- Creates the Engine (connection pool + SQL execution entry point) from the
  URL composed by `Settings`.
- Verifies liveness with a ping before the engine is handed out.
- Defines shared MetaData for table and schema objects.
- Exposes a Declarative Base class for ORM models.

Notes
-----
- Nothing here opens a connection at import time; the entry point calls
  `create_connection_engine(...)` and passes the engine down explicitly.
- All ORM models must inherit from `declarativeBase`.
"""

import logging

from sqlalchemy import create_engine, text
from sqlalchemy.engine import URL, Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.schema import MetaData

from recordings.database.config.config import Settings

logger = logging.getLogger(__name__)

metadata = MetaData()
"""
Metadata object: Stores schema-level information about tables, constraints, indexes, etc. Shared across all models.
"""

declarativeBase = declarative_base(metadata=metadata)
"""Declarative Base: Root class for ORM models."""


def ping(engine: Engine) -> None:
    """
    Round-trip a trivial statement to prove the database is reachable.

    Raises
    ------
    sqlalchemy.exc.OperationalError
        If the server cannot be reached or rejects the credentials.
    """
    with engine.connect() as connection:
        connection.execute(text("SELECT 1"))


def create_connection_engine(settings: Settings, url: URL | None = None, **engine_kwargs) -> Engine:
    """
    Create the Engine for `settings` and ping it.

    Parameters
    ----------
    settings : Settings
        Loaded configuration; its `connection_url` is used unless `url` is given.
    url : URL | None
        Explicit URL override (used by tests to point at SQLite).
    **engine_kwargs
        Passed through to `sqlalchemy.create_engine`.

    Returns
    -------
    Engine
        A live engine. The caller owns it and may `dispose()` it on exit.
    """
    target = url if url is not None else settings.connection_url
    engine = create_engine(target, **engine_kwargs)
    ping(engine)
    logger.info("Connected to %s", target.render_as_string(hide_password=True))
    return engine


def create_session_factory(engine: Engine) -> sessionmaker:
    """
    Session factory bound to `engine`.

    Objects are not expired on commit so that rows read inside a scoped
    session stay usable after the session is closed.
    """
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
