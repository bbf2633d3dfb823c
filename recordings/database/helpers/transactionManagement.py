"""
Database Transaction Management
===============================

This module provides utilities for managing SQLAlchemy database sessions
scoped to a single unit of work.

Every caller hands in the session factory explicitly; there is no
module-level engine. Sessions are opened on entry and always closed on exit,
so no cursor outlives the call that created it.

Key features
~~~~~~~~~~~~
- ``session_scope`` context manager with commit / rollback / close handling

"""

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.orm import Session, sessionmaker


@contextmanager
def session_scope(session_factory: sessionmaker) -> Iterator[Session]:
    """
    Provide a session for one unit of work.

    Commits when the block exits normally, rolls back when it raises, and
    closes the session in both cases.

    Example
    -------
    >>> with session_scope(factory) as session:
    ...     session.execute(stmt)
    """
    session = session_factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
