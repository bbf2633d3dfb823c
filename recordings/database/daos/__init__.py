"""
DAOs Package — Data Access Layer (SQLAlchemy 2.0)
=================================================

Conventions
-----------
- Repositories are constructed with a session factory, never a global engine
- Each call runs in its own session scope and commits or rolls back on exit
- Failures surface as `AlbumDaoError` so upper layers decide error policy

Contents
--------
- AlbumRepository
    Abstract interface: fetch by artist, fetch by id, create, delete.

- AlbumDao
    Relational implementation of `AlbumRepository`.
"""

from recordings.database.daos.album_dao import AlbumDao, AlbumRepository

__all__ = ["AlbumDao", "AlbumRepository"]
