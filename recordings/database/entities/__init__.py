"""
Entities Package — SQLAlchemy 2.0 ORM Models (PostgreSQL)
=========================================================

Contents
--------
- Album
    A recording in the catalogue.
    * Fields: `id` (integer PK, database-assigned), `title`, `artist`, `price`
    * `id` cannot be re-assigned once set
"""

from recordings.database.entities.album import Album

__all__ = ["Album"]
