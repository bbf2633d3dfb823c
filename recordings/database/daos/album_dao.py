"""
Album DAO

Purpose
-------
Data-access layer for the `Album` ORM entity. Provides:
- Lookup of every album filed under an artist
- Lookup of a single album by primary key
- Insert returning the database-assigned id
- Delete by primary key

Design
------
- `AlbumRepository` is the abstract interface the rest of the code depends on;
  `AlbumDao` is the relational implementation.
- The DAO is constructed with a SQLAlchemy session factory. Each method opens
  its own `session_scope`, so a call is one atomic round trip and no session
  or cursor outlives it.
- There is no update operation; an album's id never changes once assigned.

SQL surface
-----------
- SELECT ... FROM album WHERE artist = :artist
- SELECT ... FROM album WHERE id = :id
- INSERT INTO album (title, artist, price) VALUES (...) RETURNING id
- DELETE FROM album WHERE id = :id

Usage
-----
.. code-block:: python

    from recordings.database.config.config import get_settings
    from recordings.database.config.connection_engine import (
        create_connection_engine, create_session_factory,
    )
    from recordings.database.daos.album_dao import AlbumDao
    from recordings.database.entities.album import Album

    engine = create_connection_engine(get_settings())
    dao = AlbumDao(create_session_factory(engine))

    albums = dao.fetchAlbumsByArtist("John Coltrane")   # [] when nothing matches
    album = dao.fetchAlbumById(3)                        # AlbumNotFoundError when missing
    new_id = dao.createAlbum(Album(title="Kind of Blue", artist="Miles Davis", price=39.99))
    dao.deleteAlbum(new_id)

Error Handling
--------------
- Driver failures are logged with `logger.exception(...)` and re-raised as
  `AlbumDaoError`, tagged with the method name and its key argument, with the
  original exception chained.
- `fetchAlbumById` raises `AlbumNotFoundError` (a subclass) when no row matches.
- `deleteAlbum` treats "no row deleted" as success.
"""

import logging
from abc import ABC, abstractmethod
from typing import List

from sqlalchemy import delete, insert, select
from sqlalchemy.exc import NoResultFound, SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from recordings.database.entities.album import Album
from recordings.database.exceptions import AlbumDaoError, AlbumNotFoundError
from recordings.database.helpers.transactionManagement import session_scope

logger = logging.getLogger(__name__)


class AlbumRepository(ABC):
    """CRUD operations over persisted albums."""

    @abstractmethod
    def fetchAlbumsByArtist(self, name: str) -> List[Album]:
        """Return every album whose artist is exactly `name`; empty list if none."""

    @abstractmethod
    def fetchAlbumById(self, album_id: int) -> Album:
        """Return the album with primary key `album_id` or raise `AlbumNotFoundError`."""

    @abstractmethod
    def createAlbum(self, album: Album) -> int:
        """Insert `album` and return the id the database assigned."""

    @abstractmethod
    def deleteAlbum(self, album_id: int) -> bool:
        """Delete the album with primary key `album_id`."""


class AlbumDao(AlbumRepository):
    """
    Data Access Object (DAO) for managing Album entities in a relational database.
    """

    def __init__(self, session_factory: sessionmaker):
        """
        Parameters
        ----------
        session_factory : sessionmaker
            Factory bound to the engine to run statements against.
        """
        self.session_factory = session_factory

    def fetchAlbumsByArtist(self, name: str) -> List[Album]:
        """
        Fetch all albums by an artist.

        Parameters
        ----------
        name : str
            Artist name, matched exactly.

        Returns
        -------
        list[Album]
            Matching albums; empty when the artist has none.

        Raises
        ------
        AlbumDaoError
            If the query fails.
        """
        try:
            with session_scope(self.session_factory) as session:
                return list(session.scalars(select(Album).where(Album.artist == name)).all())
        except SQLAlchemyError as e:
            logger.exception("Error in AlbumDao.fetchAlbumsByArtist (name=%r)", name)
            raise AlbumDaoError("fetchAlbumsByArtist", name, str(e)) from e

    def fetchAlbumById(self, album_id: int) -> Album:
        """
        Fetch one album by id.

        Parameters
        ----------
        album_id : int
            Primary key of the album.

        Returns
        -------
        Album
            The matching album.

        Raises
        ------
        AlbumNotFoundError
            If no album has this id.
        AlbumDaoError
            If the query fails.
        """
        try:
            with session_scope(self.session_factory) as session:
                return session.execute(select(Album).where(Album.id == album_id)).scalar_one()
        except NoResultFound as e:
            raise AlbumNotFoundError("fetchAlbumById", album_id) from e
        except SQLAlchemyError as e:
            logger.exception("Error in AlbumDao.fetchAlbumById (id=%s)", album_id)
            raise AlbumDaoError("fetchAlbumById", album_id, str(e)) from e

    def createAlbum(self, album: Album) -> int:
        """
        Insert a new album. The passed object is left untouched.

        Parameters
        ----------
        album : Album
            Title, artist and price to insert; its `id` is ignored.

        Returns
        -------
        int
            Identifier assigned by the database.

        Raises
        ------
        AlbumDaoError
            If the insert fails.
        """
        stmt = (
            insert(Album)
            .values(title=album.title, artist=album.artist, price=album.price)
            .returning(Album.id)
        )
        try:
            with session_scope(self.session_factory) as session:
                album_id = session.execute(stmt).scalar_one()
        except SQLAlchemyError as e:
            logger.exception("Error in AlbumDao.createAlbum (title=%r)", album.title)
            raise AlbumDaoError("createAlbum", None, str(e)) from e
        logger.debug("Album %d created", album_id)
        return album_id

    def deleteAlbum(self, album_id: int) -> bool:
        """
        Delete an album by id. Deleting an id that does not exist is not an error.

        Parameters
        ----------
        album_id : int
            Primary key of the album.

        Returns
        -------
        bool
            True once the statement has run.

        Raises
        ------
        AlbumDaoError
            If the delete fails.
        """
        try:
            with session_scope(self.session_factory) as session:
                session.execute(delete(Album).where(Album.id == album_id))
        except SQLAlchemyError as e:
            logger.exception("Error in AlbumDao.deleteAlbum (id=%s)", album_id)
            raise AlbumDaoError("deleteAlbum", album_id, str(e)) from e
        logger.info("Album %d deleted", album_id)
        return True
