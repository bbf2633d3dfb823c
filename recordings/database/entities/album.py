"""
Album ORM Model
===============

The ``Album`` ORM model represents a single recording stored in the ``album``
PostgreSQL table.

Key features
~~~~~~~~~~~~
- Integer primary key (``id``) assigned by the database on insert
- Title and artist text columns
- Price stored as ``NUMERIC(5, 2)`` and surfaced as ``float``
- The identifier cannot be changed once it has been assigned

"""

from typing import Optional

from sqlalchemy import Integer, Numeric, VARCHAR
from sqlalchemy.orm import Mapped, mapped_column, validates

from recordings.database.config.connection_engine import declarativeBase


class Album(declarativeBase):
    """
    ORM model for the `album` table.

    Attributes
    ----------
    id : int | None
        Primary key. ``None`` until the row has been inserted.
    title : str
        Album title (max 128 chars).
    artist : str
        Performing artist (max 255 chars). Used as the lookup key by
        ``AlbumDao.fetchAlbumsByArtist``.
    price : float
        Price with two decimal places.
    """

    __tablename__ = "album"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True
    )
    """Primary key. Assigned by the database."""

    title: Mapped[str] = mapped_column(
        VARCHAR(128), nullable=False
    )
    """Title of the album."""

    artist: Mapped[str] = mapped_column(
        VARCHAR(255), nullable=False
    )
    """Artist the album is filed under."""

    price: Mapped[float] = mapped_column(
        Numeric(5, 2, asdecimal=False), nullable=False
    )
    """Price of the album."""

    def __init__(self, title: str, artist: str, price: float, album_id: Optional[int] = None):
        """
        Initialize a new Album object.

        Parameters
        ----------
        title : str
            Album title.
        artist : str
            Artist name.
        price : float
            Album price.
        album_id : int | None
            Existing identifier, if the album is already persisted.
        """
        self.title = title
        self.artist = artist
        self.price = price
        if album_id is not None:
            self.id = album_id

    @validates("id")
    def _validate_id(self, key, value):
        current = self.__dict__.get("id")
        if current is not None and value != current:
            raise ValueError(f"Album id is immutable (is {current}, got {value})")
        return value

    def __str__(self) -> str:
        return (
            f"Album: id:{self.id}, title: {self.title}, artist: {self.artist}, price: {self.price}"
        )

    def __repr__(self) -> str:
        return f"Album(id={self.id!r}, title={self.title!r}, artist={self.artist!r}, price={self.price!r})"
