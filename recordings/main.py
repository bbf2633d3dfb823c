"""
Demo entry point for the album data-access layer.

Wires settings → engine → `AlbumDao`, then runs each repository operation
once with sample arguments and prints what came back:

1. albums by "John Coltrane"
2. album with id 3
3. insert "Miles Davis - Requiem In D Minor"
4. delete the album just inserted

Environment contract (from `Settings`): \n
- DBUSER / DBPASS: required credentials. \n
- LOG_LEVEL: log level for the stderr handler (default INFO). \n

Any error is fatal: it is logged and the process exits with status 1.
"""

import logging
import sys

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from recordings.database.config.config import get_settings
from recordings.database.config.connection_engine import create_connection_engine, create_session_factory
from recordings.database.daos.album_dao import AlbumDao, AlbumRepository
from recordings.database.entities.album import Album
from recordings.database.exceptions import AlbumDaoError

logger = logging.getLogger("recordings")

LOG_FORMAT = "[%(asctime)s] %(levelname)s: %(filename)s:%(funcName)s(%(lineno)s): %(message)s"

SAMPLE_ARTIST = "John Coltrane"
SAMPLE_ALBUM_ID = 3


def configure_logging(level: str = "INFO") -> None:
    """Attach a single stderr handler to the `recordings` logger."""
    logger.setLevel(level.upper())
    if not logger.handlers:
        sh = logging.StreamHandler()
        sh.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(sh)


def run_demo(repository: AlbumRepository) -> int:
    """
    Call every repository operation once and print the outcomes.

    Returns
    -------
    int
        Id of the album inserted (and deleted again) during the run.

    Raises
    ------
    AlbumDaoError
        From whichever operation failed first.
    """
    albums = repository.fetchAlbumsByArtist(SAMPLE_ARTIST)
    print("Albums found:", albums)

    album = repository.fetchAlbumById(SAMPLE_ALBUM_ID)
    print("Album found:", album)

    album_id = repository.createAlbum(
        Album(title="Miles Davis - Requiem In D Minor", artist="Miles Davis", price=59.99)
    )
    print(f"ID of added album: {album_id}")

    repository.deleteAlbum(album_id)
    print(f"Album {album_id} deleted")
    return album_id


def main() -> None:
    configure_logging()
    try:
        settings = get_settings()
    except ValidationError as e:
        logger.critical("Invalid configuration: %s", e)
        sys.exit(1)
    configure_logging(settings.LOG_LEVEL)

    try:
        engine = create_connection_engine(settings)
    except SQLAlchemyError as e:
        logger.critical("Could not connect to the database: %s", e)
        sys.exit(1)

    print("Connected to Postgres!")
    try:
        run_demo(AlbumDao(create_session_factory(engine)))
    except AlbumDaoError as e:
        logger.critical("%s", e)
        sys.exit(1)
    finally:
        engine.dispose()


if __name__ == "__main__":
    main()
