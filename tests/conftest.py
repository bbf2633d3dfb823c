import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from recordings.database.config.connection_engine import create_session_factory, metadata
from recordings.database.daos.album_dao import AlbumDao
from recordings.database.entities.album import Album

SEED_ALBUMS = [
    ("Blue Train", "John Coltrane", 56.99),
    ("Giant Steps", "John Coltrane", 63.99),
    ("Jeru", "Gerry Mulligan", 17.99),
    ("Sarah Vaughan", "Sarah Vaughan", 34.98),
]


def make_sqlite_engine():
    # One shared in-memory connection so every session sees the same tables
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    metadata.create_all(engine)
    return engine


def seed(session_factory):
    with session_factory() as session:
        for title, artist, price in SEED_ALBUMS:
            session.add(Album(title=title, artist=artist, price=price))
        session.commit()


@pytest.fixture()
def engine():
    engine = make_sqlite_engine()
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    factory = create_session_factory(engine)
    seed(factory)
    return factory


@pytest.fixture()
def dao(session_factory):
    return AlbumDao(session_factory)
