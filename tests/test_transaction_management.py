import pytest
from sqlalchemy import func, select

from recordings.database.entities.album import Album
from recordings.database.helpers.transactionManagement import session_scope


def count_albums(session_factory):
    with session_factory() as session:
        return session.scalar(select(func.count()).select_from(Album))


def test_session_scope_commits(session_factory):
    with session_scope(session_factory) as session:
        session.add(Album(title="Kind of Blue", artist="Miles Davis", price=39.99))
    assert count_albums(session_factory) == 5


def test_session_scope_rolls_back(session_factory):
    with pytest.raises(RuntimeError):
        with session_scope(session_factory) as session:
            session.add(Album(title="Kind of Blue", artist="Miles Davis", price=39.99))
            session.flush()
            raise RuntimeError("boom")
    assert count_albums(session_factory) == 4


def test_session_scope_closes_session(session_factory):
    with session_scope(session_factory) as session:
        session.add(Album(title="Bitches Brew", artist="Miles Davis", price=9.99))
        assert session.in_transaction()
    assert not session.in_transaction()
    assert count_albums(session_factory) == 5
