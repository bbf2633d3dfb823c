import pytest
from sqlalchemy.exc import OperationalError

from recordings import main as demo
from recordings.database.config.config import Settings
from recordings.database.daos.album_dao import AlbumRepository


@pytest.fixture()
def wired(monkeypatch):
    def wire(engine):
        monkeypatch.setattr(demo, "get_settings", lambda: Settings(DBUSER="bob", DBPASS="secret"))
        monkeypatch.setattr(demo, "create_connection_engine", lambda settings: engine)
    return wire


def test_run_demo(dao, capsys):
    album_id = demo.run_demo(dao)
    out = capsys.readouterr().out

    assert "Albums found: [Album(id=1, title='Blue Train'" in out
    assert "Album found: Album: id:3, title: Jeru, artist: Gerry Mulligan, price: 17.99" in out
    assert f"ID of added album: {album_id}" in out
    assert f"Album {album_id} deleted" in out
    assert dao.fetchAlbumsByArtist("Miles Davis") == []


def test_main_success(engine, session_factory, wired, capsys):
    wired(engine)
    demo.main()
    out = capsys.readouterr().out
    assert out.startswith("Connected to Postgres!")
    assert "Album found: Album: id:3" in out


def test_main_exits_on_repository_error(engine, wired, capsys):
    # Empty table: fetching album 3 is fatal
    wired(engine)
    with pytest.raises(SystemExit) as excinfo:
        demo.main()
    assert excinfo.value.code == 1
    assert "Albums found: []" in capsys.readouterr().out


def test_main_exits_on_missing_config(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("DBUSER", raising=False)
    monkeypatch.delenv("DBPASS", raising=False)
    monkeypatch.setattr(demo, "get_settings", lambda: Settings())
    with pytest.raises(SystemExit) as excinfo:
        demo.main()
    assert excinfo.value.code == 1


def test_demo_accepts_any_repository(capsys):
    class FakeRepository(AlbumRepository):
        def __init__(self):
            self.calls = []

        def fetchAlbumsByArtist(self, name):
            self.calls.append(("fetchAlbumsByArtist", name))
            return []

        def fetchAlbumById(self, album_id):
            self.calls.append(("fetchAlbumById", album_id))
            return None

        def createAlbum(self, album):
            self.calls.append(("createAlbum", album.title))
            return 42

        def deleteAlbum(self, album_id):
            self.calls.append(("deleteAlbum", album_id))
            return True

    repo = FakeRepository()
    assert demo.run_demo(repo) == 42
    assert repo.calls == [
        ("fetchAlbumsByArtist", "John Coltrane"),
        ("fetchAlbumById", 3),
        ("createAlbum", "Miles Davis - Requiem In D Minor"),
        ("deleteAlbum", 42),
    ]


def test_main_exits_on_unknown_log_level(monkeypatch, capsys):
    monkeypatch.setattr(
        demo, "get_settings", lambda: Settings(DBUSER="bob", DBPASS="secret", LOG_LEVEL="verbose")
    )
    with pytest.raises(SystemExit) as excinfo:
        demo.main()
    assert excinfo.value.code == 1
    assert "Connected to Postgres!" not in capsys.readouterr().out


def test_main_reports_config_and_connection_errors_apart(monkeypatch, tmp_path, caplog):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("DBUSER", raising=False)
    monkeypatch.delenv("DBPASS", raising=False)
    monkeypatch.setattr(demo, "get_settings", lambda: Settings())
    with pytest.raises(SystemExit):
        demo.main()
    assert "Invalid configuration" in caplog.text
    assert "Could not connect to the database" not in caplog.text

    caplog.clear()

    def unreachable(settings):
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    monkeypatch.setattr(demo, "get_settings", lambda: Settings(DBUSER="bob", DBPASS="secret"))
    monkeypatch.setattr(demo, "create_connection_engine", unreachable)
    with pytest.raises(SystemExit) as excinfo:
        demo.main()
    assert excinfo.value.code == 1
    assert "Could not connect to the database" in caplog.text
    assert "Invalid configuration" not in caplog.text
