import stat
import tempfile
from pathlib import Path

import pytest

from kak_engine.runtime import session
from kak_engine.runtime.config import Config, ServerConfig


@pytest.fixture
def runtime_root(tmp_path: Path, monkeypatch) -> Path:
    monkeypatch.setattr(tempfile, "tempdir", str(tmp_path))
    monkeypatch.setattr(session.getpass, "getuser", lambda: "tester")
    return tmp_path


def test_temp_dir_creates_private_user_directory(runtime_root: Path) -> None:
    path = session.temp_dir()

    assert path == runtime_root / "kak-lsp" / "tester"
    assert path.is_dir()
    assert stat.S_IMODE(path.stat().st_mode) == 0o700
    shared_mode = stat.S_IMODE(path.parent.stat().st_mode)
    assert shared_mode == 0o1777


def test_temp_dir_is_idempotent(runtime_root: Path) -> None:
    assert session.temp_dir() == session.temp_dir()


def test_session_paths(runtime_root: Path) -> None:
    sock_path, pid_path = session.session_paths("work")

    assert sock_path == runtime_root / "kak-lsp" / "tester" / "work"
    assert pid_path == runtime_root / "kak-lsp" / "tester" / "work.pid"


def test_cleanup_removes_socket_and_pid(runtime_root: Path) -> None:
    sock_path, pid_path = session.session_paths("work")
    sock_path.touch()
    pid_path.write_text("1234")

    session.cleanup_session(Config(server=ServerConfig(session="work")))

    assert not sock_path.exists()
    assert not pid_path.exists()


def test_cleanup_tolerates_missing_files(runtime_root: Path) -> None:
    session.cleanup_session(Config(server=ServerConfig(session="gone")))


def test_cleanup_without_session_is_noop(runtime_root: Path) -> None:
    session.cleanup_session(Config())

    assert not (runtime_root / "kak-lsp").exists()


def test_goodbye_cleans_up_and_exits(runtime_root: Path) -> None:
    sock_path, _ = session.session_paths("work")
    sock_path.touch()

    with pytest.raises(SystemExit) as info:
        session.goodbye(Config(server=ServerConfig(session="work")), 0, flush_delay=0)

    assert info.value.code == 0
    assert not sock_path.exists()


def test_goodbye_keeps_files_on_failure(runtime_root: Path) -> None:
    sock_path, _ = session.session_paths("work")
    sock_path.touch()

    with pytest.raises(SystemExit) as info:
        session.goodbye(Config(server=ServerConfig(session="work")), 1, flush_delay=0)

    assert info.value.code == 1
    assert sock_path.exists()
