"""Session runtime files and process shutdown."""

from __future__ import annotations

import getpass
import os
import sys
import tempfile
import time
from pathlib import Path
from typing import Tuple

from . import telemetry
from .config import Config

TEMP_DIR_NAME = "kak-lsp"

LOGGER_NAME = "kak_engine.session"


def temp_dir() -> Path:
    """Return the per-user runtime directory, creating it if needed.

    The shared parent is world-writable with the sticky bit so several users
    can share it; the per-user child is private.
    """

    shared = Path(tempfile.gettempdir()) / TEMP_DIR_NAME
    old_mask = os.umask(0)
    try:
        shared.mkdir(mode=0o1777, parents=True, exist_ok=True)
    except OSError as exc:
        # The per-user mkdir below reports anything that actually matters.
        telemetry.get_logger(LOGGER_NAME).debug(f"could not create {shared}: {exc}")
    finally:
        os.umask(old_mask)

    path = shared / getpass.getuser()
    path.mkdir(mode=0o700, parents=True, exist_ok=True)
    return path


def session_paths(session: str) -> Tuple[Path, Path]:
    """Socket and pid file paths for ``session``."""

    path = temp_dir()
    return path / session, path / f"{session}.pid"


def cleanup_session(config: Config) -> None:
    session = config.server.session
    if session is None:
        return
    sock_path, pid_path = session_paths(session)
    try:
        sock_path.unlink()
    except OSError:
        telemetry.get_logger(LOGGER_NAME).warning("Failed to remove socket file")
    if pid_path.exists():
        try:
            pid_path.unlink()
        except OSError:
            telemetry.get_logger(LOGGER_NAME).warning("Failed to remove pid file")


def goodbye(config: Config, code: int, *, flush_delay: float = 1.0) -> None:
    """Remove session files on clean exit, flush stdio and exit with ``code``."""

    if code == 0:
        cleanup_session(config)
    sys.stderr.flush()
    sys.stdout.flush()
    # Give stdio a chance to drain before the process goes away.
    time.sleep(flush_delay)
    sys.exit(code)


__all__ = ["TEMP_DIR_NAME", "temp_dir", "session_paths", "cleanup_session", "goodbye"]
