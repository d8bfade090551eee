"""Per-request editor metadata and per-session context."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .config import Config


@dataclass(slots=True)
class EditorMeta:
    """Identifies the editor session, client and buffer a request came from."""

    session: str
    buffile: str
    client: Optional[str] = None
    filetype: str = ""
    version: int = 0


@dataclass(slots=True)
class Context:
    root_path: str
    config: Config = field(default_factory=Config)
    session: Optional[str] = None
