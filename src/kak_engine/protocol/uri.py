"""Resolution of document identifiers (``file:`` URIs) to local paths."""

from __future__ import annotations

from pathlib import Path
from urllib.parse import urlparse
from urllib.request import url2pathname


class UriResolutionError(RuntimeError):
    """Raised when a document URI does not name a local file."""

    def __init__(self, message: str, *, uri: str) -> None:
        super().__init__(f"{message}: {uri!r}")
        self.uri = uri


def uri_to_path(uri: str) -> Path:
    parsed = urlparse(uri)
    if parsed.scheme != "file":
        raise UriResolutionError("Not a file URI", uri=uri)
    if parsed.netloc not in ("", "localhost"):
        raise UriResolutionError("Remote file URIs are not supported", uri=uri)
    if not parsed.path:
        raise UriResolutionError("File URI has no path", uri=uri)
    # url2pathname decodes percent-escapes itself.
    return Path(url2pathname(parsed.path))


def path_to_uri(path: str | Path) -> str:
    return Path(path).absolute().as_uri()


__all__ = ["UriResolutionError", "uri_to_path", "path_to_uri"]
