from __future__ import annotations

from pathlib import Path

import requests

from markboard.core.models import NoteSource
from markboard.logging_setup import get_logger

logger = get_logger("fetch")


class FetchError(Exception):
    def __init__(self, source: NoteSource, message: str, *, status: int | None = None):
        super().__init__(message)
        self.source = source
        self.status = status


class NoteFetcher:
    """
    Reads the raw text of a note.
    http(s) sources go through a requests session, everything else is a file under `root`.
    """

    def __init__(self, root: Path, *, timeout: float | None = None, session: requests.Session | None = None):
        self.root = Path(root)
        self.timeout = timeout
        self.session = session or requests.Session()

    def __call__(self, source: NoteSource) -> str:
        return self.fetch(source)

    def fetch(self, source: NoteSource) -> str:
        if source.is_remote:
            return self._fetch_remote(source)
        return self._fetch_local(source)

    def _fetch_remote(self, source: NoteSource) -> str:
        logger.debug("GET %s", source)
        try:
            response = self.session.get(source.location, timeout=self.timeout)
        except requests.RequestException as exc:
            raise FetchError(source, f"Cannot load file: {source} ({exc})") from exc

        if not response.ok:
            raise FetchError(
                source,
                f"Cannot load file: {source} (status code: {response.status_code})",
                status=response.status_code,
            )
        # notes are always UTF-8, whatever the server claims
        response.encoding = "utf-8"
        return response.text

    def _fetch_local(self, source: NoteSource) -> str:
        path = self.root / source.location
        logger.debug("read %s", path)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise FetchError(source, f"Cannot load file: {source} (not found)", status=404) from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise FetchError(source, f"Cannot load file: {source} ({exc})") from exc

    def close(self) -> None:
        self.session.close()
