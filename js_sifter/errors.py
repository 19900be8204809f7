# File: js_sifter/errors.py
"""js_sifter.errors: Exception taxonomy for a sifting run.

Root-level :class:`TransportError` aborts the run; every per-script error is
captured into that script's :class:`~js_sifter.models.AnalysisResult`.
"""

from __future__ import annotations

from typing import Optional

__all__ = ["SifterError", "TransportError", "ParseError", "PersistenceError"]


class SifterError(Exception):
    """Base class for every error JsSifter reports."""


class TransportError(SifterError):
    """Fetching a document or script failed (connection, timeout, HTTP status)."""

    def __init__(self, url: str, status: Optional[int] = None, reason: str = "") -> None:
        self.url = url
        self.status = status
        self.reason = reason
        super().__init__(f"{url}: {self.status_text} {reason}".rstrip())

    @property
    def status_text(self) -> str:
        return "unknown" if self.status is None else str(self.status)


class ParseError(SifterError):
    """Script bytes could not be parsed as ECMAScript."""

    def __init__(self, reason: str, url: Optional[str] = None) -> None:
        self.url = url
        self.reason = reason
        super().__init__(reason)


class PersistenceError(SifterError):
    """An artifact could not be written."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")
