# File: js_sifter/models.py
"""
Data models shared by the crawler, the extractor and the reports.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple
from urllib.parse import urlparse

from js_sifter.errors import SifterError

__all__ = ("PageData", "ScriptReference", "AnalysisResult")


@dataclass(slots=True)
class PageData:
    """Final URL and raw body of a fetched document or script."""

    url: str
    content: bytes


@dataclass(slots=True, frozen=True)
class ScriptReference:
    """Absolute location of an external script found on the crawled page."""

    url: str

    @property
    def identifier(self) -> str:
        """Last non-empty path segment, used to name the artifact."""
        segments = [s for s in urlparse(self.url).path.split("/") if s]
        return segments[-1] if segments else "index"


@dataclass(slots=True)
class AnalysisResult:
    """Terminal outcome for one ScriptReference: accepted strings or an error."""

    reference: ScriptReference
    strings: Tuple[str, ...] = ()
    error: Optional[SifterError] = None

    @property
    def ok(self) -> bool:
        return self.error is None
