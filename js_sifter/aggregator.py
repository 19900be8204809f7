# File: js_sifter/aggregator.py
"""js_sifter.aggregator: summary of a sifting run, one entry per script."""

from __future__ import annotations

import json
from collections import Counter
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, TypedDict

from js_sifter.errors import ParseError, PersistenceError, SifterError, TransportError
from js_sifter.models import AnalysisResult

STATUSES = ("ok", "empty", "transport_error", "parse_error", "persistence_error")


class ScriptInfo(TypedDict):
    """Outcome of one analysed script."""

    url: str
    identifier: str
    status: str
    count: int
    artifact: Optional[str]
    error: Optional[str]


def _status(error: Optional[SifterError], count: int) -> str:
    if isinstance(error, TransportError):
        return "transport_error"
    if isinstance(error, ParseError):
        return "parse_error"
    if isinstance(error, PersistenceError):
        return "persistence_error"
    return "ok" if count else "empty"


def script_info(
    result: AnalysisResult,
    artifact: Optional[Path] = None,
    write_error: Optional[PersistenceError] = None,
) -> ScriptInfo:
    """Build the report entry for *result* and what persisting it produced."""
    error = result.error or write_error
    return {
        "url": result.reference.url,
        "identifier": result.reference.identifier,
        "status": _status(error, len(result.strings)),
        "count": len(result.strings),
        "artifact": str(artifact) if artifact else None,
        "error": str(error) if error else None,
    }


@dataclass(slots=True)
class SiftReport:
    """Results of a run: the crawled page and its scripts in completion order."""

    target: str
    scripts: List[ScriptInfo] = field(default_factory=list)

    def add(self, info: ScriptInfo) -> None:
        self.scripts.append(info)

    def summary(self) -> Dict[str, int]:
        """Number of scripts per status (every status present, possibly 0)."""
        counts = Counter(s["status"] for s in self.scripts)
        return {status: counts.get(status, 0) for status in STATUSES}

    def json(self, *, pretty: bool = False) -> str:
        output = asdict(self)
        output["summary"] = self.summary()
        return json.dumps(output, ensure_ascii=False, indent=2 if pretty else None)
