# File: js_sifter/utils.py
"""js_sifter.utils: small URL and file helpers shared across the package."""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence, Union
from urllib.parse import urlparse

from js_sifter.logger import logger

__all__: Sequence[str] = (
    "is_http_url",
    "read_wordlist",
)


def is_http_url(url: str) -> bool:
    """True for absolute http(s) URLs with a host."""
    parsed = urlparse(url)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def read_wordlist(path: Union[str, Path]) -> List[str]:
    """Read a word file, returning the non-empty stripped lines."""
    p = Path(path).expanduser()
    if not p.exists():
        logger.error("Wordlist not found: %s", p)
        raise FileNotFoundError(f"Wordlist file not found: {p}")
    words = [line.strip() for line in p.read_text(encoding="utf-8").splitlines() if line.strip()]
    logger.debug("Loaded %d entries from wordlist %s", len(words), p)
    return words
