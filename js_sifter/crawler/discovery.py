# js_sifter/crawler/discovery.py
"""
Script discovery: external <script src> references of a fetched page.
"""
from __future__ import annotations

from typing import List, Union
from urllib.parse import urljoin, urlparse

from bs4 import BeautifulSoup
from bs4.element import Tag

from js_sifter.logger import logger
from js_sifter.models import ScriptReference
from js_sifter.utils import is_http_url

__all__ = ("discover_script_sources",)


def _check_host(url: str) -> None:
    """Raise UnicodeError (a ValueError) when the host has an empty or oversized label."""
    host = urlparse(url).hostname
    if host:
        host.encode("idna")


def discover_script_sources(document: Union[str, bytes], base_url: str) -> List[ScriptReference]:
    """
    Resolve every <script src> of *document* against *base_url*.

    Document order is kept and duplicates are not removed. Inline scripts
    are skipped; empty, unresolvable and non-http(s) sources are dropped.
    """
    soup = BeautifulSoup(document, "html.parser")
    refs: List[ScriptReference] = []
    for tag in soup.find_all("script", src=True):
        if not isinstance(tag, Tag):
            continue
        src_val = tag.get("src")
        if not isinstance(src_val, str):
            continue
        raw = src_val.strip()
        if not raw:
            continue
        try:
            absolute = urljoin(base_url, raw)
            fetchable = is_http_url(absolute)
            if fetchable:
                _check_host(absolute)
        except ValueError as exc:
            logger.debug("Dropping unresolvable script source %r: %s", raw, exc)
            continue
        if not fetchable:
            logger.debug("Dropping non-http script source %r", raw)
            continue
        refs.append(ScriptReference(absolute))
    return refs
