# === FILE: js_sifter/crawler/sifter.py ===
from __future__ import annotations

import asyncio
import logging
import time
from typing import AbstractSet, AsyncIterator, List, Optional

from aiohttp import ClientSession, ClientTimeout

from js_sifter.config import SifterConfig
from js_sifter.crawler.discovery import discover_script_sources
from js_sifter.crawler.fetcher import Fetcher, build_headers
from js_sifter.errors import ParseError, TransportError
from js_sifter.extract.noise import sift_strings
from js_sifter.extract.walker import collect_all, walk
from js_sifter.models import AnalysisResult, ScriptReference
from js_sifter.parser.js_parser import parse_script

__all__ = ("Sifter",)


class Sifter:
    """Fetches one page and analyses each of its external scripts concurrently."""

    def __init__(self, config: SifterConfig, stoplist: AbstractSet[str] = frozenset()) -> None:
        self.config = config
        self.stoplist = stoplist
        self.session: Optional[ClientSession] = None
        self.fetcher: Optional[Fetcher] = None
        self.logger = logging.getLogger("JsSifter")
        self._slots = (
            asyncio.Semaphore(config.max_concurrency) if config.max_concurrency else None
        )

    async def __aenter__(self) -> Sifter:
        timeout = ClientTimeout(total=self.config.timeout)
        self.session = ClientSession(
            timeout=timeout,
            headers=build_headers(self.config),
            raise_for_status=False,
        )
        self.fetcher = Fetcher(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    async def discover(self) -> List[ScriptReference]:
        """Fetch the root page and list its script references.

        A TransportError here is fatal for the run and propagates.
        """
        if not self.fetcher:
            raise RuntimeError("Session not initialized")
        root = str(self.config.base_url)
        page = await self.fetcher.fetch(root)
        refs = discover_script_sources(page.content, page.url)
        self.logger.info("%s | %d scripts referenced", root, len(refs))
        return refs

    async def sift(self) -> AsyncIterator[AnalysisResult]:
        """Yield one AnalysisResult per discovered script, in completion order."""
        start = time.monotonic()
        refs = await self.discover()
        tasks = [asyncio.create_task(self._guarded(ref)) for ref in refs]
        try:
            for next_done in asyncio.as_completed(tasks):
                yield await next_done
        finally:
            pending = [t for t in tasks if not t.done()]
            for t in pending:
                t.cancel()
            await asyncio.gather(*pending, return_exceptions=True)
        self.logger.debug(
            "Analysed %d scripts in %.2f s", len(tasks), time.monotonic() - start
        )

    async def _guarded(self, ref: ScriptReference) -> AnalysisResult:
        if self._slots is None:
            return await self.analyze(ref)
        async with self._slots:
            return await self.analyze(ref)

    async def analyze(self, ref: ScriptReference) -> AnalysisResult:
        """Fetch, parse, extract and filter one script; errors stay in the result."""
        if not self.fetcher:
            raise RuntimeError("Session not initialized")
        try:
            page = await self.fetcher.fetch(ref.url)
            strings = await asyncio.to_thread(self.extract, page.content, ref.url)
        except (TransportError, ParseError) as exc:
            return AnalysisResult(ref, error=exc)
        return AnalysisResult(ref, strings=tuple(strings))

    def extract(self, source: bytes, url: Optional[str] = None) -> List[str]:
        """Synchronous part of the pipeline: parse → walk → filter."""
        tree = parse_script(
            source,
            source_type=self.config.source_type,
            tolerant=self.config.tolerant,
            url=url,
        )
        if self.config.mode == "coarse":
            return sift_strings(collect_all(tree), self.stoplist)
        return sift_strings(walk(tree))
