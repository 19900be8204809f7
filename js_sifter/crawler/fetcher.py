# js_sifter/crawler/fetcher.py
"""
Fetcher module: single-shot HTTP GET over a shared aiohttp session.

No retries: a failed request is reported once as TransportError.
"""
from __future__ import annotations

import asyncio
from typing import Dict

from aiohttp import ClientError, ClientSession

from js_sifter.config import SifterConfig
from js_sifter.errors import TransportError
from js_sifter.models import PageData

__all__ = ("BROWSER_HEADERS", "build_headers", "Fetcher")

# Chrome 131 on Windows, the identity presented when spoofing.
BROWSER_HEADERS: Dict[str, str] = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36"
    ),
    "Accept": (
        "text/html,application/xhtml+xml,application/xml;q=0.9,"
        "image/avif,image/webp,image/apng,*/*;q=0.8"
    ),
    "Accept-Language": "en-US,en;q=0.9",
    "Sec-Ch-Ua": '"Google Chrome";v="131", "Chromium";v="131", "Not_A Brand";v="24"',
    "Sec-Ch-Ua-Mobile": "?0",
    "Sec-Ch-Ua-Platform": '"Windows"',
    "Upgrade-Insecure-Requests": "1",
}


def build_headers(config: SifterConfig) -> Dict[str, str]:
    """Default request headers for the session."""
    if config.spoof:
        return dict(BROWSER_HEADERS)
    return {"User-Agent": config.user_agent}


class Fetcher:
    """Issues independent GET requests; safe to share between tasks."""

    def __init__(self, session: ClientSession) -> None:
        self.session = session

    async def fetch(self, url: str) -> PageData:
        """
        Fetch *url* and return its final location and body bytes.

        Raises TransportError on connection failure, timeout, malformed URL or
        HTTP status >= 400.
        """
        try:
            async with self.session.get(url, raise_for_status=False) as resp:
                if resp.status >= 400:
                    raise TransportError(url, resp.status, resp.reason or "")
                body = await resp.read()
                return PageData(str(resp.url), body)
        except asyncio.TimeoutError as exc:
            raise TransportError(url, None, "timed out") from exc
        except ClientError as exc:
            raise TransportError(url, None, str(exc) or type(exc).__name__) from exc
        except ValueError as exc:
            # malformed URL, including hosts that fail IDNA encoding (UnicodeError)
            raise TransportError(url, None, str(exc) or type(exc).__name__) from exc
