# File: js_sifter/crawler/__init__.py
"""js_sifter.crawler: transport, script discovery and the per-script fan-out."""

from .discovery import discover_script_sources
from .fetcher import Fetcher
from .sifter import Sifter

__all__ = ["discover_script_sources", "Fetcher", "Sifter"]
