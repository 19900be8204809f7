# File: js_sifter/extract/__init__.py
"""js_sifter.extract: string-literal extraction over ESTree syntax trees."""

from .noise import load_stoplist, sift_strings
from .reachability import classify
from .walker import collect_all, walk

__all__ = ["classify", "walk", "collect_all", "sift_strings", "load_stoplist"]
