# File: js_sifter/parser/__init__.py
"""js_sifter.parser: ECMAScript front-end used by the extractor."""

from .js_parser import parse_script

__all__ = ["parse_script"]
