# File: js_sifter/parser/js_parser.py
"""js_sifter.parser.js_parser: thin adapter around :mod:`esprima`.

The extractor only needs an ESTree-shaped tree; this module owns decoding and
maps every parser failure to :class:`~js_sifter.errors.ParseError`.
"""

from __future__ import annotations

from typing import Any, Union

import esprima
from esprima.error_handler import Error as EsprimaError

from js_sifter.errors import ParseError

__all__ = ["decode_source", "parse_script"]


def decode_source(source: Union[bytes, str]) -> str:
    """UTF-8 decode with BOM removal; undecodable bytes become U+FFFD."""
    if isinstance(source, str):
        return source
    return source.decode("utf-8-sig", errors="replace")


def parse_script(
    source: Union[bytes, str],
    *,
    source_type: str = "script",
    tolerant: bool = False,
    url: str | None = None,
) -> Any:
    """Parse *source* into an esprima ``Program`` node.

    Parameters
    ----------
    source
        Raw script bytes as fetched, or already decoded text.
    source_type
        ``"script"`` (classic ``<script>``) or ``"module"``.
    tolerant
        Let esprima recover from some early errors instead of failing.
    url
        Location of the script, attached to the raised error.
    """
    text = decode_source(source)
    parse = esprima.parseModule if source_type == "module" else esprima.parseScript
    try:
        return parse(text, tolerant=tolerant)
    except EsprimaError as exc:
        raise ParseError(str(exc), url=url) from exc
    except RecursionError as exc:
        raise ParseError("script nests too deeply to parse", url=url) from exc
    except Exception as exc:  # esprima internals on malformed input
        raise ParseError(f"{type(exc).__name__}: {exc}", url=url) from exc
