# File: js_sifter/extract/noise.py
"""js_sifter.extract.noise: turns raw extracted values into accepted output."""

from __future__ import annotations

from pathlib import Path
from typing import AbstractSet, FrozenSet, Iterable, List, Optional, Union

from js_sifter.logger import logger
from js_sifter.stoplist import COMMON_STRINGS
from js_sifter.utils import read_wordlist

__all__ = ["strip_line_breaks", "sift_strings", "load_stoplist"]

_LINE_BREAKS = str.maketrans("", "", "\r\n")


def strip_line_breaks(value: str) -> str:
    return value.translate(_LINE_BREAKS)


def sift_strings(
    values: Iterable[str], stoplist: Optional[AbstractSet[str]] = None
) -> List[str]:
    """Strip line breaks, then drop empty and (when given) stoplisted values.

    Order and duplicates are preserved. Stripping happens first so a second
    pass over the output changes nothing.
    """
    accepted: List[str] = []
    for raw in values:
        value = strip_line_breaks(raw)
        if not value:
            continue
        if stoplist is not None and value in stoplist:
            continue
        accepted.append(value)
    return accepted


def load_stoplist(extra_file: Union[str, Path, None] = None) -> FrozenSet[str]:
    """Built-in stoplist, optionally extended by a newline-separated file."""
    if extra_file is None:
        return COMMON_STRINGS
    extra = read_wordlist(extra_file)
    logger.debug("Stoplist extended with %d entries from %s", len(extra), extra_file)
    return COMMON_STRINGS | frozenset(extra)
