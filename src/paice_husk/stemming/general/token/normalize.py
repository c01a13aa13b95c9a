# src/paice_husk/stemming/general/token/normalize.py
# ──────────────────────────────────────────────────────────────
# Word extraction for the stemmer
# ──────────────────────────────────────────────────────────────
"""
normalize.

Does: Split text into maximal runs of ASCII letters and lowercase them, so every
      word handed to the stemming engine is lowercase a-z only.
Returns: iter_words(), iter_file_words(), WordSourceError.
Used by: The Stemmer facade (stem_text) and the CLI word-file reader.
"""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterator

__all__ = [
    "WordSourceError",
    "iter_words",
    "iter_file_words",
]

log = logging.getLogger(__name__)

# ASCII only: accented letters split words the same way punctuation does
_WORD_RE = re.compile(r"[A-Za-z]+")


class WordSourceError(OSError):
    """Raise when a word-list source cannot be opened or read."""


def iter_words(text: str) -> Iterator[str]:
    """
    Does: Yield each run of ASCII letters in `text`, lowercased, in order.
    Returns: Iterator of words ("Don't" -> "don", "t").
    """
    if not isinstance(text, str):
        return
    for m in _WORD_RE.finditer(text):
        yield m.group(0).lower()


def iter_file_words(path: str | os.PathLike[str], *, encoding: str = "utf-8") -> Iterator[str]:
    """
    Does: Read a word-list file line by line and yield its words.
    Raises: WordSourceError if the file cannot be opened or decoded.
    """
    try:
        with open(path, "r", encoding=encoding) as f:
            for line in f:
                yield from iter_words(line)
    except (OSError, UnicodeDecodeError) as e:
        raise WordSourceError(f"Cannot read word file {os.fspath(path)}: {e}") from e
