# paice_husk/stemming/general/token/__init__.py
"""
token.
=====

Does: Provide word extraction for stemming input.
Exports: iter_words, iter_file_words, WordSourceError
"""

from __future__ import annotations

from .normalize import WordSourceError, iter_file_words, iter_words

__all__ = ["iter_words", "iter_file_words", "WordSourceError"]
