# src/paice_husk/stemming/engine/acceptability.py
"""
acceptability.

Does: Gate every rule application so a stem is never cut below a meaningful form.
Returns: is_acceptable().
"""

from __future__ import annotations

__all__ = ["is_acceptable", "VOWELS", "STEM_VOWELS"]

VOWELS = frozenset("aeiou")
STEM_VOWELS = frozenset("aeiouy")


def is_acceptable(candidate: str) -> bool:
    """
    Does: Vowel-initial stems need at least 2 letters; any other stem needs at
          least 3 letters and one of a/e/i/o/u/y somewhere.
    Returns: bool.
    """
    if not candidate:
        return False
    if candidate[0] in VOWELS:
        return len(candidate) >= 2
    return len(candidate) >= 3 and not STEM_VOWELS.isdisjoint(candidate)
