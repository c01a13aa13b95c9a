# src/paice_husk/stemming/engine/core.py
from __future__ import annotations

"""
engine.core
===========

Does: Reduce one lowercase word to its stem by repeatedly applying the first
      acceptable rule of the bucket keyed by the stem's last letter.
Returns: stem(), StemResult, TraceStep, format_trace(), LengthError.
Used by: The Stemmer facade and the CLI.

Loop state is (current, intact, should_restem). A winning rule clears `intact`;
its terminator decides whether the loop runs again ('>') or stops ('.').
Matching is greedy: once a rule in the bucket wins, later rules are not tried.
"""

import logging
from typing import Literal, NamedTuple, Optional, Tuple

from paice_husk.stemming.engine.acceptability import is_acceptable
from paice_husk.stemming.rules.types import RuleTable

# ── Public surface ───────────────────────────────────────────────────────────
__all__ = [
    "MAX_WORD_LENGTH",
    "Overflow",
    "LengthError",
    "TraceStep",
    "StemResult",
    "stem",
    "format_trace",
]
__docformat__ = "google"

log = logging.getLogger(__name__)

MAX_WORD_LENGTH = 254

Overflow = Literal["truncate", "reject"]


class LengthError(ValueError):
    """Raise when a word exceeds max_length and overflow='reject'."""


class TraceStep(NamedTuple):
    """One trace entry; the seed entry has label None and the original word."""

    label: Optional[str]
    stem: str


class StemResult(NamedTuple):
    stem: str
    trace: Optional[Tuple[TraceStep, ...]] = None


def _fit(word: str, max_length: Optional[int], overflow: Overflow) -> str:
    if max_length is None or len(word) <= max_length:
        return word
    if overflow == "reject":
        raise LengthError(f"word is {len(word)} characters long (max {max_length})")
    if overflow != "truncate":
        raise ValueError(f"Unknown overflow policy '{overflow}'")
    return word[:max_length]


def stem(
    word: str,
    table: RuleTable,
    *,
    trace: bool = False,
    max_length: Optional[int] = MAX_WORD_LENGTH,
    overflow: Overflow = "truncate",
) -> StemResult:
    """
    Does: Run the match/validate/apply/restem loop over `word`.
    Returns: StemResult(stem, trace). `trace` is None unless requested; when requested
             it starts with TraceStep(None, word) for an acceptable word and is empty
             for an unacceptable one.
    Raises: LengthError only for over-long input with overflow='reject'.
    """
    current = _fit(word, max_length, overflow)
    steps: list[TraceStep] = []

    if not is_acceptable(current):
        return StemResult(current, () if trace else None)

    if trace:
        steps.append(TraceStep(None, current))

    intact = True
    should_restem = True
    while should_restem:
        should_restem = False
        for rule in table.bucket(current[-1]):
            if not rule.matches(current, intact):
                continue
            candidate = rule.apply(current)
            if max_length is not None:
                candidate = candidate[:max_length]
            if not is_acceptable(candidate):
                continue

            log.debug("%s %s -> %s", rule.label, current, candidate)
            current = candidate
            intact = False
            if trace:
                steps.append(TraceStep(rule.label, current))
            should_restem = rule.continues
            break

    return StemResult(current, tuple(steps) if trace else None)


def format_trace(trace: Optional[Tuple[TraceStep, ...]]) -> str:
    """Does: Render a trace as 'word =(n:text)=> stem ...'. Returns: '' for an empty trace."""
    if not trace:
        return ""
    parts = [trace[0].stem]
    for step in trace[1:]:
        parts.append(f" ={step.label}=> {step.stem}")
    return "".join(parts)
