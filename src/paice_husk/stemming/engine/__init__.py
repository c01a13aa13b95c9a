# paice_husk/stemming/engine/__init__.py
"""
engine.
=======

Does: Provide the acceptability gate and the iterative stemming loop.
Exports: is_acceptable, stem, format_trace, StemResult, TraceStep, LengthError
"""

from __future__ import annotations

from .acceptability import is_acceptable
from .core import MAX_WORD_LENGTH, LengthError, StemResult, TraceStep, format_trace, stem

__all__ = [
    "is_acceptable",
    "stem",
    "format_trace",
    "StemResult",
    "TraceStep",
    "LengthError",
    "MAX_WORD_LENGTH",
]
