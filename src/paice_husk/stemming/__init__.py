# paice_husk/stemming/__init__.py
"""
stemming.
=========

Does: Group the rule compiler, the stemming engine, and the shared token/config utilities.
Exports: compile_rules, load_rules, load_default_rules, stem, format_trace,
         is_acceptable, Stemmer, stem_words and the data/error types.
"""

from __future__ import annotations

from .engine import LengthError, StemResult, TraceStep, format_trace, is_acceptable, stem
from .general.token import WordSourceError
from .orchestrator import Stemmer, stem_words
from .rules import (
    GrammarError,
    Rule,
    RuleSourceError,
    RuleTable,
    compile_rules,
    load_default_rules,
    load_rules,
)

__all__ = [
    # rules
    "Rule",
    "RuleTable",
    "GrammarError",
    "RuleSourceError",
    "compile_rules",
    "load_rules",
    "load_default_rules",
    # engine
    "stem",
    "format_trace",
    "is_acceptable",
    "StemResult",
    "TraceStep",
    "LengthError",
    # facade
    "Stemmer",
    "stem_words",
    "WordSourceError",
]
