"""
paice_husk
==========

Does: Root package for the Paice/Husk suffix-stripping stemmer.
Returns: Re-exports the everyday API (Stemmer, stem_words, compile_rules, load_rules,
         load_default_rules, stem, is_acceptable and the error types).
Used by: Library callers and the `paice-husk` command.
"""

from .stemming import (
    GrammarError,
    LengthError,
    Rule,
    RuleSourceError,
    RuleTable,
    StemResult,
    Stemmer,
    TraceStep,
    WordSourceError,
    compile_rules,
    format_trace,
    is_acceptable,
    load_default_rules,
    load_rules,
    stem,
    stem_words,
)

__all__ = [
    "GrammarError",
    "LengthError",
    "Rule",
    "RuleSourceError",
    "RuleTable",
    "StemResult",
    "Stemmer",
    "TraceStep",
    "WordSourceError",
    "compile_rules",
    "format_trace",
    "is_acceptable",
    "load_default_rules",
    "load_rules",
    "stem",
    "stem_words",
]
__version__ = "1.0.0"
__docformat__ = "google"
