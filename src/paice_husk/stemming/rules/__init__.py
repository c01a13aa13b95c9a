# paice_husk/stemming/rules/__init__.py
"""
rules.
======

Does: Provide the compiled rule model and the grammar compiler.
Exports: Rule, RuleTable, compile_rules, load_rules, load_default_rules,
         GrammarError, RuleSourceError
"""

from __future__ import annotations

from .compiler import (
    GrammarError,
    RuleSourceError,
    compile_rules,
    load_default_rules,
    load_rules,
)
from .types import Rule, RuleTable

__all__ = [
    "Rule",
    "RuleTable",
    "compile_rules",
    "load_rules",
    "load_default_rules",
    "GrammarError",
    "RuleSourceError",
]
