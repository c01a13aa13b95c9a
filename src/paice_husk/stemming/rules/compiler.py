# src/paice_husk/stemming/rules/compiler.py
from __future__ import annotations

"""
rules.compiler
==============

Does: Compile the Paice/Husk rule grammar into a letter-indexed RuleTable.
Returns: compile_rules(), load_rules(), load_default_rules() and the compiler errors.
Used by: The Stemmer facade, the CLI, and tests.

Grammar, one entry per line, whitespace between entries ignored:

    <reversed suffix letters>[*][<remove digits>][<append letters>]('>' | '.')

Anything after the terminator up to end-of-line is a comment. The entry
"end0." is a pseudo-rule that ends compilation; whatever follows is never read.
"""

import io
import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources
from typing import TextIO

from paice_husk.stemming.rules.types import BUCKET_LETTERS, Rule, RuleTable

# ── Public surface ───────────────────────────────────────────────────────────
__all__ = [
    "GrammarError",
    "RuleSourceError",
    "compile_rules",
    "load_rules",
    "load_default_rules",
    "DEFAULT_RULES_RESOURCE",
]
__docformat__ = "google"

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)

DEFAULT_RULES_RESOURCE = "paice_husk_rules.txt"

_DIGITS = "0123456789"
_CONTINUE = ">"
_STOP = "."
_INTACT = "*"
_END_TEXT = "end0."


# ── Exceptions ───────────────────────────────────────────────────────────────
class GrammarError(ValueError):
    """Raise when a rule entry is malformed; no partial table is ever returned."""

    def __init__(self, reason: str, *, entry: int, line: int, column: int, char: str = ""):
        self.reason = reason
        self.entry = entry
        self.line = line
        self.column = column
        self.char = char
        shown = repr(char) if char else "end of input"
        super().__init__(
            f"{reason} at entry {entry} (line {line}, column {column}): found {shown}"
        )


class RuleSourceError(OSError):
    """Raise when a rule source cannot be opened or read."""


# ─────────────────────────────────────────────────────────────────────────────
# Character scanner
# ─────────────────────────────────────────────────────────────────────────────

class _Scanner:
    """Single-character lookahead over a text stream, tracking line/column."""

    def __init__(self, stream: TextIO):
        self._stream = stream
        self.line = 1
        self.column = 0
        self.current = ""
        self.advance()

    def advance(self) -> str:
        if self.current == "\n":
            self.line += 1
            self.column = 0
        self.current = self._stream.read(1)
        if self.current:
            self.column += 1
        return self.current

    def take_while(self, allowed: str) -> str:
        chars: list[str] = []
        while self.current and self.current in allowed:
            chars.append(self.current)
            self.advance()
        return "".join(chars)

    def skip_whitespace(self) -> None:
        while self.current and self.current.isspace():
            self.advance()

    def skip_line(self) -> None:
        while self.current and self.current != "\n":
            self.advance()


@dataclass
class _Entry:
    """Raw pieces of one grammar entry, in source spelling."""

    letters: str
    intact: str
    digits: str
    append: str
    terminator: str

    @property
    def text(self) -> str:
        return f"{self.letters}{self.intact}{self.digits}{self.append}{self.terminator}"


def _format_label(ordinal: int, text: str) -> str:
    return f"({ordinal}:{text})"


def _read_entry(scanner: _Scanner, ordinal: int) -> _Entry:
    """Does: Parse one entry starting at its first (bucket) character. Returns: _Entry."""
    first = scanner.current
    if first not in BUCKET_LETTERS:
        raise GrammarError(
            "invalid rule start (expected a-z)",
            entry=ordinal, line=scanner.line, column=scanner.column, char=first,
        )

    letters = scanner.take_while(BUCKET_LETTERS)
    intact = ""
    if scanner.current == _INTACT:
        intact = _INTACT
        scanner.advance()
    digits = scanner.take_while(_DIGITS)
    append = scanner.take_while(BUCKET_LETTERS)

    terminator = scanner.current
    if terminator not in (_CONTINUE, _STOP):
        raise GrammarError(
            "invalid rule terminator (expected '>' or '.')",
            entry=ordinal, line=scanner.line, column=scanner.column, char=terminator,
        )
    return _Entry(letters, intact, digits, append, terminator)


def _to_rule(entry: _Entry, ordinal: int) -> Rule:
    return Rule(
        suffix=entry.letters[::-1],
        intact_only=bool(entry.intact),
        remove_count=int(entry.digits) if entry.digits else 0,
        append=entry.append,
        continues=entry.terminator == _CONTINUE,
        label=_format_label(ordinal, entry.text),
        ordinal=ordinal,
    )


# =============================================================================
# Public API
# =============================================================================

def compile_rules(source: str | TextIO) -> RuleTable:
    """
    Does: Compile rule grammar text (or a text stream) into a RuleTable.
    Returns: The complete table.
    Raises: GrammarError on the first malformed entry.
    """
    stream = io.StringIO(source) if isinstance(source, str) else source
    scanner = _Scanner(stream)
    rules: list[Rule] = []
    terminated = False

    ordinal = 0
    while True:
        scanner.skip_whitespace()
        if not scanner.current:
            break

        ordinal += 1
        entry = _read_entry(scanner, ordinal)
        label = _format_label(ordinal, entry.text)
        if label == _format_label(ordinal, _END_TEXT):
            terminated = True
            break

        rules.append(_to_rule(entry, ordinal))
        scanner.skip_line()

    log.debug(
        "Compiled %d rules (%s)",
        len(rules),
        "end pseudo-rule reached" if terminated else "end of input",
    )
    return RuleTable.from_rules(rules)


def load_rules(path: str | os.PathLike[str], *, encoding: str = "utf-8") -> RuleTable:
    """Does: Open a rule file and compile it. Returns: RuleTable. Raises: RuleSourceError."""
    try:
        with open(path, "r", encoding=encoding) as f:
            table = compile_rules(f)
    except (OSError, UnicodeDecodeError) as e:
        raise RuleSourceError(f"Cannot read rule file {os.fspath(path)}: {e}") from e
    log.info("Loaded %d rules from %s", len(table), os.fspath(path))
    return table


@lru_cache(maxsize=1)
def load_default_rules() -> RuleTable:
    """Does: Compile the bundled classic Paice/Husk ruleset once. Returns: RuleTable."""
    ref = resources.files("paice_husk").joinpath("data").joinpath(DEFAULT_RULES_RESOURCE)
    try:
        with ref.open("r", encoding="utf-8") as f:
            return compile_rules(f)
    except OSError as e:
        raise RuleSourceError(f"Cannot read bundled rules {DEFAULT_RULES_RESOURCE}: {e}") from e
