# src/paice_husk/stemming/rules/types.py
from __future__ import annotations

"""
rules.types

Does: Define the compiled rule model: one Rule per grammar entry, and a RuleTable
      holding 26 read-only buckets keyed by the last letter of each rule's suffix.
Returns: Rule, RuleTable, BUCKET_LETTERS.
Used by: The rule compiler (producer) and the stemming engine (read-only consumer).
"""

import string
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

# ── Public surface ───────────────────────────────────────────────────────────
__all__ = ["Rule", "RuleTable", "BUCKET_LETTERS"]
__docformat__ = "google"

BUCKET_LETTERS: str = string.ascii_lowercase


def _is_lower_ascii(s: str) -> bool:
    return all(ch in BUCKET_LETTERS for ch in s)


@dataclass(frozen=True)
class Rule:
    """One compiled grammar entry.

    `suffix` reads left-to-right as it appears at the end of a word (the grammar
    spells it reversed). `label` is the entry's trace identifier, e.g. "(4:city3s.)".
    """

    suffix: str
    intact_only: bool
    remove_count: int
    append: str
    continues: bool
    label: str
    ordinal: int = 0

    def __post_init__(self) -> None:
        if not self.suffix or not _is_lower_ascii(self.suffix):
            raise ValueError(f"rule suffix must be non-empty lowercase ASCII: {self.suffix!r}")
        if not _is_lower_ascii(self.append):
            raise ValueError(f"rule append must be lowercase ASCII: {self.append!r}")
        if self.remove_count < 0:
            raise ValueError(f"rule remove_count must be >= 0: {self.remove_count}")

    @property
    def bucket(self) -> str:
        return self.suffix[-1]

    def matches(self, stem: str, intact: bool) -> bool:
        """Does: Check the intact-only guard and the exact tail match. Returns: bool."""
        if self.intact_only and not intact:
            return False
        if len(self.suffix) > len(stem):
            return False
        return stem.endswith(self.suffix)

    def apply(self, stem: str) -> str:
        """Does: Remove trailing characters (clamped to the stem) then append. Returns: str."""
        keep = len(stem) - min(self.remove_count, len(stem))
        return stem[:keep] + self.append


@dataclass(frozen=True)
class RuleTable:
    """Letter-indexed, ordered, immutable rule buckets.

    Order inside a bucket is definition order and decides which rule wins
    when several could match.
    """

    buckets: Mapping[str, tuple[Rule, ...]] = field(
        default_factory=lambda: MappingProxyType({letter: () for letter in BUCKET_LETTERS})
    )

    @classmethod
    def from_rules(cls, rules: Iterable[Rule]) -> RuleTable:
        """Does: Group rules by bucket letter, keeping their order. Returns: RuleTable."""
        grouped: dict[str, list[Rule]] = {letter: [] for letter in BUCKET_LETTERS}
        for rule in rules:
            grouped[rule.bucket].append(rule)
        return cls(MappingProxyType({k: tuple(v) for k, v in grouped.items()}))

    def bucket(self, letter: str) -> tuple[Rule, ...]:
        return self.buckets.get(letter, ())

    def __len__(self) -> int:
        return sum(len(rules) for rules in self.buckets.values())

    def __iter__(self) -> Iterator[Rule]:
        # definition order across buckets
        return iter(sorted((r for rs in self.buckets.values() for r in rs), key=lambda r: r.ordinal))
