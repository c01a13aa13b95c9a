# orchestrator.py
from __future__ import annotations

"""
orchestrator.py
===============

Does: High-level stemming API around one compiled, immutable RuleTable: stem single
      words (optionally traced), free text, and word batches sharded across threads.
Returns:
  - Stemmer(table=None, settings=None)
      .stem(word) -> str
      .stem_with_trace(word) -> StemResult
      .stem_text(text) -> list[str]
      .stem_many(words, workers=None) -> list[str]
  - stem_words(*words) -> list[str] on a shared default Stemmer
Used by: The CLI, library callers, and tests.
"""

import logging
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from functools import lru_cache
from typing import Callable, List, Optional

from paice_husk.stemming.engine.core import StemResult, format_trace, stem
from paice_husk.stemming.general.token.normalize import iter_words
from paice_husk.stemming.general.utils.load_config import StemmerSettings
from paice_husk.stemming.general.utils.log import debug, enabled
from paice_husk.stemming.rules.compiler import load_default_rules, load_rules
from paice_husk.stemming.rules.types import RuleTable

__all__ = ["Stemmer", "stem_words", "get_default_stemmer"]

log = logging.getLogger(__name__)


class Stemmer:
    """Stem words against one RuleTable shared read-only by every call and thread."""

    def __init__(
        self,
        table: Optional[RuleTable] = None,
        *,
        settings: Optional[StemmerSettings] = None,
    ):
        self.settings = settings or StemmerSettings()
        if table is None:
            if self.settings.rules_file:
                table = load_rules(self.settings.rules_file)
            else:
                table = load_default_rules()
        self.table = table

        # lru_cache is thread-safe; cache_size=0 disables it
        self._cached_stem: Callable[[str], str]
        if self.settings.cache_size:
            self._cached_stem = lru_cache(maxsize=self.settings.cache_size)(self._stem_uncached)
        else:
            self._cached_stem = self._stem_uncached

        log.debug(
            "Stemmer ready: %d rules, max_length=%s, overflow=%s, cache_size=%d",
            len(table),
            self.settings.max_length,
            self.settings.overflow,
            self.settings.cache_size,
        )

    def _run(self, word: str, trace: bool) -> StemResult:
        return stem(
            word,
            self.table,
            trace=trace,
            max_length=self.settings.max_length,
            overflow=self.settings.overflow,
        )

    def _stem_uncached(self, word: str) -> str:
        return self._run(word, trace=False).stem

    def stem(self, word: str) -> str:
        """
        Does: Stem one lowercase word. With the 'stem' debug topic on, every call
              (cached or not) runs traced and prints its rule trace.
        Returns: Its stem (the word itself if unstemmable).
        """
        if enabled("stem"):
            result = self._run(word, trace=True)
            debug(format_trace(result.trace) or f"{word} (unacceptable)", topic="stem")
            return result.stem
        return self._cached_stem(word)

    def stem_with_trace(self, word: str) -> StemResult:
        """Does: Stem one word and keep the applied rules. Returns: StemResult with a trace."""
        return self._run(word, trace=True)

    def stem_text(self, text: str) -> List[str]:
        """Does: Split text into lowercase ASCII words and stem each. Returns: list of stems."""
        return [self.stem(w) for w in iter_words(text)]

    def stem_many(self, words: Iterable[str], workers: Optional[int] = None) -> List[str]:
        """
        Does: Stem a batch of words, preserving input order.
              With workers > 1 the batch is spread over a thread pool; the table
              needs no locking since nothing writes to it after compilation.
        Returns: list of stems aligned with `words`.
        """
        n_workers = workers if workers is not None else self.settings.workers
        if n_workers <= 1:
            return [self.stem(w) for w in words]
        with ThreadPoolExecutor(max_workers=n_workers) as pool:
            return list(pool.map(self.stem, words))


@lru_cache(maxsize=1)
def get_default_stemmer() -> Stemmer:
    """Does: Build (once) a Stemmer over the bundled ruleset. Returns: Stemmer."""
    return Stemmer()


def stem_words(*words: str) -> List[str]:
    """Does: Stem each argument with the bundled ruleset. Returns: list of stems."""
    stemmer = get_default_stemmer()
    return [stemmer.stem(w) for w in words]
