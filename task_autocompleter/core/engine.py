# engine.py
"""
AutocompleteEngine - word-level completion for task text.

Purpose:
 - Own the vocabulary trie
 - Seed it with fixed action/object vocabularies (boost 5 / 3)
 - Learn from free text (boost 1 per qualifying word)
 - Answer prefix queries with frequency-ranked top-K words

Every operation degrades silently: short tokens are dropped and unknown
prefixes give an empty list, nothing here raises to the caller.
Frequencies only ever grow; there is no deletion.
"""

from __future__ import annotations
from typing import Iterable, List, Sequence

from task_autocompleter.context.tokenizer import tokenize
from task_autocompleter.core.seeds import (
    ACTION_BOOST,
    LEARN_BOOST,
    OBJECT_BOOST,
    SEED_ACTIONS,
    SEED_OBJECTS,
)
from task_autocompleter.core.trie import Candidate, Trie, TrieNode
from task_autocompleter.utils.logger_utils import log

DEFAULT_LIMIT = 5


def _rank_key(candidate: Candidate):
    # frequency descending, then alphabetical for equal frequencies
    word, freq = candidate
    return (-freq, word)


class AutocompleteEngine:
    """Trie-backed completion engine.

    Public API:
      - insert(word, boost) -> None
      - search(prefix, limit=5) -> List[str]
      - learn(text) -> None
      - vocabulary() -> List[(word, frequency)]
    """

    def __init__(
        self,
        seed_actions: Sequence[str] = SEED_ACTIONS,
        seed_objects: Sequence[str] = SEED_OBJECTS,
    ) -> None:
        self._trie = Trie()
        self.seed_actions = tuple(seed_actions)
        self.seed_objects = tuple(seed_objects)

        for word in self.seed_actions:
            self.insert(word, ACTION_BOOST)
        for word in self.seed_objects:
            self.insert(word, OBJECT_BOOST)
        log.debug(
            f"[AutocompleteEngine] seeded {len(self.seed_actions)} actions, "
            f"{len(self.seed_objects)} objects"
        )

    @classmethod
    def from_records(cls, records: Iterable[str], **kwargs) -> "AutocompleteEngine":
        """Seeded engine that has also learned from every existing record text."""
        engine = cls(**kwargs)
        count = 0
        for text in records:
            engine.learn(text)
            count += 1
        log.info(f"[AutocompleteEngine] learned from {count} existing records")
        return engine

    @property
    def root(self) -> TrieNode:
        return self._trie.root

    # mutation ---------------------------------------------------------
    def insert(self, word: str, boost: int) -> None:
        """Normalize `word` and add `boost` to its frequency (no-op below two chars)."""
        self._trie.insert(word.strip().lower(), boost)

    def learn(self, text: str) -> None:
        """Boost every qualifying word of `text` by one."""
        words = tokenize(text)
        for word in words:
            self._trie.insert(word, LEARN_BOOST)
        if words:
            log.debug(f"[AutocompleteEngine] learned {len(words)} words")

    # queries ---------------------------------------------------------
    def search(self, prefix: str, limit: int = DEFAULT_LIMIT) -> List[str]:
        """
        Up to `limit` words starting with `prefix` (case-insensitive),
        highest frequency first, ties alphabetical.
        """
        prefix = prefix.strip().lower()
        if not prefix or limit <= 0:
            return []

        node = self._trie.descend(prefix)
        if node is None:
            return []

        ranked = sorted(self._trie.enumerate(node, prefix), key=_rank_key)
        return [word for word, _ in ranked[:limit]]

    def frequency(self, word: str) -> int:
        return self._trie.frequency(word.strip().lower())

    def vocabulary(self) -> List[Candidate]:
        """All indexed (word, frequency) pairs in ranking order."""
        return sorted(self._trie.enumerate(self.root, ""), key=_rank_key)

    def __contains__(self, word: str) -> bool:
        return word.strip().lower() in self._trie

    def __len__(self) -> int:
        return len(self._trie)
