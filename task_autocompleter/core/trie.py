# trie.py
# Prefix tree indexing task vocabulary with an accumulated frequency per word.
# Sized for tens to low hundreds of words: enumeration walks the whole subtree.

from __future__ import annotations
from collections import defaultdict
from typing import Dict, List, Optional, Tuple

Word = str
Score = int
Candidate = Tuple[Word, Score]

MIN_WORD_LENGTH = 2


class TrieNode:
    """
    A single node in the Trie.
    children: char -> TrieNode
    is_terminal: True if an inserted word ends exactly here
    frequency: accumulated boost of that word (only meaningful when terminal)
    """

    __slots__ = ("children", "is_terminal", "frequency")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = defaultdict(TrieNode)
        self.is_terminal = False
        self.frequency = 0


class Trie:
    """
    Trie storing normalized words for prefix lookup.
    Callers normalize (strip + lowercase) before inserting.
    """

    def __init__(self) -> None:
        self._root = TrieNode()

    @property
    def root(self) -> TrieNode:
        return self._root

    # insertion -----------------------------------------------------
    def insert(self, word: str, boost: int = 1) -> None:
        """
        Add `boost` to the frequency of `word`, creating its path on demand.
        Words shorter than MIN_WORD_LENGTH are ignored.
        """
        if len(word) < MIN_WORD_LENGTH:
            return

        node = self._root
        for ch in word:
            node = node.children[ch]
        node.is_terminal = True
        node.frequency += boost

    # navigation ---------------------------------------------------------
    def descend(self, prefix: str) -> Optional[TrieNode]:
        """Node reached by following `prefix` from the root, or None if any edge is missing."""
        node = self._root
        for ch in prefix:
            # .get() so a miss never creates a node
            nxt = node.children.get(ch)
            if nxt is None:
                return None
            node = nxt
        return node

    def enumerate(self, node: TrieNode, prefix: str) -> List[Candidate]:
        """Every (word, frequency) in the subtree under `node`, words spelled from `prefix`."""
        out: List[Candidate] = []
        self._collect(node, prefix, out)
        return out

    # internal collector ---------------------------------------------------------
    def _collect(self, node: TrieNode, prefix: str, results: List[Candidate]) -> None:
        """DFS with an explicit stack; depth is word length, which has no upper bound."""
        stack = [(node, prefix)]
        while stack:
            current, spelled = stack.pop()
            if current.is_terminal:
                results.append((spelled, current.frequency))
            for ch, child in current.children.items():
                stack.append((child, spelled + ch))

    # convenience/inspection -----------------------------------------------------
    def frequency(self, word: str) -> int:
        node = self.descend(word)
        if node is None or not node.is_terminal:
            return 0
        return node.frequency

    def __contains__(self, word: str) -> bool:
        node = self.descend(word)
        return node is not None and node.is_terminal

    def __len__(self) -> int:
        """Number of distinct words (O(N) walk)."""
        return len(self.enumerate(self._root, ""))
