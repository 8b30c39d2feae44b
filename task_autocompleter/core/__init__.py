"""
task_autocompleter.core

The completion engine behind the task input box.
Contains:
 - the vocabulary trie with per-word frequency (Trie, TrieNode)
 - the seeded, self-learning engine on top of it (AutocompleteEngine)
 - the built-in action/object vocabularies and their boost tiers
"""

from .trie import Trie, TrieNode
from .engine import AutocompleteEngine
from .seeds import ACTION_BOOST, OBJECT_BOOST, LEARN_BOOST, SEED_ACTIONS, SEED_OBJECTS

__all__ = [
    "Trie",
    "TrieNode",
    "AutocompleteEngine",
    "ACTION_BOOST",
    "OBJECT_BOOST",
    "LEARN_BOOST",
    "SEED_ACTIONS",
    "SEED_OBJECTS",
]
