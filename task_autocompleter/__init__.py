"""
task_autocompleter

A task list with word-level autocompletion learned from what you type.

    from task_autocompleter import AutocompleteEngine
    engine = AutocompleteEngine.from_records(["Buy milk and bread today"])
    engine.search("br")   # ['bread']
"""

from .core import AutocompleteEngine, Trie, TrieNode
from .tasks import Task, TaskList

__all__ = ["AutocompleteEngine", "Trie", "TrieNode", "Task", "TaskList"]
__version__ = "0.1.0"
