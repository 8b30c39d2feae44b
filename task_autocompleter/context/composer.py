# task_autocompleter/context/composer.py
# glue between an input box and the engine: what to query, when to show
# the dropdown, how a chosen suggestion rewrites the buffer

from __future__ import annotations
from typing import List, Optional

from .tokenizer import current_word


def replace_current_word(buffer: str, word: str) -> str:
    """Swap the last token of `buffer` for `word` and add a trailing space."""
    if not buffer or buffer[-1].isspace():
        return f"{buffer}{word} "
    cut = len(buffer.rstrip())
    while cut > 0 and not buffer[cut - 1].isspace():
        cut -= 1
    return f"{buffer[:cut]}{word} "


class InputComposer:
    """
    Tracks the suggestion list for one input buffer.
    engine: anything with search(prefix, limit) and learn(text)
    """

    def __init__(self, engine, max_suggestions: int = 5, min_query_length: int = 2):
        self.engine = engine
        self.max_suggestions = max_suggestions
        self.min_query_length = min_query_length
        self.suggestions: List[str] = []

    @property
    def visible(self) -> bool:
        return bool(self.suggestions)

    def on_change(self, buffer: str) -> List[str]:
        """Refresh suggestions for the word being typed; empty means hide the dropdown."""
        query = current_word(buffer)
        if len(query) < self.min_query_length:
            self.suggestions = []
        else:
            self.suggestions = self.engine.search(query, self.max_suggestions)
        return self.suggestions

    def select(self, buffer: str, word: str) -> str:
        """Apply a chosen suggestion to `buffer` and close the dropdown."""
        self.suggestions = []
        return replace_current_word(buffer, word)

    def select_index(self, buffer: str, index: int) -> Optional[str]:
        """Like select() but by dropdown position; None when out of range."""
        if not 0 <= index < len(self.suggestions):
            return None
        return self.select(buffer, self.suggestions[index])

    def commit(self, text: str) -> Optional[str]:
        """Learn from a finished record; returns the trimmed text, or None if blank."""
        self.suggestions = []
        text = text.strip()
        if not text:
            return None
        self.engine.learn(text)
        return text
