# task_autocompleter/context/__init__.py
# text handling around the engine: tokenizing and input-box wiring

from .tokenizer import clean_token, tokenize, current_word  # token cleanup
from .composer import InputComposer, replace_current_word  # dropdown/selection logic

__all__ = [
    "clean_token",
    "tokenize",
    "current_word",
    "InputComposer",
    "replace_current_word",
]
