# task_autocompleter/context/tokenizer.py
# whitespace tokenizer: punctuation is only stripped from token edges, so "don't" survives

# same floor as the trie: shorter words are never indexed
MIN_WORD_LENGTH = 2


def clean_token(token: str) -> str:
    """Strip leading/trailing non-alphanumeric characters, then lowercase."""
    start, end = 0, len(token)
    while start < end and not token[start].isalnum():
        start += 1
    while end > start and not token[end - 1].isalnum():
        end -= 1
    return token[start:end].lower()


def tokenize(text: str):
    """
    Return the cleaned words of `text` that are long enough to index.
    Single letters and punctuation remnants are dropped.
    """
    if not text:
        return []
    out = []
    for t in text.split():
        word = clean_token(t)
        if len(word) >= MIN_WORD_LENGTH:
            out.append(word)
    return out


def current_word(buffer: str) -> str:
    """
    The word being typed: last whitespace-delimited token of the buffer.
    Empty once the buffer ends in whitespace (the word has been finished).
    """
    if not buffer or buffer[-1].isspace():
        return ""
    return buffer.split()[-1]
