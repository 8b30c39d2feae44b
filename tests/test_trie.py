# tests/test_trie.py
# unit tests for the vocabulary trie

from task_autocompleter.core.trie import Trie


def _terminal_count(trie):
    return len(trie.enumerate(trie.root, ""))


def test_insert_and_frequency():
    t = Trie()
    t.insert("milk", 3)
    assert "milk" in t
    assert t.frequency("milk") == 3
    # prefixes of a word are not words themselves
    assert "mil" not in t
    assert t.frequency("mil") == 0


def test_repeated_insert_accumulates_on_one_node():
    t = Trie()
    t.insert("buy", 5)
    t.insert("buy", 2)
    assert t.frequency("buy") == 7
    assert t.enumerate(t.root, "") == [("buy", 7)]


def test_short_words_leave_trie_unchanged():
    t = Trie()
    t.insert("a", 5)
    t.insert("", 5)
    assert _terminal_count(t) == 0
    # no edge was created either
    assert t.root.children.get("a") is None
    assert len(t.root.children) == 0


def test_descend_short_circuits_on_missing_edge():
    t = Trie()
    t.insert("bread", 1)
    assert t.descend("bre") is not None
    assert t.descend("bx") is None
    assert t.descend("breadx") is None
    # lookups must not grow the tree
    assert set(t.root.children) == {"b"}


def test_descend_empty_prefix_is_root():
    t = Trie()
    assert t.descend("") is t.root


def test_enumerate_reconstructs_words_below_prefix():
    t = Trie()
    for w, f in [("meet", 5), ("meeting", 3), ("milk", 3), ("dad", 3)]:
        t.insert(w, f)
    node = t.descend("mee")
    assert sorted(t.enumerate(node, "mee")) == [("meet", 5), ("meeting", 3)]
    assert len(t) == 4


def test_terminal_paths_are_lowercase_words_of_two_or_more():
    t = Trie()
    for w in ["go", "x", "gym", "car"]:
        t.insert(w, 1)
    words = [w for w, _ in t.enumerate(t.root, "")]
    assert sorted(words) == ["car", "go", "gym"]
    assert all(len(w) >= 2 for w in words)


def test_very_long_word_does_not_exhaust_the_stack():
    t = Trie()
    word = "a" * 3000
    t.insert(word, 1)
    t.insert("ab", 2)
    node = t.descend("aa")
    found = dict(t.enumerate(node, "aa"))
    assert found == {word: 1}
    assert len(t) == 2
