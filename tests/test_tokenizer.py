from __future__ import annotations

from index.tokenizer import tokenize


def test_tokenize_lowercases_and_splits_on_punctuation():
    text = 'Hello, World! (foo) [bar] {baz} "q" \'x\'; a:b?'
    assert tokenize(text) == ["hello", "world", "foo", "bar", "baz", "q", "x", "a", "b"]


def test_tokenize_keeps_characters_outside_the_split_class():
    assert tokenize("state-of-the-art c++ v2_final") == ["state-of-the-art", "c++", "v2_final"]


def test_tokenize_empty_and_separator_only_input():
    assert tokenize("") == []
    assert tokenize("  \t\n ... !? ") == []


def test_tokenize_is_deterministic_and_keeps_order():
    text = "The cat saw the other cat.\nThe end"
    first = tokenize(text)
    assert first == tokenize(text)
    assert first == ["the", "cat", "saw", "the", "other", "cat", "the", "end"]
