"""Unit tests for the character-class tokenizer.

WHY: The line breaker trusts the tokenizer to hand it maximal runs with
correct offsets. A run split in two, or an offset off by one, shifts every
line break after it.

HOW: Tests check token text, category, offset and position for mixed
input, the empty and single-character edge cases, losslessness, and that a
fresh call restarts the sequence.

RULES:
- Tokens compare by value (dataclass equality).
- Offsets are in characters, not bytes.
"""

import pytest

from column_layout import Category, Token, punctuation_category, tokenize, whitespace_category


class TestTokenize:
    """tokenize() with the punctuation-aware classifier."""

    def test_hello_world(self):
        tokens = list(tokenize("Hello, World!", punctuation_category))
        assert tokens == [
            Token("Hello", Category.WORD, 0, 0),
            Token(",", Category.PUNCTUATION, 5, 1),
            Token(" ", Category.WHITESPACE, 6, 2),
            Token("World", Category.WORD, 7, 3),
            Token("!", Category.PUNCTUATION, 12, 4),
        ]

    def test_empty_string(self):
        assert list(tokenize("")) == []

    def test_one_token(self):
        assert list(tokenize("Hello")) == [Token("Hello", Category.WORD, 0, 0)]

    def test_single_character(self):
        assert list(tokenize(" ")) == [Token(" ", Category.WHITESPACE, 0, 0)]

    def test_default_classifier_is_whitespace(self):
        tokens = list(tokenize("don't  stop"))
        assert [(t.text, t.category) for t in tokens] == [
            ("don't", Category.WORD),
            ("  ", Category.WHITESPACE),
            ("stop", Category.WORD),
        ]

    def test_offsets_count_characters(self):
        tokens = list(tokenize("här är"))
        assert [t.start_offset for t in tokens] == [0, 3, 4]

    def test_tabs_and_newlines_are_whitespace(self):
        tokens = list(tokenize("a\t\nb"))
        assert [t.text for t in tokens] == ["a", "\t\n", "b"]
        assert tokens[1].category is Category.WHITESPACE


class TestTokenizeGuarantees:
    """Properties the line breaker relies on."""

    @pytest.mark.parametrize("text", [
        "the quick  brown fox   jumped   ",
        "   leading",
        "trailing   ",
        "Hello, World!",
        "x",
    ])
    def test_lossless(self, text):
        assert "".join(t.text for t in tokenize(text, punctuation_category)) == text

    def test_runs_are_maximal(self):
        tokens = list(tokenize("a  b...c  ", punctuation_category))
        for left, right in zip(tokens, tokens[1:]):
            assert left.category != right.category

    def test_positions_are_sequential(self):
        tokens = list(tokenize("one two three"))
        assert [t.position for t in tokens] == list(range(len(tokens)))

    def test_is_lazy(self):
        seen = []

        def classify(char):
            seen.append(char)
            return whitespace_category(char)

        tokens = tokenize("ab cd", classify)
        assert seen == []
        first = next(tokens)
        assert first.text == "ab"
        assert len(seen) < 5

    def test_classifier_called_once_per_character(self):
        calls = []

        def classify(char):
            calls.append(char)
            return whitespace_category(char)

        list(tokenize("ab cd", classify))
        assert calls == list("ab cd")

    def test_fresh_call_restarts(self):
        text = "the quick brown fox"
        assert list(tokenize(text)) == list(tokenize(text))

    def test_token_len(self):
        assert len(Token("abc", Category.WORD, 0, 0)) == 3
