"""Character-class tokenizer feeding the line breaker.

WHY: Line breaking works on runs of whitespace and runs of word characters,
not on single characters. Splitting the text into such runs up front keeps
the breaking algorithm free of character-level bookkeeping.

HOW: tokenize() walks the text once, asking a classification function for
the category of each character. While the category stays the same the run
grows; a change of category (or the end of the text) closes the run and
yields it as a Token carrying its start offset and sequence position.

RULES:
- tokenize() is a lazy generator; calling it again restarts the sequence.
- Runs are maximal: two consecutive tokens never share a category.
- Lossless: "".join(t.text for t in tokenize(s)) == s for every string s.
- The classifier is called exactly once per character and must be total
  and pure.
- Empty input yields no tokens and raises nothing.
"""

import string
from typing import Callable, Iterator

from .models import Category, Token

Classifier = Callable[[str], Category]

_ASCII_PUNCTUATION = frozenset(string.punctuation)


def whitespace_category(char: str) -> Category:
    """Two-way classifier: whitespace or word."""
    if char.isspace():
        return Category.WHITESPACE
    return Category.WORD


def punctuation_category(char: str) -> Category:
    """Three-way classifier that also splits ASCII punctuation off words."""
    if char.isspace():
        return Category.WHITESPACE
    if char in _ASCII_PUNCTUATION:
        return Category.PUNCTUATION
    return Category.WORD


def tokenize(text: str, classify: Classifier = whitespace_category) -> Iterator[Token]:
    """Split text into maximal runs of same-category characters.

    Args:
        text: The text to tokenize.
        classify: Maps one character to its Category.

    Yields:
        Token objects in source order.
    """
    run_start = 0
    run_category = None
    position = 0

    for offset, char in enumerate(text):
        category = classify(char)
        if run_category is None:
            run_category = category
        elif category != run_category:
            yield Token(
                text=text[run_start:offset],
                category=run_category,
                start_offset=run_start,
                position=position,
            )
            position += 1
            run_start = offset
            run_category = category

    if run_category is not None:
        yield Token(
            text=text[run_start:],
            category=run_category,
            start_offset=run_start,
            position=position,
        )
