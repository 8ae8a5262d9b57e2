"""Core line breaking: fit arbitrary text into a fixed-width column.

WHY: Table cells hold free text (task names, notes) of any length, but a
terminal column is a fixed number of characters wide. This module turns
one string into the sequence of display lines for one column, breaking on
whitespace where it can and splitting long words where it must.

HOW: A greedy fill over the whitespace/word runs from the tokenizer:
  1. Whitespace runs are appended character by character until the line
     is full; the rest continues on the next line. Nothing is collapsed.
  2. A word that fits on the current line is appended.
  3. A word that does not fit and is too short to split moves whole to a
     new line.
  4. A splittable word fills the current line (leaving one column free for
     a hyphen when the column is wide enough), then continues in
     hyphenated chunks until the remainder fits on a line of its own.

RULES:
- Every Line.text is at most `width` characters; a hyphenated line is at
  most `width - 1` characters when `width > 4`.
- Lossless: "".join(line.text for line in lines) == text.
- A word is splittable when split_limit >= width (any overlong word) or
  when it is longer than split_limit. A word exactly `width` long is
  never split; it moves to a fresh line instead.
- The hyphen column is reserved only when width > 4; narrower columns
  split without hyphens.
- width < 1 raises ConfigError at call time, before any line is produced.
- Pure function of its arguments: no I/O, no logging, no shared state.
"""

from typing import Iterator, List

from .models import Category, ConfigError, Line
from .tokenizer import tokenize, whitespace_category

# Columns this narrow or narrower get no hyphen when a word is split.
HYPHEN_MIN_WIDTH = 4

# Split threshold used by the table renderer.
DEFAULT_SPLIT_LIMIT = 7


def is_splittable(word_len: int, width: int, split_limit: int) -> bool:
    """True if a word that overflows the current line may be split mid-word."""
    if word_len == width:
        return False
    return split_limit >= width or word_len > split_limit


def format_to_column(text: str, width: int, split_limit: int) -> Iterator[Line]:
    """Break text into display lines no wider than a column.

    Args:
        text: The text to lay out. Whitespace is preserved as-is.
        width: Column width in characters; must be at least 1.
        split_limit: Words longer than this may be split across lines.
            Ignored once it reaches `width`, at which point any word that
            does not fit may be split.

    Returns:
        A lazy iterator of Line(text, hyphenated) in reading order.

    Raises:
        ConfigError: If width is less than 1.
    """
    if width < 1:
        raise ConfigError("Column width must be at least 1, got {}".format(width))
    return _break_lines(text, width, split_limit)


def _break_lines(text: str, width: int, split_limit: int) -> Iterator[Line]:
    hyphen_space = 1 if width > HYPHEN_MIN_WIDTH else 0
    hyphenate = hyphen_space > 0
    chunk = width - hyphen_space

    line = ""
    for token in tokenize(text, whitespace_category):
        run = token.text

        if token.category is Category.WHITESPACE:
            while run:
                room = width - len(line)
                if room == 0:
                    yield Line(line)
                    line = ""
                    room = width
                line += run[:room]
                run = run[room:]
            continue

        if len(line) + len(run) <= width:
            line += run
            continue

        if not is_splittable(len(run), width, split_limit):
            # Cannot be empty here: an unsplittable word is never wider
            # than the column, so it only overflows a partly filled line.
            yield Line(line)
            line = run
            continue

        if len(line) < chunk:
            head = chunk - len(line)
            yield Line(line + run[:head], hyphenate)
            run = run[head:]
        elif line:
            yield Line(line)

        while len(run) > width:
            yield Line(run[:chunk], hyphenate)
            run = run[chunk:]
        line = run

    if line:
        yield Line(line)


def fit_to_column(text: str, width: int, split_limit: int = DEFAULT_SPLIT_LIMIT) -> List[str]:
    """Return the rendered lines for text, hyphen glyphs included."""
    return [line.render() for line in format_to_column(text, width, split_limit)]
