"""Data models for the column layout engine.

WHY: The tokenizer, the line breaker and the table renderer pass small,
well-defined values between each other. Keeping them in one module gives
every stage the same vocabulary: a Token out of the tokenizer, a Line out
of the line breaker, a ColumnSpec into the table.

HOW: Category is a plain Enum. Token and ColumnSpec are dataclasses; Line is
a NamedTuple so it compares equal to a ``(text, hyphenated)`` tuple and can
be unpacked directly. ConfigError is the single error type of the library.

RULES:
- Token.text is an owned copy of the source span, never modified.
- Offsets and positions are zero-based and counted in characters.
- Line.text never contains the hyphen glyph; render() appends it.
- Python 3.9 compatible (no slots=True, no match/case, no X | Y unions).
"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional

HYPHEN = "-"


class ConfigError(ValueError):
    """Raised for layout configurations that cannot be rendered.

    Covers explicit column widths that overflow the table, columns that
    end up zero characters wide, and ``width < 1`` passed to the line
    breaker.
    """


class Category(Enum):
    """Character classes used to group characters into tokens."""

    WHITESPACE = "whitespace"
    WORD = "word"
    PUNCTUATION = "punctuation"


@dataclass
class Token:
    """A maximal run of characters that share one category.

    Attributes:
        text: The characters of the run.
        category: The category every character in the run belongs to.
        start_offset: Character offset of the first character in the source.
        position: Sequence number of the token (0 for the first token).
    """
    text: str
    category: Category
    start_offset: int
    position: int

    def __len__(self) -> int:
        return len(self.text)


class Line(NamedTuple):
    """One display line produced by the line breaker."""

    text: str
    hyphenated: bool = False

    def render(self) -> str:
        """Return the text with the hyphen glyph appended when split mid-word."""
        if self.hyphenated:
            return self.text + HYPHEN
        return self.text


@dataclass
class ColumnSpec:
    """A table column: its header label and an optional fixed width.

    Columns without a width share whatever the fixed columns leave over.
    """
    label: str
    width: Optional[int] = None
