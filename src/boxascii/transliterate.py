"""Box-drawing to ASCII transliteration.

Fonts that lack box-drawing glyphs, or draw them at a width different from
the rest of the cell grid, break the alignment of tables. The rules below
map each glyph to a similar ASCII character without changing the length of
the text, so column positions survive the substitution.
"""

from types import MappingProxyType
from typing import NamedTuple

from boxascii.charsets import (
    BACK_DIAGONALS,
    DIAGONAL_CROSS,
    DOUBLE_HORIZONTAL,
    DOUBLE_JUNCTIONS,
    DOUBLE_VERTICAL,
    FORWARD_DIAGONALS,
    MIXED_JUNCTIONS,
)


class Rule(NamedTuple):
    chars: range | str  # code point range, or a string of literal glyphs
    replacement: str  # one character, or two for (even, odd) code points

    def matches(self, char: str) -> bool:
        if isinstance(self.chars, range):
            return ord(char) in self.chars
        return char in self.chars

    def apply(self, char: str) -> str:
        if len(self.replacement) == 2:
            return self.replacement[ord(char) % 2]
        return self.replacement


# Evaluated in order; the first matching rule wins.
RULES: tuple[Rule, ...] = (
    Rule(range(0x2500, 0x2502), "-"),
    Rule(range(0x2502, 0x2504), "|"),
    Rule(range(0x2504, 0x2506), "-"),
    Rule(range(0x2506, 0x2508), "|"),
    Rule(range(0x2508, 0x250A), "-"),
    Rule(range(0x250A, 0x250C), "|"),
    Rule(range(0x250C, 0x251C), "-"),
    Rule(range(0x251C, 0x2524), "|"),
    Rule(range(0x2524, 0x252C), "|"),
    Rule(range(0x252C, 0x2534), "-"),
    Rule(range(0x2534, 0x253C), "-"),
    Rule(range(0x253C, 0x254C), "+"),
    Rule(range(0x254C, 0x254E), "-"),
    Rule(range(0x254E, 0x2550), "|"),
    Rule(DOUBLE_HORIZONTAL, "="),
    # Double verticals map to "-", not "|"
    Rule(DOUBLE_VERTICAL, "-"),
    Rule(DOUBLE_JUNCTIONS, "="),
    Rule(MIXED_JUNCTIONS, "-"),
    Rule(FORWARD_DIAGONALS, "/"),
    Rule(BACK_DIAGONALS, "\\"),
    Rule(DIAGONAL_CROSS, "X"),
    # Half lines alternate horizontal and vertical
    Rule(range(0x2574, 0x2580), "-|"),
)


def classify(char: str) -> str:
    """Return the ASCII stand-in for a single character, or the character itself."""
    for rule in RULES:
        if rule.matches(char):
            return rule.apply(char)
    return char


def _build_translation() -> dict[int, str]:
    table: dict[int, str] = {}
    for rule in RULES:
        chars = (chr(cp) for cp in rule.chars) if isinstance(rule.chars, range) else rule.chars
        for char in chars:
            table.setdefault(ord(char), rule.apply(char))
    return table


# str.translate table equivalent to running classify over every character
TRANSLATION = MappingProxyType(_build_translation())


def transliterate(text: str) -> str:
    """Replace every box-drawing glyph in text, preserving length and positions."""
    return text.translate(TRANSLATION)
