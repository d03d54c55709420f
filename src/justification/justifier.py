# This module reformats plain text into fully justified lines of a fixed width.
# It exists so the API and the offline CLI share one pure text-to-text transform.
# Paragraphs are packed greedily and padded so every non-terminal line hits the exact width.
# The transform only changes whitespace; words are never split, truncated, or merged.

from __future__ import annotations

import re
from typing import Final

LINE_WIDTH: Final[int] = 80
BLANK_LINE_SEPARATOR: Final[str] = "\n\n"
NEWLINE_SEPARATOR: Final[str] = "\n"

_PARAGRAPH_BOUNDARY_RE = re.compile(r"\n\s*\n")
_LINE_ENDING_RE = re.compile(r"\r\n?")


def normalize_text(text: str) -> str:
    """Replace tabs with spaces, unify line endings, and trim the document."""

    return _LINE_ENDING_RE.sub("\n", text.replace("\t", " ")).strip()


def split_paragraphs(text: str) -> list[str]:
    normalized = normalize_text(text)
    if not normalized:
        return []
    paragraphs = _PARAGRAPH_BOUNDARY_RE.split(normalized)
    return [paragraph for paragraph in paragraphs if paragraph.strip()]


def extract_words(paragraph: str) -> list[str]:
    return paragraph.replace("\n", " ").split()


def distribute_spaces(words: list[str], char_count: int, width: int = LINE_WIDTH) -> str:
    """Pad a closed line to exactly `width` characters.

    Extra spaces go to the leftmost gaps first. A single word has no gap to
    pad and is returned as-is, which is how oversized words pass through.
    """

    if len(words) <= 1:
        return words[0] if words else ""

    gaps = len(words) - 1
    base, remainder = divmod(width - char_count, gaps)

    parts: list[str] = []
    for index, word in enumerate(words[:-1]):
        parts.append(word)
        parts.append(" " * (base + (1 if index < remainder else 0)))
    parts.append(words[-1])
    return "".join(parts)


def pack_lines(words: list[str], width: int = LINE_WIDTH) -> list[str]:
    """Greedily pack words into justified lines plus one left-aligned terminal line."""

    lines: list[str] = []
    current: list[str] = []
    char_count = 0

    for word in words:
        # len(current) counts the mandatory single spaces the new word would add.
        if current and char_count + len(word) + len(current) > width:
            lines.append(distribute_spaces(current, char_count, width))
            current = [word]
            char_count = len(word)
        else:
            current.append(word)
            char_count += len(word)

    if current:
        lines.append(" ".join(current))
    return lines


def justify_text(
    text: str,
    *,
    width: int = LINE_WIDTH,
    paragraph_separator: str = BLANK_LINE_SEPARATOR,
) -> str:
    """Justify `text` to `width` columns, keeping paragraph order."""

    rendered: list[str] = []
    for paragraph in split_paragraphs(text):
        words = extract_words(paragraph)
        if not words:
            continue
        rendered.append("\n".join(pack_lines(words, width)))
    return paragraph_separator.join(rendered)
