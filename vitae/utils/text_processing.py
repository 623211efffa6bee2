"""
Text processing utilities for fixed-width plain-text layout.
"""

import re

PARAGRAPH_SPLIT = re.compile(r"\n+")


def _wrap_paragraph(paragraph: str, width: int, first_indent: str, next_indent: str) -> list[str]:
    """Greedy-fill a single paragraph into lines."""
    words = paragraph.split()
    if not words:
        return [""]

    lines = []
    line = first_indent
    has_words = False

    for word in words:
        needs_space = bool(line) and not line.endswith(" ")
        candidate_len = len(line) + (1 if needs_space else 0) + len(word)

        # A line holding only its indent takes the word even if it overflows
        if candidate_len <= width or not has_words:
            line += (" " if needs_space else "") + word
        else:
            lines.append(line)
            line = next_indent + word
        has_words = True

    if line.strip():
        lines.append(line)

    return lines


def wrap(text: str, width: int = 80, first_indent: str = "", next_indent: str = "") -> str:
    """
    Greedy word-wrap free text into fixed-width lines.

    Paragraphs (separated by one or more newlines) are wrapped independently and
    rejoined with a single newline, so blank-line separators collapse. Words are
    never split: a word longer than the available width overflows on its own line.

    Args:
        text: Text to wrap (None or empty yields "")
        width: Target line width, indent included
        first_indent: Prefix for the first line of each paragraph
        next_indent: Prefix for continuation lines

    Returns:
        Wrapped text, lines joined by newline

    Example:
        >>> wrap("one two three", width=7)
        'one two\\nthree'
        >>> wrap("alpha beta", width=9, first_indent="  - ", next_indent="    ")
        '  - alpha\\n    beta'
    """
    if not text:
        return ""

    out = []
    for paragraph in PARAGRAPH_SPLIT.split(str(text)):
        out.extend(_wrap_paragraph(paragraph, width, first_indent, next_indent))

    return "\n".join(out)


def underline(text: str, char: str = "=") -> str:
    """
    Build a rule as wide as text, one char per Unicode code point.

    Example:
        >>> underline("Café", "-")
        '----'
    """
    return (char or "=") * len(str(text))
