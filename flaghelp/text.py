"""
Plain-text layout helpers: padding, greedy word wrapping and percent escaping.
"""

from __future__ import annotations

from typing import List

MAX_LINE_LENGTH = 72


def pad(text: str, width: int) -> str:
    """Right-pad `text` with spaces up to `width` characters."""
    return text + " " * (width - len(text))


def escape_percent(text: str) -> str:
    """Double every `%` so the text survives a later printf-style format."""
    return text.replace("%", "%%")


def wrap_text(
    text: str,
    indent_width: int,
    line_width: int = MAX_LINE_LENGTH,
    indent_first_line: bool = True,
) -> str:
    """
    Greedy word wrap that keeps embedded newlines as hard breaks.

    Args:
        text: The text to wrap. Each newline-separated line is wrapped on its own.
        indent_width: Number of spaces prefixed to every continuation line.
        line_width: Maximum length of an output line, indent included.
        indent_first_line: When False the caller has already written a prefix of
            `indent_width` characters on the current line, so the first output line
            gets no indent but is still measured as if it had one.

    Returns:
        The wrapped text, one newline after every output line.
    """
    indent = " " * indent_width
    output: List[str] = []

    for i, line in enumerate(text.split("\n")):
        current = indent if (indent_first_line or i > 0) else ""
        has_word = False
        for word in line.split(" "):
            length = len(current)
            if not output and not indent_first_line:
                length += indent_width
            # A word longer than the budget stays whole on its own line.
            if current.strip() and length + len(word) + 1 > line_width:
                output.append(current)
                current = indent
                has_word = False
            if has_word:
                current += " "
            current += word
            has_word = True
        output.append(current if current.strip() else "")

    return "".join(ln + "\n" for ln in output)
