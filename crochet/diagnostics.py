"""Caret-style source snippets for located parse errors."""

from __future__ import annotations


def format_snippet(source: str, line: int, col: int) -> str:
    """
    Return the one-based ``line`` of ``source`` with a caret under ``col``.

    Tabs before the column are kept in the caret line so the caret lines up
    with the character it points at. A column past the end of the line puts
    the caret just after the last character.
    """
    lines = source.split("\n")
    text = lines[line - 1] if 0 < line <= len(lines) else ""

    prefix = text[: max(col - 1, 0)]
    padding = "".join("\t" if ch == "\t" else " " for ch in prefix)
    padding += " " * (col - 1 - len(prefix))

    gutter = f"{line} | "
    return f"{gutter}{text}\n{' ' * (len(gutter) - 2)}| {padding}^"
