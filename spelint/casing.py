from __future__ import annotations

from spelint.normalization import graphemes


def apply_case(pattern: str, value: str) -> str:
    """Copy the upper/lower case pattern of ``pattern`` onto ``value``.

    Positions past the end of the pattern reuse the case of its last
    grapheme. An empty pattern lowercases the value.
    """
    flags = [grapheme.isupper() for grapheme in graphemes(pattern)]
    if not flags:
        return value.lower()

    matched: list[str] = []
    for position, grapheme in enumerate(graphemes(value)):
        upper = flags[position] if position < len(flags) else flags[-1]
        matched.append(grapheme.upper() if upper else grapheme.lower())
    return "".join(matched)
