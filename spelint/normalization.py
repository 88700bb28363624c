from __future__ import annotations

import unicodedata

ZERO_WIDTH_JOINER = "\u200d"


def normalize_word(word: str) -> str:
    return (word or "").lower()


def is_mark(char: str) -> bool:
    return unicodedata.category(char).startswith("M")


def graphemes(text: str) -> list[str]:
    """Split text into user-perceived characters.

    A cluster is a base character followed by any combining marks. Characters
    joined with a zero width joiner stay in one cluster.
    """
    clusters: list[str] = []
    joined = False
    for char in text or "":
        if clusters and (joined or is_mark(char) or char == ZERO_WIDTH_JOINER):
            clusters[-1] += char
        else:
            clusters.append(char)
        joined = char == ZERO_WIDTH_JOINER
    return clusters
