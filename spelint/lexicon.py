from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator

from spelint.normalization import normalize_word

logger = logging.getLogger(__name__)

LEXICON_MODES = ("counted", "ranked")


def _lexicon_word(token: str) -> str | None:
    word = normalize_word(token.strip())
    return word if word.isalpha() else None


def parse_counted_line(line: str) -> tuple[str, int] | None:
    try:
        token, count = line.split()[:2]
    except ValueError:
        return None

    word = _lexicon_word(token)
    count = count.replace(",", "")
    if word is None or not count.isdecimal():
        return None
    return word, int(count)


def parse_ranked_line(line: str) -> str | None:
    parts = line.split()
    return _lexicon_word(parts[0]) if parts else None


def iter_lexicon(lines: Iterable[str], mode: str = "counted", limit: int | None = None) -> Iterator[tuple[str, int]]:
    """Turn frequency-list lines into (word, frequency) pairs.

    ``counted`` lines hold a word and its count. ``ranked`` lines hold one
    word each, most common first, and get ``limit - rank + 1`` as frequency.
    """
    if mode not in LEXICON_MODES:
        raise ValueError(f"mode must be one of {LEXICON_MODES}, got {mode!r}")

    stripped = (line.strip() for line in lines)
    non_empty = [line for line in stripped if line]
    if limit is not None:
        non_empty = non_empty[:limit]
    total = len(non_empty)

    skipped = 0
    for rank, line in enumerate(non_empty, start=1):
        if mode == "counted":
            parsed = parse_counted_line(line)
            if parsed is None:
                skipped += 1
                logger.debug("skipping malformed lexicon line %s: %r", rank, line)
                continue
            yield parsed
        else:
            word = parse_ranked_line(line)
            if word is None:
                skipped += 1
                logger.debug("skipping malformed lexicon line %s: %r", rank, line)
                continue
            yield word, max(1, total - rank + 1)

    if skipped:
        logger.info("skipped %s malformed lexicon lines", skipped)


def load_lexicon(path: str | Path, mode: str = "counted", limit: int | None = None) -> list[tuple[str, int]]:
    text = Path(path).read_text(encoding="utf-8")
    entries = list(iter_lexicon(text.splitlines(), mode=mode, limit=limit))
    logger.info("loaded %s words from %s", len(entries), path)
    return entries
