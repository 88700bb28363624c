from __future__ import annotations

import logging
from bisect import bisect_left
from dataclasses import dataclass
from typing import Any, Iterable

from spelint.normalization import graphemes, normalize_word

logger = logging.getLogger(__name__)


class DictionaryBuildError(ValueError):
    pass


@dataclass(frozen=True)
class Candidate:
    word: str
    frequency: int


class _TrieNode:
    __slots__ = ("children", "position")

    def __init__(self) -> None:
        self.children: dict[str, _TrieNode] = {}
        # Index into the sorted key tuple when a key ends here.
        self.position: int | None = None


def _validate_entry(entry: Any) -> tuple[str, int]:
    try:
        word, frequency = entry
    except (TypeError, ValueError) as exc:
        raise DictionaryBuildError(f"dictionary entry must be a (word, frequency) pair, got {entry!r}") from exc

    if not isinstance(word, str):
        raise DictionaryBuildError(f"dictionary word must be a string, got {word!r}")
    if isinstance(frequency, bool) or not isinstance(frequency, int):
        raise DictionaryBuildError(f"frequency for {word!r} must be an integer, got {frequency!r}")
    if frequency < 0:
        raise DictionaryBuildError(f"frequency for {word!r} cannot be negative")

    normalized = normalize_word(word)
    if not normalized.strip():
        raise DictionaryBuildError("dictionary words cannot be empty")
    return normalized, frequency


class DictionaryIndex:
    """Immutable word -> frequency index with bounded edit-distance search.

    Keys are lowercased and kept in a sorted tuple for exact lookups. A trie
    over the same keys is walked with an optimal string alignment row to find
    approximate matches. When an alphabet is given, approximate search instead
    expands every edit of the query over that alphabet and looks each one up.
    """

    def __init__(self, entries: Iterable[tuple[str, int]], alphabet: str | None = None) -> None:
        merged: dict[str, int] = {}
        for entry in entries:
            word, frequency = _validate_entry(entry)
            merged[word] = frequency

        if alphabet is not None and not alphabet:
            raise DictionaryBuildError("alphabet cannot be empty")

        keys = tuple(sorted(merged))
        root = _TrieNode()
        for position, key in enumerate(keys):
            node = root
            for grapheme in graphemes(key):
                node = node.children.setdefault(grapheme, _TrieNode())
            node.position = position

        object.__setattr__(self, "_keys", keys)
        object.__setattr__(self, "_frequencies", tuple(merged[key] for key in keys))
        object.__setattr__(self, "_root", root)
        object.__setattr__(
            self,
            "_alphabet",
            frozenset(grapheme.lower() for grapheme in graphemes(alphabet)) if alphabet is not None else None,
        )

        logger.info(
            "built dictionary index: words=%s strategy=%s",
            len(keys),
            "edits" if alphabet is not None else "trie",
        )

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def entries(self) -> list[Candidate]:
        return [Candidate(key, frequency) for key, frequency in zip(self._keys, self._frequencies)]

    def _position(self, key: str) -> int | None:
        position = bisect_left(self._keys, key)
        if position < len(self._keys) and self._keys[position] == key:
            return position
        return None

    def contains(self, word: str) -> bool:
        return self._position(normalize_word(word)) is not None

    def get(self, word: str) -> int | None:
        position = self._position(normalize_word(word))
        if position is None:
            return None
        return self._frequencies[position]

    def search_within_distance(self, word: str, max_distance: int) -> list[Candidate]:
        max_distance = max(max_distance, 0)
        if self._alphabet is not None:
            return self.search_edits(word, max_distance)
        return self.search_trie(word, max_distance)

    def search_trie(self, word: str, max_distance: int) -> list[Candidate]:
        query = graphemes(normalize_word(word))
        first_row = list(range(len(query) + 1))
        positions: list[int] = []

        stack: list[tuple[_TrieNode, str, list[int], list[int] | None, str | None]] = [
            (child, grapheme, first_row, None, None) for grapheme, child in self._root.children.items()
        ]
        while stack:
            node, grapheme, previous_row, before_previous_row, previous_grapheme = stack.pop()

            current_row = [previous_row[0] + 1]
            for column in range(1, len(query) + 1):
                cost = 0 if query[column - 1] == grapheme else 1
                value = min(
                    current_row[column - 1] + 1,
                    previous_row[column] + 1,
                    previous_row[column - 1] + cost,
                )

                if (
                    before_previous_row is not None
                    and column > 1
                    and query[column - 1] == previous_grapheme
                    and query[column - 2] == grapheme
                ):
                    value = min(value, before_previous_row[column - 2] + 1)

                current_row.append(value)

            if node.position is not None and current_row[-1] <= max_distance:
                positions.append(node.position)

            if min(current_row) > max_distance:
                continue

            for next_grapheme, child in node.children.items():
                stack.append((child, next_grapheme, current_row, previous_row, grapheme))

        return [Candidate(self._keys[p], self._frequencies[p]) for p in sorted(positions)]

    def _edits_one(self, word: str) -> set[str]:
        letters = graphemes(word)
        alphabet = self._alphabet or frozenset()
        edits: set[str] = set()

        for idx in range(len(letters) + 1):
            left = "".join(letters[:idx])
            right = letters[idx:]
            rest = "".join(right[1:])

            for char in alphabet:
                edits.add(left + char + "".join(right))

            if not right:
                continue

            edits.add(left + rest)
            for char in alphabet:
                edits.add(left + char + rest)
            if len(right) > 1:
                edits.add(left + right[1] + right[0] + "".join(right[2:]))

        return edits

    def generate_edits(self, word: str, max_distance: int) -> set[str]:
        """Every string reachable from word in at most max_distance edits."""
        seen: set[str] = {word}
        frontier: set[str] = {word}
        for _ in range(max_distance):
            next_frontier: set[str] = set()
            for item in frontier:
                for edit in self._edits_one(item):
                    if edit in seen:
                        continue
                    seen.add(edit)
                    next_frontier.add(edit)
            frontier = next_frontier
        return seen

    def search_edits(self, word: str, max_distance: int) -> list[Candidate]:
        positions: set[int] = set()
        for edit in self.generate_edits(normalize_word(word), max_distance):
            # Edits are matched against stored keys as-is, never re-normalized.
            position = self._position(edit)
            if position is not None:
                positions.add(position)
        return [Candidate(self._keys[p], self._frequencies[p]) for p in sorted(positions)]
