from __future__ import annotations

import logging
from typing import Iterable

from spelint.casing import apply_case
from spelint.config import Settings, settings as default_settings
from spelint.index import Candidate, DictionaryBuildError, DictionaryIndex
from spelint.tokenizer import Token, Tokenizer

logger = logging.getLogger(__name__)


def rank_candidates(candidates: Iterable[Candidate]) -> list[Candidate]:
    # Most frequent first; equal frequencies fall back to alphabetical order.
    return sorted(candidates, key=lambda candidate: (-candidate.frequency, candidate.word))


class SpellChecker:
    """Finds unknown words in text and proposes frequency-ranked corrections.

    The dictionary is any iterable of ``(word, frequency)`` pairs. Passing an
    alphabet switches approximate search to edit generation over those
    characters. Once built, a checker holds no mutable state and can be
    shared between threads.
    """

    def __init__(
        self,
        dictionary: Iterable[tuple[str, int]],
        alphabet: str | None = None,
        *,
        tokenizer: Tokenizer | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings or default_settings
        self.tokenizer = tokenizer or Tokenizer()
        try:
            self.index = DictionaryIndex(dictionary, alphabet=alphabet)
        except DictionaryBuildError:
            logger.exception("failed to build spellcheck dictionary")
            raise

    def check(self, word: str) -> bool:
        return self.index.contains(word)

    def get_unknowns(self, sentence: str) -> list[Token]:
        return [token for token in self.tokenizer.tokenize(sentence) if not self.check(token.text)]

    def get_corrections(self, word: str, distance: int | None = None, limit: int | None = None) -> list[str]:
        if distance is None:
            distance = self.settings.max_edit_distance
        if limit is None:
            limit = self.settings.suggestion_limit
        if limit <= 0:
            return []

        candidates = self.index.search_within_distance(word, distance)
        ranked = rank_candidates(candidates)[:limit]
        return [apply_case(word, candidate.word) for candidate in ranked]

    def suggest(self, sentence: str, distance: int | None = None) -> str | None:
        """Rewrite the sentence with the best correction for each unknown word.

        Returns None when no unknown word has a correction.
        """
        unknowns = self.get_unknowns(sentence)
        if not unknowns:
            return None

        encoded = sentence.encode("utf-8")
        parts: list[str] = []
        cursor = 0
        for token in unknowns:
            corrections = self.get_corrections(token.text, distance, 1)
            if not corrections:
                continue
            parts.append(encoded[cursor : token.start].decode("utf-8"))
            parts.append(corrections[0])
            cursor = token.end
        parts.append(encoded[cursor:].decode("utf-8"))

        suggestion = "".join(parts)
        if suggestion == sentence:
            return None
        return suggestion
