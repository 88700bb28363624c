from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from nltk.tokenize import RegexpTokenizer

from spelint.normalization import is_mark

# Unicode letters only: \w minus digits and underscore.
WORD_PATTERN = r"[^\W\d_]+"


@dataclass(frozen=True)
class Token:
    start: int
    end: int
    text: str


class Tokenizer:
    """Splits text into maximal runs of letters.

    Offsets on the returned tokens are UTF-8 byte positions, so
    ``text.encode()[token.start:token.end]`` is the token's text.
    """

    def __init__(self, pattern: str = WORD_PATTERN) -> None:
        self._regexp_tokenizer = RegexpTokenizer(pattern)

    def _char_spans(self, text: str) -> Iterator[tuple[int, int]]:
        pending: tuple[int, int] | None = None
        for start, end in self._regexp_tokenizer.span_tokenize(text):
            if pending is not None:
                if pending[1] == start:
                    # Only combining marks separated the two runs.
                    start = pending[0]
                else:
                    yield pending

            while end < len(text) and is_mark(text[end]):
                end += 1
            pending = (start, end)

        if pending is not None:
            yield pending

    def tokenize(self, text: str) -> list[Token]:
        text = text or ""
        tokens: list[Token] = []
        byte_offset = 0
        char_offset = 0
        for start, end in self._char_spans(text):
            byte_offset += len(text[char_offset:start].encode("utf-8"))
            word = text[start:end]
            token_start = byte_offset
            byte_offset += len(word.encode("utf-8"))
            char_offset = end
            tokens.append(Token(start=token_start, end=byte_offset, text=word))
        return tokens


default_tokenizer = Tokenizer()


def tokenize(text: str) -> list[Token]:
    return default_tokenizer.tokenize(text)
