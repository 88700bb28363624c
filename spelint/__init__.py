from .casing import apply_case
from .config import Settings, settings
from .engine import SpellChecker, rank_candidates
from .index import Candidate, DictionaryBuildError, DictionaryIndex
from .lexicon import iter_lexicon, load_lexicon, parse_counted_line
from .normalization import graphemes, normalize_word
from .tokenizer import Token, Tokenizer, tokenize

__all__ = [
    "Candidate",
    "DictionaryBuildError",
    "DictionaryIndex",
    "Settings",
    "SpellChecker",
    "Token",
    "Tokenizer",
    "apply_case",
    "graphemes",
    "iter_lexicon",
    "load_lexicon",
    "normalize_word",
    "parse_counted_line",
    "rank_candidates",
    "settings",
    "tokenize",
]
