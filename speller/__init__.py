"""Phonetic spelling checker: index, candidate generation, ranking."""

from .errors import SpellerError, WordListError, EncoderError, ScorerError
from .index import PhoneticIndex
from .candidates import (
    CandidateGenerator,
    mutated_codes,
    transpositions,
    substitutions,
    insertions,
    deletions,
)
from .ranker import ScoredSuggestion, SuggestionRanker, RankResult, CandidateFailure
from .checker import SpellChecker, SuggestionReport, DEFAULT_THRESHOLD
from .wordlist import read_words, iter_words
from .index_backend import (
    IndexBackend,
    JsonIndexBackend,
    SqliteIndexBackend,
    open_backend,
    save_index,
    load_index,
)

__all__ = [
    "SpellerError",
    "WordListError",
    "EncoderError",
    "ScorerError",
    "PhoneticIndex",
    "CandidateGenerator",
    "mutated_codes",
    "transpositions",
    "substitutions",
    "insertions",
    "deletions",
    "ScoredSuggestion",
    "SuggestionRanker",
    "RankResult",
    "CandidateFailure",
    "SpellChecker",
    "SuggestionReport",
    "DEFAULT_THRESHOLD",
    "read_words",
    "iter_words",
    "IndexBackend",
    "JsonIndexBackend",
    "SqliteIndexBackend",
    "open_backend",
    "save_index",
    "load_index",
]
