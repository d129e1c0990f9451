"""
SpellChecker: correctness checks and ranked suggestions over a phonetic index.

suggest(word): encode word -> mutate code and collect candidates -> rank by
edit distance, keep those within the threshold.
"""

import logging
from typing import Iterable, List, NamedTuple, Optional, Tuple

from phonetics import EditWeights, PhoneticEncoder

from .candidates import CandidateGenerator
from .index import PhoneticIndex
from .ranker import CandidateFailure, ScoredSuggestion, Scorer, SuggestionRanker
from .wordlist import WordSource, read_words

logger = logging.getLogger(__name__)

# One edit at default weights (95-100) passes, two (>= 180) do not.
DEFAULT_THRESHOLD = 140


class SuggestionReport(NamedTuple):
    """Everything one suggestion query computed, for diagnostics."""

    word: str
    code: str
    mutated_codes: List[str]
    candidates: List[str]
    suggestions: List[ScoredSuggestion]
    failures: List[CandidateFailure]


class SpellChecker:
    """Facade over PhoneticIndex, CandidateGenerator and SuggestionRanker."""

    def __init__(
        self,
        index: Optional[PhoneticIndex] = None,
        *,
        encoder: Optional[PhoneticEncoder] = None,
        scorer: Optional[Scorer] = None,
        weights: Optional[EditWeights] = None,
        threshold: int = DEFAULT_THRESHOLD,
    ) -> None:
        if index is not None and encoder is not None and index.encoder is not encoder:
            raise ValueError("Pass either an index or an encoder, not both")
        self.index = index if index is not None else PhoneticIndex(encoder)
        self.generator = CandidateGenerator.for_index(self.index)
        self.ranker = SuggestionRanker(scorer, weights)
        self.threshold = threshold

    @classmethod
    def from_words(cls, words: Iterable[str], **kwargs) -> "SpellChecker":
        encoder = kwargs.pop("encoder", None)
        return cls(PhoneticIndex.build(words, encoder), **kwargs)

    @classmethod
    def from_file(cls, source: WordSource, encoding: str = "utf-8", **kwargs) -> "SpellChecker":
        """Build from a word list file or stream; WordListError if it cannot be read."""
        return cls.from_words(read_words(source, encoding=encoding), **kwargs)

    def get_code(self, word: str) -> str:
        return self.index.code_for(word)

    def get_words(self, code: str) -> Tuple[str, ...]:
        return self.index.lookup(code)

    def add_word(self, word: str) -> str:
        return self.index.insert(word)

    def add_words(self, words: Iterable[str]) -> int:
        return self.index.insert_many(words)

    def is_correct(self, word: str) -> bool:
        return self.index.contains(word)

    def suggest(self, word: str, threshold: Optional[int] = None) -> List[ScoredSuggestion]:
        """
        Dictionary words within threshold of word, closest first.
        Raises EncoderError if word cannot be encoded; an empty list just
        means nothing is close enough.
        """
        return self.explain(word, threshold).suggestions

    def explain(self, word: str, threshold: Optional[int] = None) -> SuggestionReport:
        if threshold is None:
            threshold = self.threshold
        code = self.index.code_for(word)
        codes = self.generator.mutated_codes(code)
        candidates = self.generator.collect(codes, self.index)
        logger.debug("Query %r -> code %r: %d candidates", word, code, len(candidates))
        ranked = self.ranker.rank_with_failures(word, candidates, threshold)
        return SuggestionReport(
            word=word,
            code=code,
            mutated_codes=codes,
            candidates=candidates,
            suggestions=ranked.suggestions,
            failures=ranked.failures,
        )

    def __len__(self) -> int:
        return len(self.index)
