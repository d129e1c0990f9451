"""
Ranking of candidate words by edit distance to the misspelled word.

Candidates above the threshold are dropped. A scorer failure on one
candidate drops only that candidate; it is logged and reported back in
RankResult.failures rather than raised.

Ties are broken deterministically: distance, then case-folded word, then
exact word, then candidate order.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, NamedTuple, Optional

from phonetics import DEFAULT_WEIGHTS, EditWeights, weighted_edit_distance

from .errors import ScorerError

logger = logging.getLogger(__name__)

Scorer = Callable[[str, str, EditWeights], int]


@dataclass(frozen=True)
class ScoredSuggestion:
    """A dictionary word and its distance from the query word."""

    word: str
    distance: int

    def to_dict(self) -> Dict[str, Any]:
        return {"word": self.word, "distance": self.distance}


class CandidateFailure(NamedTuple):
    word: str
    error: ScorerError


class RankResult(NamedTuple):
    suggestions: List[ScoredSuggestion]
    failures: List[CandidateFailure]


def _sort_key(item):
    position, suggestion = item
    return (suggestion.distance, suggestion.word.casefold(), suggestion.word, position)


class SuggestionRanker:
    """Scores candidates with an edit-distance function and orders them."""

    def __init__(
        self,
        scorer: Optional[Scorer] = None,
        weights: Optional[EditWeights] = None,
    ) -> None:
        self.scorer = scorer if scorer is not None else weighted_edit_distance
        self.weights = weights if weights is not None else DEFAULT_WEIGHTS

    def score(self, query: str, candidate: str) -> int:
        """Distance from query to candidate; ScorerError on any failure."""
        try:
            distance = self.scorer(query, candidate, self.weights)
        except Exception as e:
            raise ScorerError(candidate, f"Scoring {candidate!r} against {query!r} failed: {e}") from e
        if isinstance(distance, bool) or not isinstance(distance, int) or distance < 0:
            raise ScorerError(
                candidate, f"Scorer returned {distance!r} for {candidate!r}; expected an int >= 0"
            )
        return distance

    def rank_with_failures(
        self,
        query: str,
        candidates: Iterable[str],
        threshold: int,
    ) -> RankResult:
        """Suggestions within threshold (inclusive), plus the candidates that failed to score."""
        kept = []
        failures: List[CandidateFailure] = []
        for position, candidate in enumerate(candidates):
            try:
                distance = self.score(query, candidate)
            except ScorerError as e:
                logger.warning("Dropping candidate %r: %s", candidate, e)
                failures.append(CandidateFailure(candidate, e))
                continue
            if distance <= threshold:
                kept.append((position, ScoredSuggestion(candidate, distance)))
        kept.sort(key=_sort_key)
        return RankResult([s for _, s in kept], failures)

    def rank(self, query: str, candidates: Iterable[str], threshold: int) -> List[ScoredSuggestion]:
        """Suggestions within threshold, closest first."""
        return self.rank_with_failures(query, candidates, threshold).suggestions
