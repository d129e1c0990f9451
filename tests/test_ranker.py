"""SuggestionRanker: threshold, ordering, tie-breaks, scorer failures."""

import logging

from phonetics import UNIT_WEIGHTS
from speller import ScoredSuggestion, ScorerError, SuggestionRanker


def _table_scorer(table):
    def scorer(a, b, weights):
        return table[b]
    return scorer


def test_rank_filters_by_threshold_inclusive():
    ranker = SuggestionRanker(_table_scorer({"a": 100, "b": 140, "c": 141}))
    result = ranker.rank("x", ["a", "b", "c"], 140)
    assert result == [ScoredSuggestion("a", 100), ScoredSuggestion("b", 140)]


def test_rank_sorted_by_distance_then_word():
    ranker = SuggestionRanker(_table_scorer({"dog": 5, "Bat": 1, "bat": 1, "apple": 1, "cat": 0}))
    words = [s.word for s in ranker.rank("x", ["dog", "bat", "Bat", "apple", "cat"], 10)]
    assert words == ["cat", "apple", "Bat", "bat", "dog"]


def test_rank_is_deterministic_regardless_of_candidate_order():
    table = {"aa": 2, "ab": 2, "ba": 2, "b": 1}
    ranker = SuggestionRanker(_table_scorer(table))
    first = ranker.rank("x", ["ba", "ab", "b", "aa"], 5)
    second = ranker.rank("x", ["aa", "b", "ab", "ba"], 5)
    assert first == second


def test_rank_uses_weights():
    ranker = SuggestionRanker(weights=UNIT_WEIGHTS)
    assert ranker.rank("cat", ["cot", "cats", "dog"], 1) == [
        ScoredSuggestion("cats", 1),
        ScoredSuggestion("cot", 1),
    ]


def test_failing_candidate_is_skipped(caplog):
    def scorer(a, b, weights):
        if b == "boom":
            raise RuntimeError("scorer exploded")
        return 1

    ranker = SuggestionRanker(scorer)
    with caplog.at_level(logging.WARNING, logger="speller.ranker"):
        result = ranker.rank_with_failures("x", ["ok", "boom", "fine"], 10)
    assert [s.word for s in result.suggestions] == ["fine", "ok"]
    assert [f.word for f in result.failures] == ["boom"]
    assert isinstance(result.failures[0].error, ScorerError)
    assert "boom" in caplog.text


def test_invalid_scores_are_failures():
    ranker = SuggestionRanker(_table_scorer({"neg": -1, "float": 1.5, "bool": True, "good": 3}))
    result = ranker.rank_with_failures("x", ["neg", "float", "bool", "good"], 10)
    assert result.suggestions == [ScoredSuggestion("good", 3)]
    assert sorted(f.word for f in result.failures) == ["bool", "float", "neg"]


def test_all_candidates_failing_gives_no_suggestions():
    def scorer(a, b, weights):
        raise ValueError("nope")

    assert SuggestionRanker(scorer).rank("x", ["a", "b"], 100) == []


def test_negative_threshold_gives_no_suggestions():
    assert SuggestionRanker().rank("cat", ["cat"], -1) == []


def test_to_dict():
    assert ScoredSuggestion("cat", 90).to_dict() == {"word": "cat", "distance": 90}
