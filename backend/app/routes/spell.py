"""Spelling routes: check, suggest, add words, stats."""
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Request
from pydantic import BaseModel

from speller import EncoderError

from ..config import (
    DEFAULT_THRESHOLD,
    MAX_WORD_LENGTH,
    MAX_WORDS_PER_REQUEST,
    RATE_LIMIT_SUGGEST_PER_MINUTE,
    RATE_LIMIT_WINDOW_SECONDS,
)
from ..rate_limit import check_rate_limit
from ..services.dictionary_service import get_spell_checker

router = APIRouter(prefix="/api/spell", tags=["spell"])


class CheckResponse(BaseModel):
    word: str
    correct: bool
    code: str


class SuggestionItem(BaseModel):
    word: str
    distance: int


class SuggestDebugInfo(BaseModel):
    code: str
    mutated_code_count: int
    candidate_count: int
    failures: list[str]


class SuggestResponse(BaseModel):
    word: str
    threshold: int
    suggestions: list[SuggestionItem]
    total: int  # count before limit
    debug: Optional[SuggestDebugInfo] = None


class AddWordsRequest(BaseModel):
    words: list[str]


class AddWordsResponse(BaseModel):
    added: int
    total_words: int


class StatsResponse(BaseModel):
    encoder: str
    alphabet: str
    words: int
    codes: int


def _validate_word(word: str) -> str:
    word = word.strip()
    if not word:
        raise HTTPException(status_code=400, detail="Word must not be empty.")
    if len(word) > MAX_WORD_LENGTH:
        raise HTTPException(status_code=400, detail=f"Word longer than {MAX_WORD_LENGTH} characters.")
    return word


def _client_id(request: Request) -> str:
    return request.client.host if request.client else "anonymous"


@router.get("/check", response_model=CheckResponse)
def check_word(word: str = Query(..., description="Word to check")):
    word = _validate_word(word)
    checker = get_spell_checker()
    try:
        return CheckResponse(word=word, correct=checker.is_correct(word), code=checker.get_code(word))
    except EncoderError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.get("/suggest", response_model=SuggestResponse)
def suggest_word(
    request: Request,
    word: str = Query(..., description="Misspelled word"),
    threshold: int = Query(DEFAULT_THRESHOLD, ge=0, description="Maximum edit distance"),
    limit: int = Query(0, ge=0, description="Return at most this many suggestions (0 = all)"),
    debug: bool = Query(False, description="Include code and candidate statistics"),
):
    """
    Ranked suggestions within threshold, closest first.
    An empty list is a normal answer; 422 means the word could not be encoded.
    """
    check_rate_limit(
        _client_id(request),
        "suggest",
        RATE_LIMIT_SUGGEST_PER_MINUTE,
        RATE_LIMIT_WINDOW_SECONDS,
    )
    word = _validate_word(word)
    try:
        report = get_spell_checker().explain(word, threshold)
    except EncoderError as e:
        raise HTTPException(status_code=422, detail=str(e))
    suggestions = report.suggestions[:limit] if limit else report.suggestions
    info = None
    if debug:
        info = SuggestDebugInfo(
            code=report.code,
            mutated_code_count=len(report.mutated_codes),
            candidate_count=len(report.candidates),
            failures=[f.word for f in report.failures],
        )
    return SuggestResponse(
        word=word,
        threshold=threshold,
        suggestions=[SuggestionItem(**s.to_dict()) for s in suggestions],
        total=len(report.suggestions),
        debug=info,
    )


@router.post("/words", response_model=AddWordsResponse)
def add_words(body: AddWordsRequest):
    """Add words to the running dictionary. Blank entries are ignored."""
    if len(body.words) > MAX_WORDS_PER_REQUEST:
        raise HTTPException(status_code=400, detail=f"At most {MAX_WORDS_PER_REQUEST} words per request.")
    words = [_validate_word(w) for w in body.words if w.strip()]
    checker = get_spell_checker()
    added = checker.add_words(words)
    return AddWordsResponse(added=added, total_words=len(checker))


@router.get("/stats", response_model=StatsResponse)
def stats():
    index = get_spell_checker().index
    return StatsResponse(
        encoder=index.encoder.name,
        alphabet=index.alphabet,
        words=len(index),
        codes=index.bucket_count,
    )
