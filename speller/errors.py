"""Exceptions raised by the speller. All are ValueErrors."""


class SpellerError(ValueError):
    """Base class for speller failures."""


class WordListError(SpellerError):
    """Word source or persisted index could not be read."""


class EncoderError(SpellerError):
    """The phonetic encoder failed on a word."""

    def __init__(self, word: str, message: str) -> None:
        super().__init__(message)
        self.word = word


class ScorerError(SpellerError):
    """The edit-distance scorer failed on a candidate."""

    def __init__(self, candidate: str, message: str) -> None:
        super().__init__(message)
        self.candidate = candidate
