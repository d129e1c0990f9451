"""
Candidate generation by mutating the phonetic code of a misspelled word.

Codes are short and drawn from a small alphabet, so every single-edit
neighbour of a code (swap, substitute, insert, delete) is enumerated and
looked up in the index. Words found under any neighbour become candidates.
Most neighbours map to no bucket; a miss simply contributes nothing.
"""

import logging
from typing import Iterable, Iterator, List

from .index import PhoneticIndex

logger = logging.getLogger(__name__)


def _splits(code: str) -> List[tuple]:
    return [(code[:i], code[i:]) for i in range(len(code) + 1)]


def transpositions(code: str) -> Iterator[str]:
    """Codes with one adjacent pair swapped (len(code) - 1 of them)."""
    for left, right in _splits(code):
        if len(right) > 1:
            yield left + right[1] + right[0] + right[2:]


def substitutions(code: str, alphabet: str) -> Iterator[str]:
    """Codes with one position replaced by each alphabet symbol."""
    for left, right in _splits(code):
        if right:
            for symbol in alphabet:
                yield left + symbol + right[1:]


def insertions(code: str, alphabet: str) -> Iterator[str]:
    """Codes one symbol longer: each symbol at each of the len(code) + 1 slots."""
    for left, right in _splits(code):
        for symbol in alphabet:
            yield left + symbol + right


def deletions(code: str) -> Iterator[str]:
    """Codes one symbol shorter. A one-symbol code yields ""; "" yields nothing."""
    for left, right in _splits(code):
        if right:
            yield left + right[1:]


def mutated_codes(code: str, alphabet: str) -> List[str]:
    """
    The code itself followed by all its single-edit neighbours,
    without duplicates, in a fixed order: transpose, substitute, insert, delete.
    """
    out = [code]
    out.extend(transpositions(code))
    out.extend(substitutions(code, alphabet))
    out.extend(insertions(code, alphabet))
    out.extend(deletions(code))
    return list(dict.fromkeys(out))


class CandidateGenerator:
    """Collects dictionary words reachable from a code by one edit."""

    def __init__(self, alphabet: str) -> None:
        if not alphabet:
            raise ValueError("Substitution alphabet must not be empty")
        self.alphabet = "".join(dict.fromkeys(alphabet))

    @classmethod
    def for_index(cls, index: PhoneticIndex) -> "CandidateGenerator":
        """Generator over the alphabet of the index's encoder."""
        return cls(index.alphabet)

    def mutated_codes(self, code: str) -> List[str]:
        return mutated_codes(code, self.alphabet)

    def generate(self, code: str, index: PhoneticIndex) -> List[str]:
        """
        Union of the buckets of code and all its neighbours.
        Words found on several paths appear once, in first-seen order.
        """
        codes = self.mutated_codes(code)
        candidates = self.collect(codes, index)
        logger.debug(
            "Code %r: %d mutated codes, %d candidates", code, len(codes), len(candidates)
        )
        return candidates

    @staticmethod
    def collect(codes: Iterable[str], index: PhoneticIndex) -> List[str]:
        """Words stored under any of codes, de-duplicated in first-seen order."""
        candidates: dict = {}
        for code in codes:
            for word in index.lookup(code):
                candidates.setdefault(word, None)
        return list(candidates)
