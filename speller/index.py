"""
Phonetic index: phonetic code -> words sharing that code (a bucket).

Append-only. Inserts and lookups share one lock, so words can be added
after the initial load while other threads keep querying.
"""

import logging
import threading
import time
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from phonetics import MetaphoneEncoder, PhoneticEncoder

from .errors import EncoderError

logger = logging.getLogger(__name__)


class PhoneticIndex:
    """Words grouped by phonetic code; bucket order is insertion order."""

    def __init__(self, encoder: Optional[PhoneticEncoder] = None) -> None:
        self._encoder = encoder if encoder is not None else MetaphoneEncoder()
        self._buckets: Dict[str, List[str]] = {}
        self._size = 0
        self._lock = threading.RLock()

    @classmethod
    def build(
        cls,
        words: Iterable[str],
        encoder: Optional[PhoneticEncoder] = None,
    ) -> "PhoneticIndex":
        """Create an index from a word source, logging how long it took."""
        index = cls(encoder)
        start = time.perf_counter()
        added = index.insert_many(words)
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "Built phonetic index: %d words in %d buckets (%s) in %.1f ms",
            added,
            index.bucket_count,
            index.encoder.name,
            elapsed_ms,
        )
        return index

    @classmethod
    def from_buckets(
        cls,
        buckets: Mapping[str, Iterable[str]],
        encoder: Optional[PhoneticEncoder] = None,
    ) -> "PhoneticIndex":
        """Restore an index from stored buckets without re-encoding."""
        index = cls(encoder)
        for code, words in buckets.items():
            bucket = list(words)
            if bucket:
                index._buckets.setdefault(code, []).extend(bucket)
                index._size += len(bucket)
        return index

    @property
    def encoder(self) -> PhoneticEncoder:
        return self._encoder

    @property
    def alphabet(self) -> str:
        return self._encoder.alphabet

    def code_for(self, word: str) -> str:
        """Encode word; any encoder failure surfaces as EncoderError."""
        try:
            code = self._encoder.encode(word)
        except Exception as e:
            raise EncoderError(word, f"{self._encoder.name} encoder failed on {word!r}: {e}") from e
        if not isinstance(code, str):
            raise EncoderError(
                word, f"{self._encoder.name} encoder returned {type(code).__name__} for {word!r}"
            )
        return code

    def insert(self, word: str) -> str:
        """Append word to the bucket for its code. Returns the code."""
        code = self.code_for(word)
        with self._lock:
            self._buckets.setdefault(code, []).append(word)
            self._size += 1
        return code

    def insert_many(self, words: Iterable[str]) -> int:
        """Insert every word; words the encoder cannot handle are logged and skipped."""
        added = 0
        for word in words:
            try:
                self.insert(word)
            except EncoderError as e:
                logger.warning("Skipping word %r: %s", e.word, e)
                continue
            added += 1
        return added

    def lookup(self, code: str) -> Tuple[str, ...]:
        """Words stored under code, or () for an unknown code."""
        with self._lock:
            bucket = self._buckets.get(code)
            return tuple(bucket) if bucket else ()

    def contains(self, word: str) -> bool:
        """
        True if word is stored verbatim, or its lower-cased form is.
        The lower-case fallback keeps capitalised words (sentence starts)
        from being reported as misspelled.
        """
        code = self.code_for(word)
        bucket = self.lookup(code)
        if word in bucket:
            return True
        lowered = word.lower()
        if lowered == word:
            return False
        if lowered in bucket:
            return True
        # Case-sensitive encoders may file the lower-cased form elsewhere.
        lowered_code = self.code_for(lowered)
        return lowered_code != code and lowered in self.lookup(lowered_code)

    def codes(self) -> List[str]:
        with self._lock:
            return list(self._buckets)

    def items(self) -> List[Tuple[str, List[str]]]:
        """Snapshot of (code, words) pairs."""
        with self._lock:
            return [(code, list(words)) for code, words in self._buckets.items()]

    @property
    def bucket_count(self) -> int:
        with self._lock:
            return len(self._buckets)

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"PhoneticIndex(encoder={self._encoder!r}, words={self._size}, buckets={self.bucket_count})"
