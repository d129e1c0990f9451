"""
Index storage backends: JSON file and SQLite.
Both store the encoder name next to the buckets so an index is never
queried with codes from a different encoder.
"""

import json
import sqlite3
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from phonetics import PhoneticEncoder, get_encoder

from .errors import WordListError
from .index import PhoneticIndex

Buckets = Dict[str, List[str]]


class IndexBackend:
    """Abstract backend for (code, words) buckets."""

    def write(self, encoder_name: str, buckets: Buckets) -> None:
        """Replace stored contents with buckets."""
        raise NotImplementedError

    def read(self) -> Tuple[str, Buckets]:
        """Return (encoder_name, buckets). WordListError if unreadable."""
        raise NotImplementedError

    def close(self) -> None:
        """Release resources."""
        pass


class JsonIndexBackend(IndexBackend):
    """{"encoder": name, "buckets": {code: [word, ...]}} in one JSON file."""

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    def write(self, encoder_name: str, buckets: Buckets) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with open(self._path, "w", encoding="utf-8") as f:
            json.dump({"encoder": encoder_name, "buckets": buckets}, f, indent=2, ensure_ascii=False)

    def read(self) -> Tuple[str, Buckets]:
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise WordListError(f"Could not read index {self._path}: {e}") from e
        if not isinstance(raw, dict) or not isinstance(raw.get("buckets"), dict):
            raise WordListError(f"Unexpected index format in {self._path}")
        buckets: Buckets = {}
        for code, words in raw["buckets"].items():
            if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
                raise WordListError(f"Bucket {code!r} in {self._path} is not a list of words")
            buckets[code] = words
        return str(raw.get("encoder", "")), buckets


class SqliteIndexBackend(IndexBackend):
    """
    SQLite-backed index: one row per (code, word).
    rowid order keeps bucket order and duplicate entries.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        try:
            self._conn = sqlite3.connect(str(self._path), check_same_thread=False)
        except sqlite3.DatabaseError as e:
            raise WordListError(f"Could not open index {self._path}: {e}") from e
        try:
            self._conn.execute("CREATE TABLE IF NOT EXISTS meta (key TEXT PRIMARY KEY, value TEXT NOT NULL)")
            self._conn.execute("CREATE TABLE IF NOT EXISTS buckets (code TEXT NOT NULL, word TEXT NOT NULL)")
            self._conn.execute("CREATE INDEX IF NOT EXISTS idx_code ON buckets(code)")
            self._conn.commit()
        except sqlite3.DatabaseError as e:
            self._conn.close()
            raise WordListError(f"Could not open index {self._path}: {e}") from e

    def write(self, encoder_name: str, buckets: Buckets) -> None:
        with self._conn:
            self._conn.execute("DELETE FROM buckets")
            self._conn.execute(
                "INSERT OR REPLACE INTO meta (key, value) VALUES ('encoder', ?)", (encoder_name,)
            )
            self._conn.executemany(
                "INSERT INTO buckets (code, word) VALUES (?, ?)",
                ((code, word) for code, words in buckets.items() for word in words),
            )

    def read(self) -> Tuple[str, Buckets]:
        try:
            row = self._conn.execute("SELECT value FROM meta WHERE key = 'encoder'").fetchone()
            cur = self._conn.execute("SELECT code, word FROM buckets ORDER BY rowid")
            buckets: Buckets = {}
            for code, word in cur:
                buckets.setdefault(code, []).append(word)
        except sqlite3.DatabaseError as e:
            raise WordListError(f"Could not read index {self._path}: {e}") from e
        return (row[0] if row else ""), buckets

    def close(self) -> None:
        self._conn.close()


def open_backend(path: Union[str, Path]) -> IndexBackend:
    """SQLite for .db/.sqlite/.sqlite3 paths, JSON otherwise."""
    path = Path(path)
    if path.suffix.lower() in (".db", ".sqlite", ".sqlite3"):
        return SqliteIndexBackend(path)
    return JsonIndexBackend(path)


def save_index(index: PhoneticIndex, path: Union[str, Path]) -> None:
    backend = open_backend(path)
    try:
        backend.write(index.encoder.name, dict(index.items()))
    finally:
        backend.close()


def load_index(path: Union[str, Path], encoder: Optional[PhoneticEncoder] = None) -> PhoneticIndex:
    """
    Load a saved index. Without an explicit encoder the stored encoder name
    is used; with one, the stored name must match it.
    """
    path = Path(path)
    if not path.exists():
        raise WordListError(f"Index file not found: {path}")
    backend = open_backend(path)
    try:
        encoder_name, buckets = backend.read()
    finally:
        backend.close()
    if encoder is None:
        try:
            encoder = get_encoder(encoder_name or "metaphone")
        except ValueError as e:
            raise WordListError(f"Index {path} was built with an unknown encoder: {e}") from e
    elif encoder_name and encoder_name != encoder.name:
        raise WordListError(
            f"Index {path} was built with the {encoder_name!r} encoder, not {encoder.name!r}"
        )
    return PhoneticIndex.from_buckets(buckets, encoder)
