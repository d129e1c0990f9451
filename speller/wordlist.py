"""
Word list loading: one word per line, blank lines dropped.
Accepts a path or an already open text stream.
"""

from pathlib import Path
from typing import IO, Iterable, Iterator, List, Union

from .errors import WordListError

WordSource = Union[str, Path, IO[str]]


def iter_words(lines: Iterable[str]) -> Iterator[str]:
    """Yield stripped, non-blank lines in order. Duplicates are kept."""
    for line in lines:
        word = line.strip()
        if word:
            yield word


def read_words(source: WordSource, encoding: str = "utf-8") -> List[str]:
    """
    Read a word list from a file path or text stream.
    Raises WordListError if the file is missing, unreadable or not decodable.
    """
    if isinstance(source, (str, Path)):
        path = Path(source)
        try:
            with open(path, "r", encoding=encoding) as f:
                return list(iter_words(f))
        except (OSError, UnicodeDecodeError) as e:
            raise WordListError(f"Could not read word list {path}: {e}") from e
    try:
        return list(iter_words(source))
    except (OSError, UnicodeDecodeError) as e:
        raise WordListError(f"Could not read word list stream: {e}") from e
