"""Process-wide SpellChecker, built lazily from config on first use."""
import logging
import sys
import threading
from pathlib import Path
from typing import Optional

# Project root on path for phonetics, speller
ROOT = Path(__file__).resolve().parent.parent.parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from phonetics import get_encoder
from speller import SpellChecker, load_index

from ..config import DEFAULT_THRESHOLD, ENCODER_NAME, INDEX_PATH, WORDLIST_PATH

logger = logging.getLogger(__name__)

_checker: Optional[SpellChecker] = None
_lock = threading.Lock()


def _build_checker() -> SpellChecker:
    encoder = get_encoder(ENCODER_NAME)
    if INDEX_PATH is not None:
        logger.info("Loading saved index %s", INDEX_PATH)
        return SpellChecker(load_index(INDEX_PATH, encoder), threshold=DEFAULT_THRESHOLD)
    logger.info("Building index from word list %s", WORDLIST_PATH)
    return SpellChecker.from_file(WORDLIST_PATH, encoder=encoder, threshold=DEFAULT_THRESHOLD)


def get_spell_checker() -> SpellChecker:
    """
    Return the shared checker, building it on first call.
    A load failure propagates; the next call retries.
    """
    global _checker
    if _checker is None:
        with _lock:
            if _checker is None:
                _checker = _build_checker()
    return _checker


def set_spell_checker(checker: Optional[SpellChecker]) -> None:
    """Replace the shared checker (tests, hot reload)."""
    global _checker
    with _lock:
        _checker = checker


def reset_spell_checker() -> None:
    set_spell_checker(None)
