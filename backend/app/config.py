"""App configuration from environment."""
import os
from pathlib import Path

from dotenv import load_dotenv

# Project root (phonospell/) for phonetics, speller, benchmark
ROOT_DIR = Path(__file__).resolve().parent.parent.parent

# Load .env from backend directory
load_dotenv(str(ROOT_DIR / "backend" / ".env"))

# Dictionary source: a saved index wins over the word list when set
WORDLIST_PATH = Path(os.environ.get("SPELL_WORDLIST", str(ROOT_DIR / "data" / "sample_words.txt")))
_index_path = os.environ.get("SPELL_INDEX_PATH", "").strip()
INDEX_PATH = Path(_index_path) if _index_path else None
ENCODER_NAME = os.environ.get("SPELL_ENCODER", "metaphone").strip().lower()

# Suggestions
DEFAULT_THRESHOLD = int(os.environ.get("SPELL_THRESHOLD", 140))

# Input validation
MAX_WORD_LENGTH = int(os.environ.get("SPELL_MAX_WORD_LENGTH", 64))
MAX_WORDS_PER_REQUEST = int(os.environ.get("SPELL_MAX_WORDS_PER_REQUEST", 500))

# Rate limits (per client): requests per window
RATE_LIMIT_SUGGEST_PER_MINUTE = int(os.environ.get("SPELL_RATE_LIMIT_SUGGEST", 120))
RATE_LIMIT_WINDOW_SECONDS = 60

LOG_LEVEL = os.environ.get("SPELL_LOG_LEVEL", "INFO").upper()
