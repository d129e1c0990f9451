"""FastAPI application: CORS, logging and spelling routes."""
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import LOG_LEVEL
from .routes import benchmark, spell
from .services.dictionary_service import get_spell_checker

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(levelname)s: %(message)s",
)

app = FastAPI(
    title="Phonetic Spelling API",
    description="Spell checking and ranked suggestions from a phonetic index",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:5173",
        "http://localhost:3000",
        "http://127.0.0.1:5173",
        "http://127.0.0.1:3000",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(spell.router)
app.include_router(benchmark.router)


@app.get("/api/health")
def health():
    return {"status": "ok", "words": len(get_spell_checker())}
