"""
Pytest configuration: project root on sys.path, plus encoders with
predictable codes so candidate generation can be tested exactly.
"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from phonetics import PhoneticEncoder
from speller import PhoneticIndex, SpellChecker


class MappingEncoder(PhoneticEncoder):
    """Codes come from a fixed table; unknown words encode to their upper-case form."""

    name = "mapping"

    def __init__(self, codes, alphabet="KTXDG", fail_on=()):
        self.codes = dict(codes)
        self.alphabet = alphabet
        self.fail_on = set(fail_on)

    def encode(self, word):
        if word in self.fail_on:
            raise RuntimeError(f"cannot encode {word}")
        return self.codes.get(word, word.upper())


@pytest.fixture
def mapping_encoder():
    return MappingEncoder(
        {
            "cat": "KT",
            "Cat": "KT",
            "cot": "KT",
            "cats": "KX",
            "kit": "TK",
            "dog": "DK",
            "cta": "KT",
        }
    )


@pytest.fixture
def mapping_index(mapping_encoder):
    return PhoneticIndex.build(["cat", "cot", "cats", "kit", "dog"], mapping_encoder)


@pytest.fixture
def small_checker():
    return SpellChecker.from_words(["cat", "cot", "dog", "catalog"])
