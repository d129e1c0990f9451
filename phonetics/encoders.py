"""
Phonetic encoders: map a word to a short code shared by similar-sounding words.

- Metaphone (default): jellyfish implementation, consonant-skeleton codes.
- Soundex: first letter + 3 digits.
- Every encoder declares its output alphabet; candidate generation mutates
  codes over exactly that alphabet.
"""

from typing import Dict, Type

import jellyfish

# Soundex digit mapping: A=0, B=1, C=2, ... (index by ord(c)-ord('A'))
_SOUNDEX_DIGITS = "01230120022455012623010202"


class PhoneticEncoder:
    """Abstract encoder: pure, deterministic, total word -> code mapping."""

    name: str = ""
    # Every symbol encode() may emit, placeholder symbols included.
    alphabet: str = ""

    def encode(self, word: str) -> str:
        """Return the phonetic code for word ("" when nothing is pronounceable)."""
        raise NotImplementedError

    def conforms(self, code: str) -> bool:
        """True if every symbol of code belongs to this encoder's alphabet."""
        return all(c in self.alphabet for c in code)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class MetaphoneEncoder(PhoneticEncoder):
    """
    Metaphone via jellyfish. Vowels only survive in first position;
    '0' stands for the "th" sound.
    """

    name = "metaphone"
    alphabet = "AEIOUBFHJKLMNPRSTWXY0"

    def encode(self, word: str) -> str:
        if not word:
            return ""
        code = jellyfish.metaphone(word.lower()).upper()
        # Drop anything outside the declared alphabet (word separators etc.)
        return "".join(c for c in code if c in self.alphabet)


class SoundexEncoder(PhoneticEncoder):
    """Soundex: first letter + 3 digits from consonants, zero padded."""

    name = "soundex"
    alphabet = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456"

    def __init__(self, length: int = 4) -> None:
        self.length = length

    def encode(self, word: str) -> str:
        return soundex(word, self.length)

    def __repr__(self) -> str:
        return f"SoundexEncoder(length={self.length})"


def soundex(word: str, length: int = 4) -> str:
    """
    Soundex encoding: first letter + 3 digits from consonants.
    Similar-sounding words get the same code.
    """
    if not word or not word.isascii() or not word.isalpha():
        return ""
    word = word.upper()
    code = word[0]
    for c in word[1:]:
        d = _SOUNDEX_DIGITS[ord(c) - ord("A")]
        if d == "0":
            continue
        if code[-1] == d:
            continue
        code += d
    return (code + "0" * length)[:length]


ENCODERS: Dict[str, Type[PhoneticEncoder]] = {
    MetaphoneEncoder.name: MetaphoneEncoder,
    SoundexEncoder.name: SoundexEncoder,
}


def get_encoder(name: str) -> PhoneticEncoder:
    """Return a fresh encoder instance by registry name."""
    try:
        return ENCODERS[name.strip().lower()]()
    except KeyError:
        raise ValueError(
            f"Unknown encoder {name!r}; expected one of: {', '.join(sorted(ENCODERS))}"
        ) from None
