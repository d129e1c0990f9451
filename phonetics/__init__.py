"""Phonetic coding and edit-distance primitives used by the speller."""

from .encoders import (
    PhoneticEncoder,
    MetaphoneEncoder,
    SoundexEncoder,
    ENCODERS,
    get_encoder,
    soundex,
)
from .distance import (
    EditWeights,
    DEFAULT_WEIGHTS,
    UNIT_WEIGHTS,
    weighted_edit_distance,
)

__all__ = [
    "PhoneticEncoder",
    "MetaphoneEncoder",
    "SoundexEncoder",
    "ENCODERS",
    "get_encoder",
    "soundex",
    "EditWeights",
    "DEFAULT_WEIGHTS",
    "UNIT_WEIGHTS",
    "weighted_edit_distance",
]
