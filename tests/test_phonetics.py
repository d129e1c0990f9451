"""Encoders and edit distance: codes, alphabets, weighted costs."""

import pytest

from phonetics import (
    DEFAULT_WEIGHTS,
    UNIT_WEIGHTS,
    EditWeights,
    MetaphoneEncoder,
    SoundexEncoder,
    get_encoder,
    soundex,
    weighted_edit_distance,
)


def test_soundex_classic_codes():
    assert soundex("Robert") == "R163"
    assert soundex("Rupert") == "R163"
    assert soundex("Ashcraft") == "A261"
    assert soundex("Lee") == "L000"


def test_soundex_non_alpha_is_empty():
    assert soundex("") == ""
    assert soundex("don't") == ""
    assert soundex("naïve") == ""


def test_soundex_encoder_stays_in_alphabet():
    enc = SoundexEncoder()
    for word in ("Robert", "Tymczak", "Pfister", "x", "zzz"):
        code = enc.encode(word)
        assert len(code) == 4
        assert enc.conforms(code)


def test_metaphone_same_code_for_similar_words():
    enc = MetaphoneEncoder()
    assert enc.encode("cat") == enc.encode("kat")
    assert enc.encode("Cat") == enc.encode("cat")


def test_metaphone_is_total_and_conforms():
    enc = MetaphoneEncoder()
    assert enc.encode("") == ""
    for word in ("hello world", "O'Brien", "naïve", "1234", "thumb", "xylophone"):
        code = enc.encode(word)
        assert isinstance(code, str)
        assert enc.conforms(code)


def test_get_encoder():
    assert isinstance(get_encoder("metaphone"), MetaphoneEncoder)
    assert isinstance(get_encoder(" SOUNDEX "), SoundexEncoder)
    with pytest.raises(ValueError):
        get_encoder("nysiis")


def test_weighted_distance_default_costs():
    assert weighted_edit_distance("cat", "cat") == 0
    assert weighted_edit_distance("cat", "cot") == DEFAULT_WEIGHTS.substitution
    assert weighted_edit_distance("cat", "act") == DEFAULT_WEIGHTS.swap
    assert weighted_edit_distance("Cat", "cat") == DEFAULT_WEIGHTS.similar
    assert weighted_edit_distance("cat", "cats") == DEFAULT_WEIGHTS.insertion
    assert weighted_edit_distance("caat", "cat") == DEFAULT_WEIGHTS.deletion
    assert weighted_edit_distance("", "abc") == 3 * DEFAULT_WEIGHTS.insertion
    assert weighted_edit_distance("abc", "") == 3 * DEFAULT_WEIGHTS.deletion


def test_weighted_distance_asymmetric_weights():
    w = EditWeights(deletion=10, insertion=50)
    assert weighted_edit_distance("cats", "cat", w) == 10
    assert weighted_edit_distance("cat", "cats", w) == 50


def test_unit_weights_match_levenshtein():
    cases = {
        ("kitten", "sitting"): 3,
        ("flaw", "lawn"): 2,
        ("", "abc"): 3,
        ("gumbo", "gambol"): 2,
        ("abc", "abc"): 0,
    }
    for (a, b), expected in cases.items():
        assert weighted_edit_distance(a, b, UNIT_WEIGHTS) == expected


def test_negative_weight_rejected():
    with pytest.raises(ValueError):
        EditWeights(swap=-1)
