import random

import pytest

from textsim import levenshtein


def test_identical_strings_zero():
    assert levenshtein("abc", "abc") == 0


def test_empty_string_gives_other_length():
    assert levenshtein("", "abc") == 3
    assert levenshtein("abc", "") == 3
    assert levenshtein("", "") == 0


def test_known_distances():
    assert levenshtein("kitten", "sitting") == 3
    assert levenshtein("flaw", "lawn") == 2
    assert levenshtein("gumbo", "gambol") == 2


def test_symmetric():
    pairs = [("kitten", "sitting"), ("Le Havre", "UNILEHAVRE"), ("a", "")]
    for a, b in pairs:
        assert levenshtein(a, b) == levenshtein(b, a)


def test_long_affiliation_strings():
    a = "Normandie Univ UNIHAVRE FR 3038 CNRS URCOM 76600 Le Havre France"
    b = "Normandie Univ, UNILEHAVRE, FR 3038 CNRS, URCOM, 76600 Le Havre, France"
    assert levenshtein(a, b) > 5


def test_matches_rapidfuzz():
    distance = pytest.importorskip("rapidfuzz.distance")
    rnd = random.Random(7)
    for _ in range(200):
        a = "".join(rnd.choice("abcé ") for _ in range(rnd.randint(0, 12)))
        b = "".join(rnd.choice("abcé ") for _ in range(rnd.randint(0, 12)))
        assert levenshtein(a, b) == distance.Levenshtein.distance(a, b)
