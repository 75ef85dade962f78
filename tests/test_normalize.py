from textsim import NormalizeOptions, normalize_string


def test_removes_diacritics_and_lowercases():
    assert normalize_string("École") == "ecole"


def test_punctuation_becomes_single_space():
    s = "Normandie Univ, UNILEHAVRE, FR 3038 CNRS, URCOM, 76600 Le Havre, France"
    assert normalize_string(s) == "normandie univ unilehavre fr 3038 cnrs urcom 76600 le havre france"


def test_newlines_and_special_chars():
    assert (
        normalize_string("URCOM - Unité de Recherche en Chimie\nOrganique")
        == "urcom unite de recherche en chimie organique"
    )
    assert normalize_string("  A   B  ") == "a b"
    assert normalize_string("Room #42, Bldg. 7") == "room 42 bldg 7"
    assert normalize_string("snake_case") == "snake case"


def test_none_and_non_string_input():
    assert normalize_string(None) == ""
    assert normalize_string(3038) == "3038"


def test_all_stages_disabled_is_identity():
    opts = NormalizeOptions(
        remove_diacritics=False,
        to_lower_case=False,
        remove_punctuation=False,
        collapse_whitespace=False,
    )
    s = "  Éco,  Le\tHavre! "
    assert normalize_string(s, opts) == s


def test_single_stage():
    opts = NormalizeOptions(
        remove_diacritics=True,
        to_lower_case=False,
        remove_punctuation=False,
        collapse_whitespace=False,
    )
    assert normalize_string("Équipe, Ça", opts) == "Equipe, Ca"


def test_idempotent():
    samples = [
        "Université Le Havre Normandie, Équipe de Recherche",
        "  İstanbul — Straße ½ ",
        "",
        "already normal",
    ]
    for s in samples:
        once = normalize_string(s)
        assert normalize_string(once) == once
