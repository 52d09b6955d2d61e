"""
Tests for comune normalization and fuzzy matching.
"""

from __future__ import annotations

from itertools import product

import pytest

from italy_geo.municipality import match_municipality, normalize_municipality
from italy_geo.registry import get_registry


class TestNormalization:
    def test_accents_and_case(self):
        assert normalize_municipality("Città") == "citta"
        assert normalize_municipality("citta") == "citta"
        assert normalize_municipality("CITTA") == "citta"
        assert normalize_municipality("CITTÀ") == "citta"

    def test_san_abbreviation(self):
        expected = "san giovanni valdarno"
        assert normalize_municipality("S. Giovanni Valdarno") == expected
        assert normalize_municipality("San Giovanni Valdarno") == expected

    def test_other_abbreviations(self):
        assert normalize_municipality("Sta. Maria Capua Vetere") == "santa maria capua vetere"
        assert normalize_municipality("S.ta Maria Capua Vetere") == "santa maria capua vetere"
        assert normalize_municipality("St. Vincent") == "santo vincent"
        assert normalize_municipality("N. Ligure") == "nuovo ligure"
        assert normalize_municipality("V. Ligure") == "vecchio ligure"

    def test_abbreviation_inside_name(self):
        assert normalize_municipality("Borgo S. Dalmazzo") == "borgo san dalmazzo"

    def test_abbreviation_needs_word_start(self):
        # "s." ends "pass." here, not a word of its own
        assert normalize_municipality("Pass. Oltre") == "pass. oltre"

    def test_elision(self):
        assert normalize_municipality("L'Aquila") == normalize_municipality("Aquila") == "aquila"
        assert normalize_municipality("D'Antona") == "antona"
        assert normalize_municipality("Dell'Orto") == "orto"
        assert normalize_municipality("l' aquila") == "aquila"

    def test_whitespace(self):
        assert normalize_municipality("  Reggio    Emilia  ") == "reggio emilia"

    def test_short_or_empty(self):
        assert normalize_municipality("") == ""
        assert normalize_municipality("M") == ""
        assert normalize_municipality("  M  ") == ""
        assert normalize_municipality(None) == ""

    def test_unmapped_characters_pass_through(self):
        assert normalize_municipality("Łódź") == "łodz"

    def test_deterministic(self):
        assert normalize_municipality("Sesto S. Giovanni") == normalize_municipality("Sesto S. Giovanni")

    def test_registry_exposes_normalizer(self):
        assert get_registry().normalize_municipality("L'Aquila") == "aquila"


class TestMatching:
    def test_exact_after_normalization(self):
        assert match_municipality("Milano", "MILANO")
        assert match_municipality("San Giovanni", "S. Giovanni")
        assert match_municipality("L'Aquila", "Aquila")
        assert match_municipality("Città di Castello", "Citta di Castello")

    def test_different(self):
        assert not match_municipality("Roma", "Milano")

    def test_substring_length_ratio(self):
        # 13 / 4 = 3.25
        assert not match_municipality("Roma", "Roma Capitale")
        # 6 / 4 = 1.5
        assert not match_municipality("Bari", "Barion")
        # 15 / 5 = 3.0
        assert not match_municipality("Monza", "Monza e Brianza")
        # 7 / 6 = 1.17
        assert match_municipality("Pesaro", "Pesaros")

    def test_empty_never_matches(self):
        assert not match_municipality("", "")
        assert not match_municipality(".", "!")
        assert not match_municipality("L'", "D'")
        assert not match_municipality(None, "Roma")
        assert not match_municipality("Roma", "")
        assert not match_municipality("Roma", "R")

    @pytest.mark.parametrize("name", ["Milano", "L'Aquila", "S. Giovanni Valdarno", "Forlì", "bari"])
    def test_reflexive(self, name):
        assert match_municipality(name, name)

    def test_symmetric(self):
        samples = [
            "Roma", "Roma Capitale", "Milano", "MILANO", "Pesaro", "Pesaros",
            "L'Aquila", "Aquila", "S. Giovanni", "San Giovanni", "Bari", "Barion",
            "", ".", "Monza", "Monza e Brianza", "Città", "citta",
        ]
        for a, b in product(samples, repeat=2):
            assert match_municipality(a, b) == match_municipality(b, a), (a, b)

    def test_registry_exposes_matcher(self):
        assert get_registry().match_municipality("Milano", "milano")
