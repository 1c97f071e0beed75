"""
Tests for the parsing display helpers.
"""

import pytest

from gntparse.core.formatting import (
    english_camel_case,
    english_name,
    greek_article,
    part_of_speech_from_name,
    render_parsing,
)
from gntparse.core.models import Case, Gender, PartOfSpeech, Parsing, Person, TenseForm
from gntparse.core.normalizers.morphgnt import parse


@pytest.mark.parametrize(
    "tag,expected",
    [
        ("V- 1AAI-S--", "V-AAI-1S"),
        ("V- 3PAS-S--", "V-PAS-3S"),
        ("V- 2PAM-P--", "V-PAM-2P"),
        ("V- 3XAI-S--", "V-RAI-3S"),
        ("V- -PAPNSM-", "V-PAP-NSM"),
        ("V- -PAPN---", "V-PAP-N"),
        ("V- -PMN----", "V-PMN"),
        ("A- ----DPM-", "A-DPM"),
        ("N- ----DSF-", "N-DSF"),
        ("RA ----DSF-", "T-DSF"),
        ("RR ----NSM-", "R-NSM"),
        ("RX ----DPM-", "R-DPM"),
        ("RD ----NSN-", "D-NSN"),
        ("RI ----ASN-", "O-ASN"),
        ("RP ----DP--", "S"),
        ("D- --------", "ADV"),
        ("D- ----C---", "ADV-C"),
        ("D- ----S---", "ADV-S"),
        ("C- --------", "CONJ"),
        ("X- --------", "PRT"),
        ("P- --------", "PREP"),
        ("I- --------", "INJ"),
        ("N- ---I----", "N-OI"),
        ("M- ---I----", "A-NUI"),
        ("M- ----NPM-", "A-NU-NPM"),
        ("A- ---CNSN-", "A-NSN-C"),
        ("N- ---SNSM-", "N-NSM-S"),
        ("V", "V"),
    ],
)
def test_render_parsing(tag, expected):
    """Renders decoded tags as compact codes."""
    assert render_parsing(parse(tag)) == expected


def test_render_unknown_is_empty():
    assert render_parsing(Parsing()) == ""


def test_render_stops_at_first_unknown():
    p = Parsing(part_of_speech=PartOfSpeech.VERB, tense_form=TenseForm.AORIST)
    assert render_parsing(p) == "V-A"


def test_render_indefinite_pronoun():
    p = Parsing(part_of_speech=PartOfSpeech.PRONOUN, indefinite=True, case=Case.ACCUSATIVE)
    assert render_parsing(p) == "X-A"


def test_render_possessive_with_person():
    p = Parsing(part_of_speech=PartOfSpeech.POSSESSIVE_PRONOUN, person=Person.FIRST)
    assert render_parsing(p) == "S-1"


class TestEnglishNames:
    """Test English part-of-speech names."""

    def test_spaced_names(self):
        assert english_name(parse("RA")) == "Definite Article"
        assert english_name(parse("N- ---SNSM-")) == "Superlative Noun"
        assert english_name(Parsing()) == ""

    def test_indefinite_pronoun(self):
        p = Parsing(part_of_speech=PartOfSpeech.PRONOUN, indefinite=True)
        assert english_name(p) == "Indefinite Pronoun"
        assert english_camel_case(p) == "IndefinitePronoun"

    def test_camel_case(self):
        assert english_camel_case(parse("RD")) == "DemonstrativePronoun"
        assert english_camel_case(Parsing()) == "Unknown"

    @pytest.mark.parametrize(
        "text",
        ["Relative Pronoun", "relative_pronoun", "relative-pronoun", "RelativePronoun", "  relative pronoun "],
    )
    def test_name_lookup_variants(self, text):
        assert part_of_speech_from_name(text).part_of_speech == PartOfSpeech.RELATIVE_PRONOUN

    def test_name_lookup_sets_flag(self):
        p = part_of_speech_from_name("indefinite pronoun")
        assert p.part_of_speech == PartOfSpeech.PRONOUN
        assert p.indefinite is True

    def test_unrecognised_name(self):
        assert part_of_speech_from_name("fishing") == Parsing()
        assert part_of_speech_from_name("") == Parsing()

    @pytest.mark.parametrize("pos", list(PartOfSpeech))
    def test_name_round_trip(self, pos):
        name = english_name(Parsing(part_of_speech=pos))
        assert part_of_speech_from_name(name).part_of_speech == pos


@pytest.mark.parametrize(
    "gender,expected",
    [
        (Gender.MASCULINE, "ὁ"),
        (Gender.FEMININE, "ἡ"),
        (Gender.NEUTER, "τό"),
        (Gender.UNKNOWN, ""),
    ],
)
def test_greek_article(gender, expected):
    assert greek_article(gender) == expected
