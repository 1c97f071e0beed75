"""
Display helpers for decoded parsings.

Renders a `Parsing` as a compact Robinson-style code (``V-AAI-1S``,
``N-DSF``) and provides English part-of-speech names in both directions.
"""

from __future__ import annotations

import re
from typing import Dict, List

from gntparse.core.models import (
    Case,
    Gender,
    Mood,
    Number,
    PartOfSpeech,
    Parsing,
    Person,
    TenseForm,
    Voice,
)

# ============================================================================
# Code Letters
# ============================================================================

CASE_LETTERS: Dict[Case, str] = {
    Case.NOMINATIVE: "N",
    Case.ACCUSATIVE: "A",
    Case.GENITIVE: "G",
    Case.DATIVE: "D",
    Case.VOCATIVE: "V",
}

NUMBER_LETTERS: Dict[Number, str] = {
    Number.SINGULAR: "S",
    Number.PLURAL: "P",
}

GENDER_LETTERS: Dict[Gender, str] = {
    Gender.MASCULINE: "M",
    Gender.FEMININE: "F",
    Gender.NEUTER: "N",
}

PERSON_LETTERS: Dict[Person, str] = {
    Person.FIRST: "1",
    Person.SECOND: "2",
    Person.THIRD: "3",
}

TENSE_FORM_LETTERS: Dict[TenseForm, str] = {
    TenseForm.PRESENT: "P",
    TenseForm.IMPERFECT: "I",
    TenseForm.FUTURE: "F",
    TenseForm.AORIST: "A",
    TenseForm.PERFECT: "R",
    TenseForm.PLUPERFECT: "L",
}

VOICE_LETTERS: Dict[Voice, str] = {
    Voice.ACTIVE: "A",
    Voice.MIDDLE: "M",
    Voice.PASSIVE: "P",
}

MOOD_LETTERS: Dict[Mood, str] = {
    Mood.INDICATIVE: "I",
    Mood.SUBJUNCTIVE: "S",
    Mood.OPTATIVE: "O",
    Mood.IMPERATIVE: "M",
    Mood.INFINITIVE: "N",
    Mood.PARTICIPLE: "P",
}

# Parts of speech rendered as a fixed word
INVARIABLE_CODES: Dict[PartOfSpeech, str] = {
    PartOfSpeech.ADVERB: "ADV",
    PartOfSpeech.COMPARATIVE_ADVERB: "ADV-C",
    PartOfSpeech.SUPERLATIVE_ADVERB: "ADV-S",
    PartOfSpeech.CONJUNCTION: "CONJ",
    PartOfSpeech.PARTICLE: "PRT",
    PartOfSpeech.PREPOSITION: "PREP",
    PartOfSpeech.INTERJECTION: "INJ",
}

# Parts of speech rendered as a prefix letter followed by case/number/gender
DECLINED_PREFIXES: Dict[PartOfSpeech, str] = {
    PartOfSpeech.NOUN: "N",
    PartOfSpeech.ARTICLE: "T",
    PartOfSpeech.ADJECTIVE: "A",
    PartOfSpeech.RELATIVE_PRONOUN: "R",
    PartOfSpeech.DEMONSTRATIVE_PRONOUN: "D",
    PartOfSpeech.NUMERAL: "A-NU",
}

# Comparative/superlative nominals: (prefix, suffix)
DEGREE_CODES: Dict[PartOfSpeech, tuple] = {
    PartOfSpeech.COMPARATIVE_NOUN: ("N", "-C"),
    PartOfSpeech.COMPARATIVE_ADJECTIVE: ("A", "-C"),
    PartOfSpeech.SUPERLATIVE_NOUN: ("N", "-S"),
    PartOfSpeech.SUPERLATIVE_ADJECTIVE: ("A", "-S"),
}

GREEK_ARTICLES: Dict[Gender, str] = {
    Gender.MASCULINE: "ὁ",
    Gender.FEMININE: "ἡ",
    Gender.NEUTER: "τό",
}


# ============================================================================
# Rendering
# ============================================================================


def _case_number_gender(p: Parsing) -> str:
    """``-DSF`` style suffix, stopping at the first unknown component."""
    if p.case not in CASE_LETTERS:
        return ""
    out = "-" + CASE_LETTERS[p.case]
    if p.number not in NUMBER_LETTERS:
        return out
    out += NUMBER_LETTERS[p.number]
    return out + GENDER_LETTERS.get(p.gender, "")


def _verb(p: Parsing) -> str:
    out: List[str] = ["V"]
    if p.tense_form not in TENSE_FORM_LETTERS:
        return "".join(out)
    out.append("-" + TENSE_FORM_LETTERS[p.tense_form])
    if p.voice not in VOICE_LETTERS:
        return "".join(out)
    out.append(VOICE_LETTERS[p.voice])
    if p.mood not in MOOD_LETTERS:
        return "".join(out)
    out.append(MOOD_LETTERS[p.mood])

    if p.mood == Mood.INFINITIVE:
        return "".join(out)
    if p.mood == Mood.PARTICIPLE:
        out.append(_case_number_gender(p))
        return "".join(out)

    if p.person not in PERSON_LETTERS:
        return "".join(out)
    out.append("-" + PERSON_LETTERS[p.person])
    out.append(NUMBER_LETTERS.get(p.number, ""))
    return "".join(out)


def render_parsing(p: Parsing) -> str:
    """Render a parsing as a compact code.

    Args:
        p: Parsing to render

    Returns:
        Code such as ``V-AAI-1S``, ``V-PAP-NSM``, ``A-DPM`` or ``CONJ``;
        empty when the part of speech is unknown.
    """
    pos = p.part_of_speech

    if pos in INVARIABLE_CODES:
        return INVARIABLE_CODES[pos]

    if p.indeclinable:
        if pos == PartOfSpeech.NOUN:
            return "N-OI"
        if pos == PartOfSpeech.NUMERAL:
            return "A-NUI"

    if pos == PartOfSpeech.VERB:
        return _verb(p)

    if pos in DECLINED_PREFIXES:
        return DECLINED_PREFIXES[pos] + _case_number_gender(p)

    if pos in DEGREE_CODES:
        prefix, suffix = DEGREE_CODES[pos]
        return prefix + _case_number_gender(p) + suffix

    if pos == PartOfSpeech.PRONOUN:
        return ("X" if p.indefinite else "O") + _case_number_gender(p)

    if pos == PartOfSpeech.POSSESSIVE_PRONOUN:
        if p.person in PERSON_LETTERS:
            return "S-" + PERSON_LETTERS[p.person]
        return "S"

    return ""


# ============================================================================
# English Names
# ============================================================================

ENGLISH_NAMES: Dict[PartOfSpeech, str] = {
    PartOfSpeech.UNKNOWN: "",
    PartOfSpeech.NOUN: "Noun",
    PartOfSpeech.ADJECTIVE: "Adjective",
    PartOfSpeech.ARTICLE: "Definite Article",
    PartOfSpeech.PRONOUN: "Pronoun",
    PartOfSpeech.DEMONSTRATIVE_PRONOUN: "Demonstrative Pronoun",
    PartOfSpeech.POSSESSIVE_PRONOUN: "Possessive Pronoun",
    PartOfSpeech.RELATIVE_PRONOUN: "Relative Pronoun",
    PartOfSpeech.CONJUNCTION: "Conjunction",
    PartOfSpeech.PARTICLE: "Particle",
    PartOfSpeech.INTERJECTION: "Interjection",
    PartOfSpeech.NUMERAL: "Numeral",
    PartOfSpeech.PREPOSITION: "Preposition",
    PartOfSpeech.ADVERB: "Adverb",
    PartOfSpeech.VERB: "Verb",
    PartOfSpeech.COMPARATIVE_NOUN: "Comparative Noun",
    PartOfSpeech.COMPARATIVE_ADJECTIVE: "Comparative Adjective",
    PartOfSpeech.COMPARATIVE_ADVERB: "Comparative Adverb",
    PartOfSpeech.SUPERLATIVE_NOUN: "Superlative Noun",
    PartOfSpeech.SUPERLATIVE_ADJECTIVE: "Superlative Adjective",
    PartOfSpeech.SUPERLATIVE_ADVERB: "Superlative Adverb",
}


def english_name(p: Parsing) -> str:
    """Capitalised English name for the part of speech, words separated by spaces."""
    if p.part_of_speech == PartOfSpeech.PRONOUN and p.indefinite:
        return "Indefinite Pronoun"
    return ENGLISH_NAMES[p.part_of_speech]


def english_camel_case(p: Parsing) -> str:
    """English name with no spaces, e.g. ``DefiniteArticle``."""
    if p.part_of_speech == PartOfSpeech.UNKNOWN:
        return "Unknown"
    return english_name(p).replace(" ", "")


def _name_key(text: str) -> str:
    return re.sub(r"[\s_\-]+", "", text.strip().lower())


_NAME_LOOKUP: Dict[str, Parsing] = {
    _name_key(name): Parsing(part_of_speech=pos) for pos, name in ENGLISH_NAMES.items() if name
}
_NAME_LOOKUP[_name_key("Article")] = Parsing(part_of_speech=PartOfSpeech.ARTICLE)
_NAME_LOOKUP[_name_key("Indefinite Pronoun")] = Parsing(part_of_speech=PartOfSpeech.PRONOUN, indefinite=True)
_NAME_LOOKUP[_name_key("Unknown")] = Parsing()


def part_of_speech_from_name(text: str) -> Parsing:
    """Look up a part of speech by English name.

    Case-insensitive; words may be joined by spaces, underscores, hyphens or
    nothing ("relative pronoun", "relative_pronoun", "RelativePronoun").

    Returns:
        Parsing with the part of speech set, or a default Parsing when the
        name is not recognised.
    """
    if not text or len(text) > 40:
        return Parsing()
    return _NAME_LOOKUP.get(_name_key(text), Parsing())


def greek_article(gender: Gender) -> str:
    """Return the nominative article for a gender, or an empty string."""
    return GREEK_ARTICLES.get(gender, "")
