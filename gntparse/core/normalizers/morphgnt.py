"""
Decoder for SBL MorphGNT morphology tags.

A tag has two parts separated by a space: a part-of-speech code such as
``V-``, ``N1`` or ``RA``, and an optional fixed-width morphology block::

    RP ----DP--
    RA ----DSF-
    V- -PMN----
    D- --------
    V- 1AAI-S--
    V- -PAPNSM-
    V- -APPDSF-

Morphology block offsets: person, tense/aspect, voice, mood (or special
marker), case, number, gender, followed by one padding column.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple, Type

from gntparse.core.errors import (
    IncompleteTagError,
    MorphologyFieldError,
    TagError,
    UnknownCaseError,
    UnknownGenderError,
    UnknownNumberError,
    UnknownPartOfSpeechError,
    UnknownPersonError,
    UnknownTenseFormError,
    UnknownVoiceError,
    UnrecognisedValueError,
)
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

logger = logging.getLogger(__name__)

# Characters skipped before the part-of-speech code
LEADING_SEPARATORS = (" ", "-")

# Characters that end the part-of-speech code
CODE_TERMINATORS = (" ", "-", "+")

# Placeholders meaning "not applicable" in any morphology column
PLACEHOLDERS = (" ", "-", ".")

# Part-of-speech codes are packed into an integer of at most this many bytes
MAX_CODE_LENGTH = 8

# Shorter remainders carry no morphology block
MORPHOLOGY_WIDTH = 8


def pack_code(code: str) -> int:
    """Pack a short ASCII code into an integer key, first byte most significant.

    ``pack_code("N1") == 0x4E31``. Codes longer than `MAX_CODE_LENGTH`
    bytes are a programming error.
    """
    data = code.encode("utf-8")
    if len(data) > MAX_CODE_LENGTH:
        raise ValueError(f"code too long: {code!r} ({len(data)} bytes, max {MAX_CODE_LENGTH})")
    return int.from_bytes(data, "big")


# ============================================================================
# Part of Speech Codes
# ============================================================================

# Each entry holds the Parsing fields the code implies. First and second
# declension noun codes also imply a gender.
_CODE_FIELDS: Dict[str, Dict[str, Any]] = {
    "N1": {"part_of_speech": PartOfSpeech.NOUN, "gender": Gender.FEMININE},
    "N2": {"part_of_speech": PartOfSpeech.NOUN, "gender": Gender.MASCULINE},
    "N3": {"part_of_speech": PartOfSpeech.NOUN},
    "N": {"part_of_speech": PartOfSpeech.NOUN},
    "A": {"part_of_speech": PartOfSpeech.ADJECTIVE},
    "A1": {"part_of_speech": PartOfSpeech.ADJECTIVE},
    "A3": {"part_of_speech": PartOfSpeech.ADJECTIVE},
    "RA": {"part_of_speech": PartOfSpeech.ARTICLE},
    "RD": {"part_of_speech": PartOfSpeech.DEMONSTRATIVE_PRONOUN},
    "RI": {"part_of_speech": PartOfSpeech.PRONOUN},
    "RP": {"part_of_speech": PartOfSpeech.POSSESSIVE_PRONOUN},
    "RR": {"part_of_speech": PartOfSpeech.RELATIVE_PRONOUN},
    # ὅστις
    "RX": {"part_of_speech": PartOfSpeech.RELATIVE_PRONOUN, "indefinite": True},
    "C": {"part_of_speech": PartOfSpeech.CONJUNCTION},
    "X": {"part_of_speech": PartOfSpeech.PARTICLE},
    "I": {"part_of_speech": PartOfSpeech.INTERJECTION},
    "M": {"part_of_speech": PartOfSpeech.NUMERAL},
    "P": {"part_of_speech": PartOfSpeech.PREPOSITION},
    "D": {"part_of_speech": PartOfSpeech.ADVERB},
}

# Verb subclass codes; the subclass itself is not kept
VERB_CODES = (
    "V",
    "V1", "V2", "V3", "V4", "V5", "V6", "V7", "V8", "V9",
    "VA", "VB", "VC", "VD", "VE", "VF", "VH", "VK", "VM",
    "VO", "VP", "VQ", "VS", "VT", "VV", "VX", "VZ",
)  # fmt: skip

for _code in VERB_CODES:
    _CODE_FIELDS[_code] = {"part_of_speech": PartOfSpeech.VERB}

KNOWN_CODES = tuple(_CODE_FIELDS)

# Each entry keeps its code: leading NUL bytes vanish when packed, so a key
# match alone is not an exact match
PART_OF_SPEECH_CODES: Dict[int, Tuple[str, Dict[str, Any]]] = {
    pack_code(code): (code, fields) for code, fields in _CODE_FIELDS.items()
}


# ============================================================================
# Morphology Column Codes
# ============================================================================


def _with_placeholders(codes: Dict[str, Any], unknown: Any) -> Dict[str, Any]:
    merged = dict(codes)
    for placeholder in PLACEHOLDERS:
        merged[placeholder] = unknown
    return merged


PERSON_CODES: Dict[str, Person] = _with_placeholders(
    {"1": Person.FIRST, "2": Person.SECOND, "3": Person.THIRD},
    Person.UNKNOWN,
)

TENSE_FORM_CODES: Dict[str, TenseForm] = _with_placeholders(
    {
        "P": TenseForm.PRESENT,
        "F": TenseForm.FUTURE,
        "A": TenseForm.AORIST,
        "I": TenseForm.IMPERFECT,
        "E": TenseForm.PERFECT,
        "X": TenseForm.PERFECT,
        "L": TenseForm.PLUPERFECT,
        "Y": TenseForm.PLUPERFECT,
        "U": TenseForm.UNKNOWN,
    },
    TenseForm.UNKNOWN,
)

VOICE_CODES: Dict[str, Voice] = _with_placeholders(
    {"A": Voice.ACTIVE, "M": Voice.MIDDLE, "P": Voice.PASSIVE},
    Voice.UNKNOWN,
)

CASE_CODES: Dict[str, Case] = _with_placeholders(
    {
        "N": Case.NOMINATIVE,
        "G": Case.GENITIVE,
        "D": Case.DATIVE,
        "A": Case.ACCUSATIVE,
        "V": Case.VOCATIVE,
    },
    Case.UNKNOWN,
)

NUMBER_CODES: Dict[str, Number] = _with_placeholders(
    # A means "any"
    {"S": Number.SINGULAR, "P": Number.PLURAL, "A": Number.UNKNOWN},
    Number.UNKNOWN,
)

GENDER_CODES: Dict[str, Gender] = _with_placeholders(
    {"M": Gender.MASCULINE, "F": Gender.FEMININE, "N": Gender.NEUTER},
    Gender.UNKNOWN,
)

# Mood codes whose meaning does not depend on the part of speech
UNCONDITIONAL_MOOD_CODES: Dict[str, Mood] = {
    "O": Mood.OPTATIVE,
    "M": Mood.IMPERATIVE,
    "N": Mood.INFINITIVE,
    "P": Mood.PARTICIPLE,
}

SUPERLATIVES: Dict[PartOfSpeech, PartOfSpeech] = {
    PartOfSpeech.NOUN: PartOfSpeech.SUPERLATIVE_NOUN,
    PartOfSpeech.ADVERB: PartOfSpeech.SUPERLATIVE_ADVERB,
    PartOfSpeech.ADJECTIVE: PartOfSpeech.SUPERLATIVE_ADJECTIVE,
}

COMPARATIVES: Dict[PartOfSpeech, PartOfSpeech] = {
    PartOfSpeech.NOUN: PartOfSpeech.COMPARATIVE_NOUN,
    PartOfSpeech.ADJECTIVE: PartOfSpeech.COMPARATIVE_ADJECTIVE,
    PartOfSpeech.ADVERB: PartOfSpeech.COMPARATIVE_ADVERB,
}


# ============================================================================
# Decoding
# ============================================================================


def classify_part_of_speech(tag: str) -> Tuple[Parsing, int]:
    """Read the part-of-speech code at the start of a tag.

    Args:
        tag: Raw tag string, e.g. ``"V- 1AAI-S--"``

    Returns:
        The Parsing implied by the code, and the offset in `tag` where the
        remainder (the morphology block, if any) begins.

    Raises:
        IncompleteTagError: No code is present.
        UnknownPartOfSpeechError: The code is not recognised.
    """
    index = 0
    while index < len(tag) and tag[index] in LEADING_SEPARATORS:
        index += 1

    if index == len(tag):
        raise IncompleteTagError(f"no part of speech in tag {tag!r}", tag=tag)

    start = index
    while index < len(tag) and tag[index] not in CODE_TERMINATORS:
        index += 1
    code = tag[start:index]

    # A single padding dash belongs to the code ("V-", "N-")
    if index < len(tag) and tag[index] == "-":
        index += 1

    entry = PART_OF_SPEECH_CODES.get(pack_code(code))
    if entry is None or entry[0] != code:
        logger.debug("%s is an unrecognised part of speech", code)
        raise UnknownPartOfSpeechError(
            f"{code!r} is an unrecognised part of speech",
            tag=tag,
            value=code,
            position=start,
        )

    return Parsing(**entry[1]), index


def apply_mood_code(parsing: Parsing, code: str, tag: str = "", position: Optional[int] = None) -> Parsing:
    """Apply the mood/special column to a parsing.

    The column is shared between verbs and nominals. ``I`` is indicative for
    a verb and marks anything else indeclinable; ``S`` is subjunctive for a
    verb and superlative for nouns, adjectives and adverbs; ``C`` marks a
    comparative.
    """
    pos = parsing.part_of_speech

    if code == "I":
        if pos == PartOfSpeech.VERB:
            return parsing.model_copy(update={"mood": Mood.INDICATIVE})
        return parsing.model_copy(update={"indeclinable": True})

    if code == "S":
        if pos == PartOfSpeech.VERB:
            return parsing.model_copy(update={"mood": Mood.SUBJUNCTIVE})
        if pos in SUPERLATIVES:
            return parsing.model_copy(update={"part_of_speech": SUPERLATIVES[pos]})
        return parsing

    if code in UNCONDITIONAL_MOOD_CODES:
        return parsing.model_copy(update={"mood": UNCONDITIONAL_MOOD_CODES[code]})

    if code == "C":
        if pos in COMPARATIVES:
            return parsing.model_copy(update={"part_of_speech": COMPARATIVES[pos]})
        return parsing

    # TODO: record the diminutive marker once Parsing has a flag for it.
    if code == "D":
        return parsing

    if code in PLACEHOLDERS:
        return parsing

    logger.debug("Morph parsing character unrecognised: %s in %s", code, tag)
    raise UnrecognisedValueError(
        f"unrecognised mood or marker {code!r}",
        tag=tag,
        value=code,
        position=position,
        field="mood",
    )


def _decode_column(
    codes: Dict[str, Any],
    tag: str,
    position: int,
    field: str,
    error: Type[MorphologyFieldError],
) -> Any:
    value = tag[position]
    if value not in codes:
        logger.debug("Morph parsing %s unrecognised: %s in %s", field, value, tag)
        raise error(
            f"unrecognised {field.replace('_', ' ')} {value!r}",
            tag=tag,
            value=value,
            position=position,
            field=field,
        )
    return codes[value]


def decode_morphology(parsing: Parsing, tag: str, start: int = 0) -> Parsing:
    """Decode the fixed-width morphology block of a tag.

    Args:
        parsing: Parsing produced by `classify_part_of_speech`
        tag: Raw tag string
        start: Offset in `tag` where the remainder begins

    Returns:
        `parsing` with the morphology fields applied, or unchanged when the
        remainder is too short to hold a morphology block.

    Raises:
        MorphologyFieldError: The first column (left to right) holding an
            unrecognised character.
    """
    index = start
    while index < len(tag) and tag[index] == " ":
        index += 1

    if len(tag) - index < MORPHOLOGY_WIDTH:
        return parsing

    person = _decode_column(PERSON_CODES, tag, index, "person", UnknownPersonError)
    tense_form = _decode_column(TENSE_FORM_CODES, tag, index + 1, "tense_form", UnknownTenseFormError)
    voice = _decode_column(VOICE_CODES, tag, index + 2, "voice", UnknownVoiceError)
    parsing = parsing.model_copy(update={"person": person, "tense_form": tense_form, "voice": voice})

    parsing = apply_mood_code(parsing, tag[index + 3], tag=tag, position=index + 3)

    case = _decode_column(CASE_CODES, tag, index + 4, "case", UnknownCaseError)
    number = _decode_column(NUMBER_CODES, tag, index + 5, "number", UnknownNumberError)
    gender = _decode_column(GENDER_CODES, tag, index + 6, "gender", UnknownGenderError)

    return parsing.model_copy(update={"case": case, "number": number, "gender": gender})


def parse(tag: str) -> Parsing:
    """Decode an SBL MorphGNT tag such as ``"V- 1AAI-S--"`` into a Parsing.

    Raises:
        TagError: The tag cannot be decoded; the subclass names the reason.
    """
    parsing, index = classify_part_of_speech(tag)
    return decode_morphology(parsing, tag, index)


class MorphGNTNormalizer:
    """Normalizer for SBL MorphGNT tags.

    Wraps `parse` for callers that prefer a missing result over an
    exception, in the same shape as the other source normalizers.
    """

    source = "morphgnt"

    def normalize(self, tag: str) -> Optional[Parsing]:
        """Decode `tag`, returning None when it cannot be decoded."""
        if not tag:
            return None
        try:
            return parse(tag)
        except TagError as e:
            logger.debug("Could not normalize %r: %s (%s)", tag, e.message, e.kind)
            return None
