"""
Core grammar models for decoded morphology tags.

Defines the enumerated grammatical categories, the immutable `Parsing`
record produced by the tag decoder, and the configuration model used for
batch corpus decoding.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class PartOfSpeech(str, Enum):
    """Part of speech categories produced by the SBL MorphGNT decoder.

    The comparative and superlative variants are never read directly from a
    part-of-speech code; they are derived from the mood/special column of
    the morphology block.
    """

    UNKNOWN = "unknown"
    NOUN = "noun"
    ADJECTIVE = "adjective"
    ARTICLE = "article"
    PRONOUN = "pronoun"  # RI: interrogative or indefinite, not distinguished
    DEMONSTRATIVE_PRONOUN = "demonstrative_pronoun"
    POSSESSIVE_PRONOUN = "possessive_pronoun"
    RELATIVE_PRONOUN = "relative_pronoun"
    CONJUNCTION = "conjunction"
    PARTICLE = "particle"
    INTERJECTION = "interjection"
    NUMERAL = "numeral"
    PREPOSITION = "preposition"
    ADVERB = "adverb"
    VERB = "verb"
    COMPARATIVE_NOUN = "comparative_noun"
    COMPARATIVE_ADJECTIVE = "comparative_adjective"
    COMPARATIVE_ADVERB = "comparative_adverb"
    SUPERLATIVE_NOUN = "superlative_noun"
    SUPERLATIVE_ADJECTIVE = "superlative_adjective"
    SUPERLATIVE_ADVERB = "superlative_adverb"


class TenseForm(str, Enum):
    """Tense/aspect of a verb form."""

    UNKNOWN = "unknown"
    PRESENT = "present"
    FUTURE = "future"
    AORIST = "aorist"
    IMPERFECT = "imperfect"
    PERFECT = "perfect"
    PLUPERFECT = "pluperfect"


class Voice(str, Enum):
    UNKNOWN = "unknown"
    ACTIVE = "active"
    MIDDLE = "middle"
    PASSIVE = "passive"


class Mood(str, Enum):
    """Verb mood. Infinitive and participle are treated as moods."""

    UNKNOWN = "unknown"
    INDICATIVE = "indicative"
    SUBJUNCTIVE = "subjunctive"
    OPTATIVE = "optative"
    IMPERATIVE = "imperative"
    INFINITIVE = "infinitive"
    PARTICIPLE = "participle"


class Gender(str, Enum):
    UNKNOWN = "unknown"
    MASCULINE = "masculine"
    FEMININE = "feminine"
    NEUTER = "neuter"


class Person(str, Enum):
    UNKNOWN = "unknown"
    FIRST = "first"
    SECOND = "second"
    THIRD = "third"


class Number(str, Enum):
    UNKNOWN = "unknown"
    SINGULAR = "singular"
    PLURAL = "plural"


class Case(str, Enum):
    UNKNOWN = "unknown"
    NOMINATIVE = "nominative"
    GENITIVE = "genitive"
    DATIVE = "dative"
    ACCUSATIVE = "accusative"
    VOCATIVE = "vocative"


# Parts of speech that inflect for case, number and gender
NOMINAL_PARTS_OF_SPEECH = frozenset(
    {
        PartOfSpeech.NOUN,
        PartOfSpeech.ADJECTIVE,
        PartOfSpeech.ARTICLE,
        PartOfSpeech.PRONOUN,
        PartOfSpeech.DEMONSTRATIVE_PRONOUN,
        PartOfSpeech.POSSESSIVE_PRONOUN,
        PartOfSpeech.RELATIVE_PRONOUN,
        PartOfSpeech.NUMERAL,
        PartOfSpeech.COMPARATIVE_NOUN,
        PartOfSpeech.COMPARATIVE_ADJECTIVE,
        PartOfSpeech.SUPERLATIVE_NOUN,
        PartOfSpeech.SUPERLATIVE_ADJECTIVE,
    }
)


class Parsing(BaseModel):
    """Grammatical description of a single word decoded from a tag.

    Every field starts out unknown (or False) and is only set when the tag
    says something about it. Instances are immutable; the decoder derives
    updated copies with `model_copy(update=...)`.

    Example:
        Parsing(
            part_of_speech=PartOfSpeech.VERB,
            person=Person.FIRST,
            tense_form=TenseForm.AORIST,
            voice=Voice.ACTIVE,
            mood=Mood.INDICATIVE,
            number=Number.SINGULAR,
        )
    """

    part_of_speech: PartOfSpeech = PartOfSpeech.UNKNOWN
    gender: Gender = Gender.UNKNOWN
    person: Person = Person.UNKNOWN
    tense_form: TenseForm = TenseForm.UNKNOWN
    voice: Voice = Voice.UNKNOWN
    mood: Mood = Mood.UNKNOWN
    case: Case = Case.UNKNOWN
    number: Number = Number.UNKNOWN
    indeclinable: bool = False
    indefinite: bool = False

    model_config = {"frozen": True}

    @property
    def is_verb(self) -> bool:
        return self.part_of_speech == PartOfSpeech.VERB

    @property
    def is_nominal(self) -> bool:
        return self.part_of_speech in NOMINAL_PARTS_OF_SPEECH

    def string(self) -> str:
        """Return the compact display code for this parsing (e.g. ``V-AAI-1S``)."""
        from gntparse.core.formatting import render_parsing

        return render_parsing(self)

    def __str__(self) -> str:
        return self.string()


class CorpusConfig(BaseModel):
    """Configuration for decoding a corpus of tags."""

    strict: bool = Field(False, description="Raise on the first tag that fails to decode")
    show_progress: bool = Field(False, description="Display a progress bar while decoding")
    encoding: str = Field("utf-8", description="Encoding of corpus files")
    max_reported_failures: int = Field(20, ge=0, description="Failures listed in summaries")
