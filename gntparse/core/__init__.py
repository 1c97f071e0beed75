"""
Core Package.

This package provides the grammar models, error types, display helpers and
the tag decoder.
"""

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
from gntparse.core.formatting import (
    english_camel_case,
    english_name,
    greek_article,
    part_of_speech_from_name,
    render_parsing,
)
from gntparse.core.models import (
    Case,
    CorpusConfig,
    Gender,
    Mood,
    Number,
    PartOfSpeech,
    Parsing,
    Person,
    TenseForm,
    Voice,
)

__all__ = [
    # Models
    "Parsing",
    "CorpusConfig",
    "PartOfSpeech",
    "TenseForm",
    "Voice",
    "Mood",
    "Gender",
    "Person",
    "Number",
    "Case",
    # Errors
    "TagError",
    "IncompleteTagError",
    "UnknownPartOfSpeechError",
    "MorphologyFieldError",
    "UnknownPersonError",
    "UnknownTenseFormError",
    "UnknownVoiceError",
    "UnrecognisedValueError",
    "UnknownCaseError",
    "UnknownNumberError",
    "UnknownGenderError",
    # Formatting
    "render_parsing",
    "english_name",
    "english_camel_case",
    "part_of_speech_from_name",
    "greek_article",
]
