"""
Exceptions raised while decoding morphology tags.

Every error carries the raw tag plus the offending value so callers can
report or log it without re-parsing the input.
"""

from __future__ import annotations

from typing import Optional


class TagError(Exception):
    """Raised when a morphology tag cannot be decoded."""

    kind = "TagError"

    def __init__(
        self,
        message: str,
        tag: str = "",
        value: Optional[str] = None,
        position: Optional[int] = None,
        field: Optional[str] = None,
    ):
        self.tag = tag
        self.value = value
        self.position = position
        self.field = field
        super().__init__(message)

    @property
    def message(self) -> str:
        return str(self.args[0]) if self.args else ""

    def context(self) -> dict:
        """Structured context suitable for logging `extra` fields."""
        return {
            "kind": self.kind,
            "tag": self.tag,
            "value": self.value,
            "position": self.position,
            "field": self.field,
        }


class IncompleteTagError(TagError):
    """The tag holds no part-of-speech code at all."""

    kind = "Incomplete"


class UnknownPartOfSpeechError(TagError):
    """The part-of-speech code is not in the fixed vocabulary."""

    kind = "UnknownPartOfSpeech"


class MorphologyFieldError(TagError):
    """A fixed-offset morphology character is outside its code set."""

    kind = "MorphologyFieldError"


class UnknownPersonError(MorphologyFieldError):
    kind = "UnknownPerson"


class UnknownTenseFormError(MorphologyFieldError):
    kind = "UnknownTenseForm"


class UnknownVoiceError(MorphologyFieldError):
    kind = "UnknownVoice"


class UnrecognisedValueError(MorphologyFieldError):
    kind = "UnrecognisedValue"


class UnknownCaseError(MorphologyFieldError):
    kind = "UnknownCase"


class UnknownNumberError(MorphologyFieldError):
    kind = "UnknownNumber"


class UnknownGenderError(MorphologyFieldError):
    kind = "UnknownGender"
