"""
gntparse: Decoder for SBL MorphGNT morphology tags.

This package turns fixed-column tags such as ``V- 1AAI-S--`` into typed
grammatical records, with helpers for rendering, corpus checking and a
command-line interface.
"""

from gntparse.core.errors import TagError
from gntparse.core.models import Parsing
from gntparse.core.normalizers.morphgnt import parse

__version__ = "0.1.0"

__all__ = ["parse", "Parsing", "TagError", "__version__"]
