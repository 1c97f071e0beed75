"""
Normalizers for converting source-specific morphology tags to `Parsing`.
"""

from gntparse.core.normalizers.morphgnt import MorphGNTNormalizer, parse

__all__ = ["MorphGNTNormalizer", "parse"]
