"""
Ingestion utilities: read morphology tags from corpus files.

Accepts either one raw tag per line (``V- 1AAI-S--``) or MorphGNT
space-separated lines, from which the part-of-speech and parse-code columns
are joined into a tag.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, Iterator, Optional, Tuple

# MorphGNT: BBCCVV POS PARSECODE text word normalized lemma
MORPHGNT_LINE_RE = re.compile(r"^(\d{6})\s+(\S{1,2})\s+(\S{8})\s+\S")


def extract_tag(line: str) -> Optional[str]:
    """Return the tag held by a corpus line, or None for blank/comment lines."""
    if not line.strip() or line.lstrip().startswith("#"):
        return None

    match = MORPHGNT_LINE_RE.match(line)
    if match:
        return f"{match.group(2)} {match.group(3)}"

    # Raw tag: trailing placeholder spaces are significant
    return line.rstrip("\r\n")


def iter_tags(lines: Iterable[str]) -> Iterator[Tuple[int, str]]:
    """Yield ``(line_number, tag)`` for every tag-bearing line (1-based)."""
    for line_number, line in enumerate(lines, start=1):
        tag = extract_tag(line)
        if tag is not None:
            yield line_number, tag


def read_tags(path: Path, encoding: str = "utf-8") -> Iterator[Tuple[int, str]]:
    """Yield ``(line_number, tag)`` pairs from a corpus file."""
    with open(path, encoding=encoding) as f:
        yield from iter_tags(f)
