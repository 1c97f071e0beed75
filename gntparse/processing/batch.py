"""
Bulk decoding of morphology tags with failure reporting.
"""

from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

from pydantic import BaseModel, Field
from tqdm import tqdm

from gntparse.core.errors import TagError
from gntparse.core.models import CorpusConfig
from gntparse.core.normalizers.morphgnt import parse
from gntparse.processing.ingest import read_tags

logger = logging.getLogger(__name__)

# Failure kind for tags the decoder rejects with ValueError
CONTRACT_VIOLATION = "ContractViolation"


class TagFailure(BaseModel):
    """A tag that could not be decoded."""

    line_number: Optional[int] = None
    tag: str
    kind: str
    message: str


class CorpusReport(BaseModel):
    """Outcome of decoding a sequence of tags."""

    total: int = 0
    decoded: int = 0
    failures: List[TagFailure] = Field(default_factory=list)
    part_of_speech_counts: Dict[str, int] = Field(default_factory=dict)

    @property
    def failed(self) -> int:
        return len(self.failures)

    @property
    def ok(self) -> bool:
        return not self.failures


def _describe_failure(error: Exception, tag: str) -> Tuple[str, str, Dict[str, Any]]:
    if isinstance(error, TagError):
        return error.kind, error.message, error.context()
    # Part-of-speech token over the packing limit
    return CONTRACT_VIOLATION, str(error), {"kind": CONTRACT_VIOLATION, "tag": tag}


def decode_tags(
    tags: Iterable[Tuple[Optional[int], str]],
    config: Optional[CorpusConfig] = None,
) -> CorpusReport:
    """Decode every tag, collecting failures instead of stopping.

    Args:
        tags: ``(line_number, tag)`` pairs, e.g. from `read_tags`
        config: Corpus options; `strict` re-raises the first failure

    Returns:
        CorpusReport with counts, failures and part-of-speech frequencies
    """
    config = config or CorpusConfig()
    report = CorpusReport()
    counts: Counter = Counter()

    for line_number, tag in tqdm(tags, desc="Decoding", unit="tag", disable=not config.show_progress):
        report.total += 1
        try:
            parsing = parse(tag)
        except (TagError, ValueError) as e:
            kind, message, context = _describe_failure(e, tag)
            logger.warning(
                "Line %s: %s: %s",
                line_number,
                kind,
                message,
                extra={"line_number": line_number, **context},
            )
            if config.strict:
                raise
            report.failures.append(TagFailure(line_number=line_number, tag=tag, kind=kind, message=message))
            continue

        report.decoded += 1
        counts[parsing.part_of_speech.value] += 1

    report.part_of_speech_counts = dict(counts.most_common())
    return report


def decode_file(path: Path, config: Optional[CorpusConfig] = None) -> CorpusReport:
    """Read a corpus file and decode all of its tags."""
    config = config or CorpusConfig()
    logger.info("Decoding tags from %s", path)
    return decode_tags(read_tags(path, encoding=config.encoding), config)
