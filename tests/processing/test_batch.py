"""
Tests for bulk tag decoding.
"""

import logging
from pathlib import Path

import pytest

from gntparse.core.errors import UnknownPartOfSpeechError
from gntparse.core.models import CorpusConfig
from gntparse.processing.batch import CONTRACT_VIOLATION, CorpusReport, decode_file, decode_tags

DATA_DIR = Path(__file__).resolve().parents[1] / "data"


@pytest.fixture
def mixed_tags():
    return [
        (1, "V- 1AAI-S--"),
        (2, "ZZ ----DSF-"),
        (3, "N- ----DSF-"),
        (4, ""),
        (5, "N- ----DSF-"),
    ]


class TestDecodeTags:
    """Test decoding sequences of tags."""

    def test_counts(self, mixed_tags):
        report = decode_tags(mixed_tags)
        assert report.total == 5
        assert report.decoded == 3
        assert report.failed == 2
        assert not report.ok

    def test_records_failures(self, mixed_tags):
        report = decode_tags(mixed_tags)
        first, second = report.failures
        assert first.line_number == 2
        assert first.tag == "ZZ ----DSF-"
        assert first.kind == "UnknownPartOfSpeech"
        assert second.line_number == 4
        assert second.kind == "Incomplete"

    def test_part_of_speech_counts(self, mixed_tags):
        report = decode_tags(mixed_tags)
        assert report.part_of_speech_counts == {"noun": 2, "verb": 1}

    def test_logs_failures(self, mixed_tags, caplog):
        with caplog.at_level(logging.WARNING, logger="gntparse.processing.batch"):
            decode_tags(mixed_tags)
        failures = [r for r in caplog.records if getattr(r, "kind", None) == "UnknownPartOfSpeech"]
        assert len(failures) == 1
        assert failures[0].tag == "ZZ ----DSF-"
        assert failures[0].value == "ZZ"
        assert failures[0].line_number == 2

    def test_strict_raises(self, mixed_tags):
        with pytest.raises(UnknownPartOfSpeechError):
            decode_tags(mixed_tags, CorpusConfig(strict=True))

    def test_overlong_code_is_recorded(self):
        tags = [(1, "V- 1AAI-S--"), (2, "Βίβλος γενέσεως"), (3, "N- ----DSF-")]
        report = decode_tags(tags)
        assert report.total == 3
        assert report.decoded == 2
        assert report.failed == 1
        assert report.failures[0].line_number == 2
        assert report.failures[0].kind == CONTRACT_VIOLATION

    def test_overlong_code_strict_raises(self):
        with pytest.raises(ValueError):
            decode_tags([(1, "ABCDEFGHI ----DSF-")], CorpusConfig(strict=True))

    def test_empty_input(self):
        report = decode_tags([])
        assert report == CorpusReport()
        assert report.ok

    def test_progress_bar_does_not_change_result(self, mixed_tags):
        quiet = decode_tags(mixed_tags)
        noisy = decode_tags(mixed_tags, CorpusConfig(show_progress=True))
        assert quiet == noisy


class TestDecodeFile:
    """Test decoding corpus files."""

    def test_sample_file(self):
        report = decode_file(DATA_DIR / "morphgnt_sample.txt")
        assert report.ok
        assert report.total == 17
        assert report.part_of_speech_counts["noun"] == 12

    def test_file_with_bad_line(self, tmp_path):
        path = tmp_path / "tags.txt"
        path.write_text("V- 1AAI-S--\nV- 1AAI-Q--\n", encoding="utf-8")
        report = decode_file(path)
        assert report.failed == 1
        assert report.failures[0].kind == "UnknownNumber"
        assert report.failures[0].line_number == 2
