"""
Tests for the command-line interface.
"""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from gntparse.cli.main import app

DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture
def runner():
    return CliRunner()


class TestDecodeCommand:
    """Test `gntparse decode`."""

    def test_decodes_tag(self, runner):
        result = runner.invoke(app, ["decode", "V- 1AAI-S--"])
        assert result.exit_code == 0
        assert result.output.strip() == "V- 1AAI-S--\tV-AAI-1S\tVerb"

    def test_decodes_several_tags(self, runner):
        result = runner.invoke(app, ["decode", "RA ----DSF-", "N- ----DSF-"])
        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert lines == ["RA ----DSF-\tT-DSF\tDefinite Article", "N- ----DSF-\tN-DSF\tNoun"]

    def test_json_output(self, runner):
        result = runner.invoke(app, ["decode", "--json", "RX ----DPM-"])
        assert result.exit_code == 0
        record = json.loads(result.output)
        assert record["part_of_speech"] == "relative_pronoun"
        assert record["indefinite"] is True
        assert record["case"] == "dative"

    def test_bad_tag_exits_nonzero(self, runner):
        result = runner.invoke(app, ["decode", "ZZ ----DSF-"])
        assert result.exit_code == 1
        assert "UnknownPartOfSpeech" in result.output

    def test_overlong_code_exits_nonzero(self, runner):
        result = runner.invoke(app, ["decode", "Βίβλος γενέσεως", "V- 1AAI-S--"])
        assert result.exit_code == 1
        assert "ContractViolation" in result.output
        assert "V-AAI-1S" in result.output


class TestCheckCommand:
    """Test `gntparse check`."""

    def test_clean_corpus(self, runner):
        result = runner.invoke(app, ["check", str(DATA_DIR / "sbl_parsing.txt")])
        assert result.exit_code == 0
        assert "Tags: 44; Decoded: 44; Failed: 0" in result.output

    def test_reports_failures(self, runner, tmp_path):
        path = tmp_path / "tags.txt"
        path.write_text("V- 1AAI-S--\nQQ\nN- ----DSQ-\n", encoding="utf-8")
        result = runner.invoke(app, ["check", str(path)])
        assert result.exit_code == 1
        assert "Tags: 3; Decoded: 1; Failed: 2" in result.output
        assert "line 2" in result.output
        assert "UnknownGender" in result.output

    def test_max_failures_limits_listing(self, runner, tmp_path):
        path = tmp_path / "tags.txt"
        path.write_text("QQ\nQQ\nQQ\n", encoding="utf-8")
        result = runner.invoke(app, ["check", "--max-failures", "1", str(path)])
        assert result.exit_code == 1
        assert result.output.count("  line ") == 1

    def test_strict_stops_at_first_failure(self, runner, tmp_path):
        path = tmp_path / "tags.txt"
        path.write_text("QQ\nV- 1AAI-S--\n", encoding="utf-8")
        result = runner.invoke(app, ["check", "--strict", str(path)])
        assert result.exit_code == 1
        assert "Tags:" not in result.output

    def test_overlong_code_is_listed(self, runner, tmp_path):
        path = tmp_path / "tags.txt"
        path.write_text("V- 1AAI-S--\nΒίβλος γενέσεως\n", encoding="utf-8")
        result = runner.invoke(app, ["check", str(path)])
        assert result.exit_code == 1
        assert "Tags: 2; Decoded: 1; Failed: 1" in result.output
        assert "ContractViolation" in result.output

    def test_undecodable_file(self, runner, tmp_path):
        path = tmp_path / "tags.txt"
        path.write_bytes("Βίβλος\n".encode("utf-8"))
        result = runner.invoke(app, ["check", "--encoding", "ascii", str(path)])
        assert result.exit_code == 1
        assert "cannot read" in result.output

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(app, ["check", str(tmp_path / "missing.txt")])
        assert result.exit_code != 0


def test_help_describes_commands(runner):
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "Decode tags given" in result.output
    assert "Decode every tag" in result.output
