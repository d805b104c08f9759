"""Unit tests for the command-line interface."""

import json
from pathlib import Path

import pandas as pd
from click.testing import CliRunner

from wprime_balance.cli import main


def extract_json(output: str) -> dict:
    """Pull the JSON document out of the command output."""
    return json.loads(output[output.index("{") : output.rindex("}") + 1])


class TestAnalyzeCommand:
    """Test the analyze command."""

    def test_json_output(self, plateau_csv: Path, sample_config_file: Path):
        """Test the JSON summary of a single effort."""
        result = CliRunner().invoke(
            main,
            [
                "analyze",
                str(plateau_csv),
                "--config",
                str(sample_config_file),
                "--date",
                "2024-06-01",
                "--json",
            ],
        )

        assert result.exit_code == 0, result.output
        summary = extract_json(result.output)
        assert summary["cp"] == 200
        assert summary["w_prime"] == 20000
        assert summary["duration"] == 70
        assert len(summary["matches"]) == 1
        assert summary["matches"][0]["start"] == 10
        assert summary["matches"][0]["stop"] == 29

    def test_text_output(self, plateau_csv: Path, sample_config_file: Path):
        """Test the human readable summary."""
        result = CliRunner().invoke(
            main,
            [
                "analyze",
                str(plateau_csv),
                "--config",
                str(sample_config_file),
                "--date",
                "2024-06-01",
            ],
        )

        assert result.exit_code == 0, result.output
        assert "CP: 200 W" in result.output
        assert "Matches: 1" in result.output

    def test_no_power(self, tmp_path: Path):
        """Test that a stream without power reports an empty balance."""
        path = tmp_path / "stream.csv"
        pd.DataFrame({"time": [0, 1, 2], "heartrate": [120, 121, 122]}).to_csv(
            path, index=False
        )

        result = CliRunner().invoke(main, ["analyze", str(path)])

        assert result.exit_code == 0, result.output
        assert "Minimum W': 0.0 kJ" in result.output
        assert "Matches: 0" in result.output

    def test_bad_stream_aborts(self, tmp_path: Path):
        """Test that an unreadable stream aborts the command."""
        path = tmp_path / "stream.csv"
        pd.DataFrame({"watts": [100, 200]}).to_csv(path, index=False)

        result = CliRunner().invoke(main, ["analyze", str(path)])

        assert result.exit_code != 0
