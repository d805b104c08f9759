"""Unit tests for loading streams from CSV."""

from pathlib import Path

import pandas as pd
import pytest

from wprime_balance.data import StreamLoader, has_power_data
from wprime_balance.exceptions import DataLoadError


class TestStreamLoader:
    """Test CSV stream loading."""

    def test_load(self, plateau_csv: Path):
        """Test that a stream file is loaded with numeric columns."""
        df = StreamLoader().load(plateau_csv)

        assert len(df) == 70
        assert list(df.columns) == ["time", "watts"]
        assert df["watts"].max() == 300

    def test_missing_file(self, tmp_path: Path):
        """Test that a missing file raises DataLoadError."""
        with pytest.raises(DataLoadError):
            StreamLoader().load(tmp_path / "missing.csv")

    def test_no_time_column(self, tmp_path: Path):
        """Test that a stream without time is rejected."""
        path = tmp_path / "stream.csv"
        pd.DataFrame({"watts": [100, 200]}).to_csv(path, index=False)

        with pytest.raises(DataLoadError):
            StreamLoader().load(path)

    def test_no_power_column(self, tmp_path: Path, stream_no_power: pd.DataFrame):
        """Test that a stream without watts loads but has no power."""
        path = tmp_path / "stream.csv"
        stream_no_power.to_csv(path, index=False)

        df = StreamLoader().load(path)

        assert not has_power_data(df)

    def test_custom_separator(self, tmp_path: Path):
        """Test loading a semicolon separated stream."""
        path = tmp_path / "stream.csv"
        path.write_text("time;watts\n0;100\n1;200\n")

        df = StreamLoader(separator=";").load(path)

        assert df["watts"].tolist() == [100, 200]
