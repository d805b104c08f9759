"""
Data loading functionality.

This module reads recorded power streams from CSV files.
"""

import logging
from pathlib import Path

import pandas as pd

from ..constants import CSVConstants
from ..exceptions import DataLoadError

logger = logging.getLogger(__name__)


class StreamLoader:
    """Loads (time, watts) streams from CSV files."""

    def __init__(self, separator: str = CSVConstants.DEFAULT_SEPARATOR):
        """
        Initialize the loader.

        Args:
            separator: Column separator used in the stream files
        """
        self.separator = separator

    def load(self, stream_file: Path) -> pd.DataFrame:
        """
        Load a stream.

        A missing 'watts' column is not an error; the stream simply has no
        power channel.

        Args:
            stream_file: Path to the CSV file

        Returns:
            DataFrame sorted as recorded with numeric 'time' and 'watts'

        Raises:
            DataLoadError: If the file is missing, unreadable or has no 'time'
        """
        if not stream_file.exists():
            raise DataLoadError(f"Stream file not found: {stream_file}")

        try:
            logger.debug(f"Loading stream data from {stream_file}")
            df = pd.read_csv(stream_file, sep=self.separator)
        except Exception as e:
            raise DataLoadError(f"Failed to load stream {stream_file}: {e}") from e

        if CSVConstants.TIME_COLUMN not in df.columns:
            raise DataLoadError(
                f"Stream {stream_file} has no '{CSVConstants.TIME_COLUMN}' column"
            )

        df[CSVConstants.TIME_COLUMN] = pd.to_numeric(
            df[CSVConstants.TIME_COLUMN], errors="coerce"
        )
        if CSVConstants.POWER_COLUMN in df.columns:
            df[CSVConstants.POWER_COLUMN] = pd.to_numeric(
                df[CSVConstants.POWER_COLUMN], errors="coerce"
            )
        else:
            logger.warning(f"Stream {stream_file} has no power data")

        logger.info(f"Loaded {len(df)} samples from {stream_file}")
        return df
