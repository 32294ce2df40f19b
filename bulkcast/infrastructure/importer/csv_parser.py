"""
CSV Parser - Recipient Import
==============================

Reads the recipient CSV and maps its columns to recipient FID and message.
Values are passed through as strings without validation.
"""

import logging
import re
from pathlib import Path
from typing import List, Optional

import pandas as pd

from ...domain.models import Row

logger = logging.getLogger(__name__)

RECIPIENT_COLUMN = "recipientFid"
MESSAGE_COLUMN = "message"

# Normalized header variations accepted when the exact name is absent
RECIPIENT_PATTERNS = ['recipientfid', 'recipient_fid', 'fid']
MESSAGE_PATTERNS = ['message', 'text', 'msg']


class ReadError(Exception):
    """Raised when the input file is missing, unreadable or malformed."""
    pass


class RecipientCsvParser:
    """
    Recipient CSV parser with column auto-detection.

    Usage:
        parser = RecipientCsvParser()
        rows = parser.parse("recipients.csv")
        # Returns: [Row(index=0, recipient_fid="123", message="Hello"), ...]
    """

    def __init__(self):
        self.detected_columns: dict = {}

    def parse(self, file_path) -> List[Row]:
        """
        Read every row of the file in order.

        Args:
            file_path: Path to the .csv file

        Returns:
            List of Row values; empty if the file has no data rows.

        Raises:
            ReadError: the file cannot be opened or parsed.
        """
        path = Path(file_path)

        if not path.is_file():
            raise ReadError(f"File not found: {file_path}")

        try:
            df = pd.read_csv(path, dtype=str, keep_default_na=False, index_col=False)
        except pd.errors.EmptyDataError:
            logger.info(f"{file_path} is empty")
            return []
        except (pd.errors.ParserError, UnicodeDecodeError, OSError) as e:
            logger.error(f"Failed to read file: {e}")
            raise ReadError(f"Could not read {file_path}: {e}") from e

        recipient_col = self._find_column(df.columns, RECIPIENT_COLUMN, RECIPIENT_PATTERNS)
        message_col = self._find_column(df.columns, MESSAGE_COLUMN, MESSAGE_PATTERNS)

        self.detected_columns = {
            'recipientFid': recipient_col,
            'message': message_col,
        }
        logger.debug(f"Detected columns: {self.detected_columns}")

        if not recipient_col:
            logger.warning("No recipientFid column found; recipients will be sent as null")
        if not message_col:
            logger.warning("No message column found; messages will be sent as null")

        rows = []
        for index, record in enumerate(df.to_dict(orient="records")):
            rows.append(Row(
                index=index,
                recipient_fid=record[recipient_col] if recipient_col else None,
                message=record[message_col] if message_col else None,
            ))

        logger.info(f"Parsed {len(rows)} rows from {file_path}")
        return rows

    def _find_column(self, columns: pd.Index, exact: str, patterns: List[str]) -> Optional[str]:
        """Prefer the exact header, then the first normalized pattern match."""
        if exact in columns:
            return exact

        normalized = {self._normalize(col): col for col in columns}
        for pattern in patterns:
            col = normalized.get(self._normalize(pattern))
            if col is not None:
                return col
        return None

    @staticmethod
    def _normalize(header: str) -> str:
        return re.sub(r'[^a-z0-9]', '', str(header).lower())


def parse_recipients(file_path) -> List[Row]:
    """
    Convenience function to parse a recipient CSV.

    Args:
        file_path: Path to the file

    Returns:
        List of Row values
    """
    return RecipientCsvParser().parse(file_path)


def count_rows(rows: List[Row]) -> int:
    """Total used to size the progress indicator."""
    return len(rows)
