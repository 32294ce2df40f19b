"""
Handles collection of per-row outcomes and the final CSV report.

Outcomes are held in memory until every row has been processed, then
written in one pass with a fixed column schema. Nothing is written if the
run fails before that point.
"""
import logging
from pathlib import Path
from typing import Dict, List

import pandas as pd

from ...domain.models import Outcome

logger = logging.getLogger(__name__)

REPORT_COLUMNS = ["Recipient FID", "Message", "Idempotency Key", "Status", "Response"]


class WriteError(Exception):
    """Raised when the report file cannot be created or written."""
    pass


class ResultCollector:
    """Accumulates one Outcome per row, reported in input row order."""

    def __init__(self):
        self._outcomes: Dict[int, Outcome] = {}

    def add(self, outcome: Outcome) -> None:
        if outcome.row_index in self._outcomes:
            raise ValueError(f"Outcome for row {outcome.row_index} already recorded")
        self._outcomes[outcome.row_index] = outcome

    @property
    def outcomes(self) -> List[Outcome]:
        return [self._outcomes[i] for i in sorted(self._outcomes)]

    @property
    def error_count(self) -> int:
        return sum(1 for o in self._outcomes.values() if not o.is_success)

    def __len__(self) -> int:
        return len(self._outcomes)


def _to_record(outcome: Outcome) -> Dict[str, str]:
    return {
        'Recipient FID': outcome.recipient_fid,
        'Message': outcome.message,
        'Idempotency Key': outcome.idempotency_key,
        'Status': outcome.status.value,
        'Response': outcome.response,
    }


class ReportWriter:
    """
    Writes outcomes to a CSV file.

    Usage:
        writer = ReportWriter("output.csv")
        writer.write(collector.outcomes)
    """

    def __init__(self, output_path):
        self.output_path = Path(output_path)

    def write(self, outcomes: List[Outcome]) -> str:
        """
        Write all outcomes in one pass.

        Args:
            outcomes: Outcomes in the order they should appear.

        Returns:
            The path of the written file.

        Raises:
            WriteError: the destination cannot be created or written.
        """
        df = pd.DataFrame([_to_record(o) for o in outcomes], columns=REPORT_COLUMNS)

        try:
            df.to_csv(self.output_path, index=False, encoding='utf-8')
        except OSError as e:
            logger.error(f"Error writing report to {self.output_path}: {e}")
            raise WriteError(f"Could not write {self.output_path}: {e}") from e

        logger.info(f"Wrote {len(df)} rows to {self.output_path}")
        return str(self.output_path)
