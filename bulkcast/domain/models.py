"""
Domain Models - Rows, Outcomes and Progress
============================================

Value types passed between the importer, the API client and the report
writer. Outcomes are immutable once created.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class OutcomeStatus(Enum):
    """Delivery result for a single row."""
    SUCCESS = "Success"
    ERROR = "Error"


@dataclass(frozen=True)
class Row:
    """One recipient row from the input file."""
    index: int
    recipient_fid: Optional[str]
    message: Optional[str]


@dataclass(frozen=True)
class Outcome:
    """Recorded result of attempting to deliver one row's message."""
    row_index: int
    recipient_fid: Optional[str]
    message: Optional[str]
    idempotency_key: str
    status: OutcomeStatus
    response: str

    @property
    def is_success(self) -> bool:
        return self.status is OutcomeStatus.SUCCESS

    @classmethod
    def success(cls, row: Row, idempotency_key: str, response: str) -> "Outcome":
        return cls(
            row_index=row.index,
            recipient_fid=row.recipient_fid,
            message=row.message,
            idempotency_key=idempotency_key,
            status=OutcomeStatus.SUCCESS,
            response=response,
        )

    @classmethod
    def error(cls, row: Row, response: str) -> "Outcome":
        # The key generated for a failed attempt is not recorded
        return cls(
            row_index=row.index,
            recipient_fid=row.recipient_fid,
            message=row.message,
            idempotency_key="",
            status=OutcomeStatus.ERROR,
            response=response,
        )


@dataclass
class ProgressState:
    """Rows completed so far out of the total."""
    total: int = 0
    completed: int = 0

    def increment(self) -> int:
        self.completed += 1
        return self.completed

    @property
    def fraction(self) -> float:
        if self.total <= 0:
            return 0.0
        return min(self.completed / self.total, 1.0)
