"""
Campaign Runner - Direct Cast Batch
====================================

Runs one batch: read rows, send one direct cast per row, collect outcomes
and write the report.

Run states:
    Start -> Reading -> (Empty -> Done) | (Processing -> Writing -> Done)

ReadError and WriteError end the run; a failed row never does.
"""

import logging
import uuid
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import List, Optional

from ..domain.models import Outcome, Row
from ..infrastructure.config import Settings
from ..infrastructure.importer import RecipientCsvParser, count_rows
from ..infrastructure.reporting import ReportWriter, ResultCollector
from ..infrastructure.warpcast import DirectCastClient, RequestError, serialize_payload
from .progress import ProgressReporter

logger = logging.getLogger(__name__)

NO_ROWS_MESSAGE = "No rows found in the CSV file."


@dataclass
class RunContext:
    """State of a single run, handed from phase to phase."""
    settings: Settings
    rows: List[Row] = field(default_factory=list)
    total: int = 0
    results: ResultCollector = field(default_factory=ResultCollector)
    report_path: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return self.total == 0


def new_idempotency_key() -> str:
    return str(uuid.uuid4())


def process_row(client: DirectCastClient, row: Row) -> Outcome:
    """Send one row and turn the result into an Outcome. Never raises."""
    idempotency_key = new_idempotency_key()
    try:
        payload = client.send(row.recipient_fid, row.message, idempotency_key)
        return Outcome.success(row, idempotency_key, serialize_payload(payload))

    except RequestError as e:
        logger.error(f"Error processing row: {row} status={e.status_code} {e}")
        return Outcome.error(row, e.detail)

    except Exception as e:
        logger.exception(f"Error processing row: {row} {e}")
        return Outcome.error(row, str(e))


def read_rows(context: RunContext, parser: Optional[RecipientCsvParser] = None) -> RunContext:
    """Reading phase. Raises ReadError."""
    parser = parser or RecipientCsvParser()
    context.rows = parser.parse(context.settings.input_file)
    context.total = count_rows(context.rows)
    return context


def process_rows(
    context: RunContext,
    client: DirectCastClient,
    progress: ProgressReporter,
) -> RunContext:
    """Processing phase. Every row yields exactly one Outcome."""
    workers = max(1, context.settings.concurrency)

    if workers == 1:
        for row in context.rows:
            context.results.add(process_row(client, row))
            progress.increment()
        return context

    logger.info(f"Dispatching {context.total} rows with {workers} workers")
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [executor.submit(process_row, client, row) for row in context.rows]
        for future in as_completed(futures):
            context.results.add(future.result())
            progress.increment()
    return context


def write_report(context: RunContext, writer: Optional[ReportWriter] = None) -> RunContext:
    """Writing phase. Raises WriteError."""
    writer = writer or ReportWriter(context.settings.output_file)
    context.report_path = writer.write(context.results.outcomes)
    return context


def run_campaign(
    settings: Settings,
    client: Optional[DirectCastClient] = None,
    progress: Optional[ProgressReporter] = None,
) -> RunContext:
    """
    Run the whole batch.

    Args:
        settings: Run settings.
        client: API client; built from settings when omitted.
        progress: Progress sink; a console bar when omitted.

    Returns:
        The finished RunContext. report_path is None when the input had no rows.

    Raises:
        ReadError: input could not be read. No request was sent.
        WriteError: report could not be written. Collected outcomes are lost.
    """
    context = read_rows(RunContext(settings=settings))

    if context.is_empty:
        print(NO_ROWS_MESSAGE)
        return context

    client = client or DirectCastClient.from_settings(settings.warpcast)
    progress = progress or ProgressReporter()

    progress.start(context.total)
    try:
        process_rows(context, client, progress)
        write_report(context)
    finally:
        progress.stop()

    logger.info(
        f"Batch complete. {len(context.results)} rows, "
        f"{context.results.error_count} errors."
    )
    return context
