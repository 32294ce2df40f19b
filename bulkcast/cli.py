"""
Command Line Interface
======================

    bulkcast -f recipients.csv -k <apikey> [-o output.csv] [-c 1] [-v]
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .application import run_campaign
from .infrastructure.config import Settings, DEFAULT_OUTPUT_FILE
from .infrastructure.importer import ReadError
from .infrastructure.reporting import WriteError

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "The CSV file was written successfully"


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bulkcast",
        description="Send a Warpcast direct cast for every row of a CSV file.",
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument(
        "-f", "--file",
        required=True,
        help="input CSV file with recipientFid and message columns",
    )
    parser.add_argument("-k", "--apikey", required=True, help="API key")
    parser.add_argument(
        "-o", "--output",
        default=DEFAULT_OUTPUT_FILE,
        help=f"output CSV file (default: {DEFAULT_OUTPUT_FILE})",
    )
    parser.add_argument(
        "-c", "--concurrency",
        type=_positive_int,
        default=1,
        help="requests in flight at once (default: 1, sequential)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="enable debug logging",
    )
    return parser


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        force=True,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point. Returns the process exit status."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    settings = Settings.from_args(args)
    for issue in settings.validate():
        logger.warning(issue)

    try:
        context = run_campaign(settings)
    except (ReadError, WriteError) as e:
        print(f"Error processing CSV file: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logger.exception(f"Run aborted: {e}")
        print(f"Error processing CSV file: {e}", file=sys.stderr)
        return 1

    if context.report_path:
        print(SUCCESS_MESSAGE)
    return 0


if __name__ == "__main__":
    sys.exit(main())
