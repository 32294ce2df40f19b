"""
Campaign Runner - Warpcast Direct Casts
========================================

Sends a direct cast for every row of a recipient CSV and writes a report.

    python run_campaign.py -f recipients.csv -k <apikey> -o output.csv
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from bulkcast.cli import main


if __name__ == "__main__":
    sys.exit(main())
