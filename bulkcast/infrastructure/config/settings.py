"""
Settings Module - Run Configuration
====================================

ARCHITECTURAL DECISION:
- All configuration comes from the command line (no environment variables,
  no config file)
- Settings are immutable dataclasses for safety and clarity
- Single source of truth for the API endpoint and run options
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

DEFAULT_OUTPUT_FILE = "output.csv"


@dataclass(frozen=True)
class WarpcastSettings:
    """Direct cast API settings."""

    api_key: str = ""
    api_url: str = "https://api.warpcast.com/v2/ext-send-direct-cast"

    # None keeps the requests default (wait indefinitely)
    timeout_seconds: Optional[float] = None


@dataclass(frozen=True)
class Settings:
    """
    Root settings container for a single batch run.

    Usage:
        settings = Settings.from_args(args)
        for issue in settings.validate():
            print(issue)
    """

    input_file: Path = field(default_factory=lambda: Path("recipients.csv"))
    output_file: Path = field(default_factory=lambda: Path(DEFAULT_OUTPUT_FILE))
    warpcast: WarpcastSettings = field(default_factory=WarpcastSettings)

    # Requests in flight at once; 1 keeps the run strictly sequential
    concurrency: int = 1

    @classmethod
    def from_args(cls, args) -> "Settings":
        """Build settings from a parsed argparse namespace."""
        return cls(
            input_file=Path(args.file),
            output_file=Path(args.output),
            warpcast=WarpcastSettings(api_key=args.apikey),
            concurrency=args.concurrency,
        )

    def validate(self) -> list[str]:
        """
        Validate settings and return list of warnings.
        Returns empty list if all settings are valid.
        """
        issues = []

        if not self.warpcast.api_key.strip():
            issues.append(
                "WARNING: API key is empty. "
                "Every request will be rejected by the API."
            )

        if self.concurrency > 1:
            issues.append(
                f"WARNING: Sending with {self.concurrency} concurrent requests. "
                "The API may rate-limit this client."
            )

        if self.output_file.exists():
            issues.append(
                f"WARNING: Output file {self.output_file} exists "
                "and will be overwritten."
            )

        return issues
