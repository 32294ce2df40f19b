# Application Layer
# =================
# Orchestrates a single batch run. Holds no business rules of its own.

from .campaign import RunContext, run_campaign
from .progress import ProgressReporter

__all__ = ["RunContext", "run_campaign", "ProgressReporter"]
