# Domain Layer
# ============
# Plain data types shared by every other layer. No I/O happens here.

from .models import Row, Outcome, OutcomeStatus, ProgressState

__all__ = ["Row", "Outcome", "OutcomeStatus", "ProgressState"]
