"""
Progress Reporter - Console Progress Bar
=========================================

Renders "completed of total" on a single console line. Purely
observational: nothing in the run reads its state back.
"""

import sys
from typing import Optional, TextIO

from ..domain.models import ProgressState


class ProgressReporter:
    """
    Single-line progress bar.

    USAGE:
        progress = ProgressReporter()
        progress.start(total=10)
        progress.increment()
        progress.stop()
    """

    def __init__(self, stream: Optional[TextIO] = None, width: int = 40):
        self._stream = stream or sys.stdout
        self._width = width
        self.state = ProgressState()
        self._active = False

    def start(self, total: int) -> None:
        self.state = ProgressState(total=total)
        self._active = True
        self._render()

    def increment(self) -> None:
        self.state.increment()
        if self._active:
            self._render()

    def stop(self) -> None:
        if self._active:
            self._render()
            self._stream.write("\n")
            self._stream.flush()
        self._active = False

    def render_line(self) -> str:
        filled = int(self._width * self.state.fraction)
        bar = "#" * filled + "-" * (self._width - filled)
        percent = int(self.state.fraction * 100)
        return f"progress [{bar}] {percent}% | {self.state.completed}/{self.state.total}"

    def _render(self) -> None:
        self._stream.write("\r" + self.render_line())
        self._stream.flush()
