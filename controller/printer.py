"""
Printer

Single print device modelled as a finite-state machine.

Behavior:
- Jobs are opaque strings, printed first-in-first-out
- Each printed job consumes one sheet of paper
- Faults are data (state + last error), never raised
- Not thread-safe; whoever shares a Printer must serialize access
"""

from __future__ import annotations

from collections import deque
from typing import Optional, Tuple

from controller.health import HealthStatus
from controller.printer_state import PrinterState


class Printer:
    DEFAULT_PAPER_COUNT = 10

    # Printed line is OUTPUT_PREFIX followed by the job text
    OUTPUT_PREFIX = "Printing: "

    def __init__(self, paper_count: int = DEFAULT_PAPER_COUNT) -> None:
        self.state = PrinterState.IDLE
        self.paper_count = paper_count
        self.last_error: Optional[str] = None
        self._job_queue: deque[str] = deque()

    # ---------- Commands ----------

    def add_job(self, job: str) -> None:
        self._job_queue.append(job)

    def process_job(self) -> None:
        """
        Advance the state machine by at most one job.

        Order matters: the paper check runs before the queue check, so an
        empty printer reports OUT_OF_PAPER even when nothing is queued.
        ERROR is not consulted and gets overwritten.
        """
        if self.paper_count <= 0:
            self.state = PrinterState.OUT_OF_PAPER
            return

        if not self._job_queue:
            self.state = PrinterState.IDLE
            return

        self.state = PrinterState.PRINTING
        job = self._job_queue.popleft()
        self.paper_count -= 1
        print(f"{self.OUTPUT_PREFIX}{job}")
        self.state = PrinterState.IDLE

    def refill_paper(self, amount: int) -> None:
        # Negative amounts deplete; no floor.
        self.paper_count += amount

    def set_error(self, message: str) -> None:
        self.last_error = message
        self.state = PrinterState.ERROR

    # ---------- Queries ----------

    def get_paper_count(self) -> int:
        return self.paper_count

    def get_state(self) -> PrinterState:
        return self.state

    def get_last_error(self) -> Optional[str]:
        return self.last_error

    def pending_jobs(self) -> Tuple[str, ...]:
        return tuple(self._job_queue)

    def get_status(self) -> dict:
        return {
            "state": self.state.name,
            "busy": bool(self._job_queue),
            "paper_count": self.paper_count,
            "queued_jobs": len(self._job_queue),
            "last_error": self.last_error,
        }

    def get_health(self) -> HealthStatus:
        return HealthStatus.for_printer(self)
