from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, UTC
from enum import Enum, auto
from typing import List, Optional, TYPE_CHECKING

from controller.printer_state import PrinterState

if TYPE_CHECKING:  # pragma: no cover
    from controller.printer import Printer


class HealthLevel(Enum):
    OK = auto()
    WARNING = auto()
    ERROR = auto()


class HealthCode(Enum):
    OUT_OF_PAPER = auto()
    PRINTER_FAULT = auto()


@dataclass(frozen=True)
class HealthStatus:
    level: HealthLevel
    code: Optional[HealthCode] = None
    message: Optional[str] = None
    instructions: List[str] | None = None
    recoverable: bool = True
    last_updated: datetime = field(default_factory=lambda: datetime.now(UTC))

    @staticmethod
    def ok() -> "HealthStatus":
        return HealthStatus(level=HealthLevel.OK)

    @staticmethod
    def warning(*, code: HealthCode, message: str, instructions: List[str]) -> "HealthStatus":
        return HealthStatus(
            level=HealthLevel.WARNING,
            code=code,
            message=message,
            instructions=instructions,
        )

    @staticmethod
    def error(
            *,
            code: HealthCode,
            message: str,
            instructions: List[str],
    ) -> "HealthStatus":
        return HealthStatus(
            level=HealthLevel.ERROR,
            code=code,
            message=message,
            instructions=instructions,
        )

    @staticmethod
    def for_printer(printer: "Printer") -> "HealthStatus":
        """Derive an operator-facing status from the printer's current state."""
        state = printer.get_state()

        if state == PrinterState.ERROR:
            last_error = printer.get_last_error()
            return HealthStatus.error(
                code=HealthCode.PRINTER_FAULT,
                message=last_error if last_error is not None else "Printer fault",
                instructions=[
                    "Open the printer and clear the fault",
                    "Process the next job to resume printing",
                ],
            )

        if state == PrinterState.OUT_OF_PAPER:
            return HealthStatus.warning(
                code=HealthCode.OUT_OF_PAPER,
                message="Printer is out of paper",
                instructions=[
                    "Load paper into the tray",
                    "Process the job again",
                ],
            )

        return HealthStatus.ok()

    def to_dict(self) -> dict:
        if self.level == HealthLevel.OK:
            return {"level": "OK"}

        return {
            "level": self.level.name,
            "code": self.code.name if self.code else None,
            "message": self.message,
            "instructions": self.instructions,
            "recoverable": self.recoverable,
        }
