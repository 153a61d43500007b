from enum import Enum, auto


class PrinterState(Enum):
    IDLE = auto()
    PRINTING = auto()
    OUT_OF_PAPER = auto()
    ERROR = auto()
