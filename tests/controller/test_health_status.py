from datetime import datetime, UTC

from controller.health import HealthStatus, HealthLevel, HealthCode
from controller.printer import Printer
from controller.printer_state import PrinterState


def test_ok_health_status():
    hs = HealthStatus.ok()
    assert hs.level == HealthLevel.OK
    assert hs.to_dict() == {"level": "OK"}


def test_error_health_status():
    hs = HealthStatus.error(
        code=HealthCode.PRINTER_FAULT,
        message="Paper Jam",
        instructions=["Open the printer"],
    )

    data = hs.to_dict()
    assert data["level"] == "ERROR"
    assert data["code"] == "PRINTER_FAULT"
    assert "Open the printer" in data["instructions"]


def test_idle_printer_is_healthy():
    printer = Printer()

    assert printer.get_health().level == HealthLevel.OK


def test_faulted_printer_reports_last_error():
    printer = Printer()
    printer.set_error("Paper Jam")

    health = printer.get_health()

    assert health.level == HealthLevel.ERROR
    assert health.code == HealthCode.PRINTER_FAULT
    assert health.message == "Paper Jam"
    assert health.recoverable is True


def test_faulted_printer_keeps_empty_message():
    printer = Printer()
    printer.set_error("")

    assert printer.get_health().message == ""


def test_fault_without_message_gets_generic_text():
    printer = Printer()
    printer.state = PrinterState.ERROR

    assert printer.get_last_error() is None
    assert printer.get_health().message == "Printer fault"


def test_out_of_paper_is_a_warning():
    printer = Printer()
    printer.refill_paper(-10)
    printer.process_job()

    data = printer.get_health().to_dict()

    assert data["level"] == "WARNING"
    assert data["code"] == "OUT_OF_PAPER"
    assert "Load paper into the tray" in data["instructions"]


def test_zero_paper_is_healthy_until_processed():
    printer = Printer()
    printer.refill_paper(-10)

    # Health follows state, and state only changes in process_job
    assert printer.get_health().level == HealthLevel.OK


def test_health_snapshots_have_independent_timestamps(monkeypatch):
    ticks = iter([
        datetime(2026, 1, 1, 12, 0, 0, tzinfo=UTC),
        datetime(2026, 1, 1, 12, 0, 5, tzinfo=UTC),
    ])

    class FakeDatetime:
        @staticmethod
        def now(_tz):
            return next(ticks)

    monkeypatch.setattr("controller.health.datetime", FakeDatetime)

    first = HealthStatus.ok()
    second = HealthStatus.ok()

    assert first.last_updated == datetime(2026, 1, 1, 12, 0, 0, tzinfo=UTC)
    assert second.last_updated == datetime(2026, 1, 1, 12, 0, 5, tzinfo=UTC)
