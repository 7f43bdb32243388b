import logging

from src.logging_config import setup_logging


def test_log_file_receives_records(tmp_path, monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    log_file = tmp_path / "travely.log"

    setup_logging("debug", str(log_file))
    try:
        assert root.level == logging.DEBUG
        assert any(isinstance(h, logging.FileHandler) for h in root.handlers)
        logging.getLogger("src.bookings.booking_service").info("Booking BK1 created")
        for handler in root.handlers:
            handler.flush()
        assert "[INFO] src.bookings.booking_service: Booking BK1 created" in log_file.read_text()
    finally:
        for handler in root.handlers:
            handler.close()


def test_setup_is_a_no_op_once_configured(monkeypatch):
    root = logging.getLogger()
    existing = logging.NullHandler()
    monkeypatch.setattr(root, "handlers", [existing])

    setup_logging("INFO", "unused.log")

    assert root.handlers == [existing]
