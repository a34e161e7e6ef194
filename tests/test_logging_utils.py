import logging

import pytest

from requirements_report import logging_utils
from requirements_report.logging_utils import quiet_third_party, resolve_level


@pytest.mark.parametrize(
    "level, expected",
    [
        ("debug", logging.DEBUG),
        (" WARNING ", logging.WARNING),
        (30, 30),
        ("bogus", logging.INFO),
    ],
)
def test_resolve_level(level, expected):
    assert resolve_level(level) == expected


def test_third_party_loggers_stay_at_warning(monkeypatch):
    for name in logging_utils.NOISY_LOGGERS:
        monkeypatch.setattr(logging.getLogger(name), "level", logging.NOTSET)
    quiet_third_party(logging.DEBUG)
    assert logging.getLogger("matplotlib").level == logging.WARNING
    quiet_third_party(logging.ERROR)
    assert logging.getLogger("PIL").level == logging.ERROR


def test_setup_logging_writes_log_file(tmp_path, monkeypatch):
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    monkeypatch.setattr(logging_utils, "_CONFIGURED", False)
    log_file = tmp_path / "report.log"
    try:
        logging_utils.setup_logging("debug", str(log_file))
        assert root.level == logging.DEBUG
        logging_utils.get_logger("requirements_report.test").info("hello")
        for handler in root.handlers:
            handler.flush()
        assert "hello" in log_file.read_text(encoding="utf-8")
        # second call is a no-op
        logging_utils.setup_logging("error")
        assert root.level == logging.DEBUG
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
            handler.close()
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)
