from __future__ import annotations

import json
import logging

from quwatro.utils.logging import _json_formatter, configure_logging, get_logger

EXPECTED_SIZE = 44
EXPECTED_CAPACITY = 100


def _record() -> logging.LogRecord:
    return logging.LogRecord(
        name="test.logger",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="hello",
        args=(),
        exc_info=None,
    )


def test_json_formatter_promotes_standard_extra_fields() -> None:
    record = _record()
    record.size = EXPECTED_SIZE
    record.store = "locations"

    payload = json.loads(_json_formatter(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "test.logger"
    assert payload["message"] == "hello"
    assert payload["size"] == EXPECTED_SIZE
    assert payload["store"] == "locations"


def test_json_formatter_supports_legacy_nested_extra_field() -> None:
    record = _record()
    record.extra = {"capacity": EXPECTED_CAPACITY}

    payload = json.loads(_json_formatter(record))

    assert payload["capacity"] == EXPECTED_CAPACITY


def test_json_formatter_stringifies_unserializable_values(tmp_path) -> None:
    record = _record()
    record.path = tmp_path / "usage.txt"

    payload = json.loads(_json_formatter(record))

    assert payload["path"] == str(tmp_path / "usage.txt")


def test_configure_logging_writes_json_to_file(tmp_path) -> None:
    log_file = tmp_path / "quwatro.log"
    configure_logging(level="INFO", json_logs=True, log_file=log_file)
    try:
        get_logger("quwatro.test").info("Location added", extra={"location": "Baguio"})
        for handler in logging.getLogger().handlers:
            handler.flush()

        payload = json.loads(log_file.read_text(encoding="utf-8").strip().splitlines()[-1])
        assert payload["message"] == "Location added"
        assert payload["location"] == "Baguio"
    finally:
        configure_logging(level="WARNING")


def test_configure_logging_without_force_keeps_existing_handlers(tmp_path) -> None:
    configure_logging(level="WARNING")
    handlers = list(logging.getLogger().handlers)

    configure_logging(level="DEBUG", log_file=tmp_path / "ignored.log", force=False)

    assert logging.getLogger().handlers == handlers
    assert not (tmp_path / "ignored.log").exists()
