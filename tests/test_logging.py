"""Tests for portkey_client/logging/structured.py: JSON logging."""

import json
import logging
import sys

from portkey_client.logging.structured import (
    ROOT_LOGGER,
    JSONFormatter,
    RequestTimer,
    generate_request_id,
    get_logger,
    request_id_var,
    setup_logging,
)


def _record(msg: str = "test") -> logging.LogRecord:
    return logging.LogRecord(
        name="portkey_client.client", level=logging.INFO, pathname="",
        lineno=0, msg=msg, args=(), exc_info=None,
    )


class TestJSONFormatter:

    def test_output_is_valid_json(self):
        parsed = json.loads(JSONFormatter().format(_record("hello")))
        assert parsed["message"] == "hello"
        assert parsed["level"] == "INFO"
        assert parsed["logger"] == "portkey_client.client"
        assert "timestamp" in parsed

    def test_includes_request_id(self):
        token = request_id_var.set("req-abc123")
        try:
            parsed = json.loads(JSONFormatter().format(_record()))
            assert parsed["request_id"] == "req-abc123"
        finally:
            request_id_var.reset(token)

    def test_includes_log_data(self):
        record = _record()
        record.log_data = {"method": "POST", "status": 200}
        parsed = json.loads(JSONFormatter().format(record))
        assert parsed["method"] == "POST"
        assert parsed["status"] == 200

    def test_log_data_cannot_replace_envelope(self):
        record = _record("real message")
        record.log_data = {"message": "spoofed", "level": "DEBUG", "path": "/v1/models"}
        parsed = json.loads(JSONFormatter().format(record))
        assert parsed["message"] == "real message"
        assert parsed["level"] == "INFO"
        assert parsed["path"] == "/v1/models"

    def test_includes_exception(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = logging.LogRecord(
                name="portkey_client.client", level=logging.ERROR, pathname="",
                lineno=0, msg="failed", args=(), exc_info=sys.exc_info(),
            )
        parsed = json.loads(JSONFormatter().format(record))
        assert "RuntimeError: boom" in parsed["exception"]

    def test_empty_request_id_default(self):
        parsed = json.loads(JSONFormatter().format(_record()))
        assert parsed["request_id"] == ""


class TestGenerateRequestId:

    def test_length(self):
        assert len(generate_request_id()) == 12

    def test_uniqueness(self):
        ids = {generate_request_id() for _ in range(100)}
        assert len(ids) == 100

    def test_hex_chars_only(self):
        assert all(c in "0123456789abcdef" for c in generate_request_id())


class TestRequestTimer:

    def test_measures_elapsed(self):
        with RequestTimer() as timer:
            _ = sum(range(1000))
        assert timer.elapsed_ms > 0
        assert isinstance(timer.elapsed_ms, float)


class TestLoggers:

    def test_component_loggers_are_namespaced(self):
        assert get_logger("client").name == "portkey_client.client"

    def test_no_handlers_on_import(self):
        assert logging.getLogger(ROOT_LOGGER).handlers == []


class TestSetupLogging:

    def test_creates_stdout_handler(self):
        logger = setup_logging()
        assert logger.name == ROOT_LOGGER
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)
        assert logger.level == logging.WARNING

    def test_level_from_settings(self, override_settings):
        override_settings(PORTKEY_LOG_LEVEL="debug")
        assert setup_logging().level == logging.DEBUG

    def test_file_handler(self, tmp_path):
        path = tmp_path / "client.log"
        logger = setup_logging(level="INFO", log_file=str(path))
        assert any(isinstance(h, logging.FileHandler) for h in logger.handlers)

        get_logger("client").info("written", extra={"log_data": {"status": 200}})
        for handler in logger.handlers:
            handler.flush()
        line = json.loads(path.read_text(encoding="utf-8").strip())
        assert line["message"] == "written"
        assert line["status"] == 200

    def test_repeated_setup_does_not_duplicate_handlers(self):
        setup_logging()
        assert len(setup_logging().handlers) == 1
