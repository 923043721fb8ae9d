import json
import logging
from uuid import uuid4

import utils.logger as logger_module
from utils.logger import get_logger, request_context


def test_logger_writes_json_to_rotating_file_and_stderr(
    tmp_path, monkeypatch, capfd
) -> None:
    monkeypatch.setattr(logger_module, "LOG_DIR", tmp_path)

    logger_name = f"tests.logger.{uuid4()}"
    logger = get_logger(logger_name)

    duplicate_logger = get_logger(logger_name)
    assert logger is duplicate_logger

    handlers = logger.handlers
    assert len(handlers) == 2
    assert (
        sum(getattr(handler, "_lions_json_kind", None) == "stream" for handler in handlers)
        == 1
    )
    assert (
        sum(getattr(handler, "_lions_json_kind", None) == "file" for handler in handlers)
        == 1
    )

    logger.info("GET /api/events -> 200", extra={"method": "GET", "path": "/api/events"})
    logger.warning("heads up", extra={"user_id": "user-7"})
    logger.error(
        "boom",
        extra=request_context("POST", "/api/athletes", 500, 12.5),
    )

    for handler in handlers:
        if hasattr(handler, "flush"):
            handler.flush()

    captured = capfd.readouterr()
    assert not captured.out

    err_lines = [line for line in captured.err.splitlines() if line.strip()]
    assert len(err_lines) == 2

    warning_payload = json.loads(err_lines[0])
    error_payload = json.loads(err_lines[1])

    assert warning_payload["msg"] == "heads up"
    assert warning_payload["level"] == "WARNING"
    assert warning_payload["user_id"].startswith("user-")
    assert warning_payload["user_id"] != "user-7"

    assert error_payload["msg"] == "boom"
    assert error_payload["level"] == "ERROR"
    assert error_payload["method"] == "POST"
    assert error_payload["path"] == "/api/athletes"
    assert error_payload["status"] == 500
    assert error_payload["latency_ms"] == 12.5

    log_file = tmp_path / "app.log"
    assert log_file.exists()

    file_lines = [
        json.loads(line)
        for line in log_file.read_text(encoding="utf-8").splitlines()
        if line.strip()
    ]
    assert len(file_lines) == 3

    info_payload, warning_file_payload, error_file_payload = file_lines

    for payload in (info_payload, warning_file_payload, error_file_payload):
        for key in ("ts", "level", "msg", "logger"):
            assert key in payload

    assert info_payload["msg"] == "GET /api/events -> 200"
    assert info_payload["level"] == "INFO"
    assert info_payload["path"] == "/api/events"

    assert warning_file_payload == warning_payload
    assert error_file_payload == error_payload

    # Clean up handlers to avoid influencing other tests.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logging.getLogger(logger_name).handlers.clear()
