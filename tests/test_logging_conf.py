"""Tests for the JSON log formatter."""

import io
import json
import logging

import pytest

from resource_paths.domain.paths import extract_path_info
from resource_paths.logging_conf import JsonFormatter, get_logger, setup_logging


def _record(msg: object, **extra: object) -> logging.LogRecord:
    record = logging.LogRecord("resource_paths.paths", logging.DEBUG, __file__, 1, msg, None, None)
    record.__dict__.update(extra)
    return record


def test_formats_structured_extras() -> None:
    out = json.loads(JsonFormatter().format(_record("path.extract", path="/persons/", kind="global_list")))
    assert out["level"] == "DEBUG"
    assert out["logger"] == "resource_paths.paths"
    assert out["message"] == "path.extract"
    assert out["path"] == "/persons/"
    assert out["kind"] == "global_list"
    assert "ts" in out
    assert "lineno" not in out


def test_dict_message_is_merged() -> None:
    out = json.loads(JsonFormatter().format(_record({"event": "x", "count": 2})))
    assert out["event"] == "x"
    assert out["count"] == 2
    assert "message" not in out


def test_extras_do_not_overwrite_core_keys() -> None:
    out = json.loads(JsonFormatter().format(_record("m", level="bogus")))
    assert out["level"] == "DEBUG"


def test_setup_logging_is_idempotent_and_writes_json(monkeypatch: pytest.MonkeyPatch) -> None:
    root = logging.getLogger()
    level = root.level
    stream = io.StringIO()

    # Restore root's handlers before pytest's own capture handler is detached.
    with monkeypatch.context() as mp:
        mp.setattr(root, "handlers", [])
        try:
            setup_logging("DEBUG", stream=stream)
            setup_logging("DEBUG", stream=io.StringIO())

            assert len(root.handlers) == 1
            assert root.level == logging.DEBUG
            assert isinstance(root.handlers[0].formatter, JsonFormatter)

            extract_path_info("/persons/")
        finally:
            root.setLevel(level)

    lines = [json.loads(line) for line in stream.getvalue().splitlines()]
    (event,) = [line for line in lines if line.get("message") == "path.extract"]
    assert event["event"] == "path_extract"
    assert event["path"] == "/persons/"
    assert event["kind"] == "global_list"
    assert event["level"] == "DEBUG"


def test_get_logger_default_name() -> None:
    assert get_logger().name == "resource_paths"
    assert get_logger("resource_paths.paths").name == "resource_paths.paths"
