from __future__ import annotations

import io
import json

import pytest

from domain import LoggerPort
from infra.runtime import StructuredLogger


def test_conforms_to_logger_port() -> None:
    assert isinstance(StructuredLogger(), LoggerPort)


def test_emits_one_sorted_json_object_per_event() -> None:
    stream = io.StringIO()
    logger = StructuredLogger(component="tests", stream=stream)

    logger.info("first", key="count")
    logger.error("second")

    lines = stream.getvalue().splitlines()
    assert len(lines) == 2
    first = json.loads(lines[0])
    assert first["level"] == "info"
    assert first["component"] == "tests"
    assert first["message"] == "first"
    assert first["fields"] == {"key": "count"}
    assert list(first) == sorted(first)
    assert json.loads(lines[1])["level"] == "error"


def test_defaults_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    StructuredLogger().warning("careful", actual="str")
    captured = capsys.readouterr()
    assert captured.out == ""
    payload = json.loads(captured.err)
    assert payload["level"] == "warning"
    assert payload["fields"] == {"actual": "str"}


def test_unserialisable_fields_fall_back_to_repr() -> None:
    stream = io.StringIO()
    StructuredLogger(stream=stream).info("odd", value=object())
    assert "object" in json.loads(stream.getvalue())["fields"]["value"]
