"""Unit tests for JSON formatter."""

import json
import logging
import sys

import pytest

from fspath.bootstrap.logging_setup import JsonFormatter, redact_sensitive


@pytest.fixture(name="json_formatter")
def json_formatter_fixture():
    """Create a JSON formatter instance."""
    return JsonFormatter("%Y-%m-%d %H:%M:%S")


def make_record(level=logging.INFO, exc_info=None):
    """Build a bare log record from the lookup component."""
    return logging.LogRecord(
        name="fspath.lookup",
        level=level,
        pathname="test.py",
        lineno=1,
        msg="Test message",
        args=(),
        exc_info=exc_info,
    )


def test_json_formatter_basic_fields(json_formatter):
    """Test that JSON formatter includes all required basic fields."""
    record = make_record()
    record.correlation_id = "test-correlation-id"
    record.component = "lookup"

    log_data = json.loads(json_formatter.format(record))

    assert log_data["level"] == "INFO"
    assert log_data["correlation_id"] == "test-correlation-id"
    assert log_data["component"] == "lookup"
    assert log_data["message"] == "Test message"
    assert "timestamp" in log_data


def test_json_formatter_with_resolution_fields(json_formatter):
    """Test that JSON formatter includes resolution extra fields."""
    record = make_record()
    record.event = "symlink_followed"
    record.path = "a/b"
    record.target = "../../c"
    record.resolved = "c/d"
    record.hops = 1
    record.depth = 0

    log_data = json.loads(json_formatter.format(record))

    assert log_data["event"] == "symlink_followed"
    assert log_data["path"] == "a/b"
    assert log_data["target"] == "../../c"
    assert log_data["resolved"] == "c/d"
    assert log_data["hops"] == 1
    assert log_data["depth"] == 0


def test_json_formatter_ignores_unknown_fields(json_formatter):
    """Test that JSON formatter only emits known extra fields."""
    record = make_record()
    record.client = "127.0.0.1"

    log_data = json.loads(json_formatter.format(record))

    assert "client" not in log_data


def test_json_formatter_defaults(json_formatter):
    """Test that JSON formatter defaults correlation_id and component."""
    log_data = json.loads(json_formatter.format(make_record()))

    assert log_data["correlation_id"] == "-"
    assert log_data["component"] == "unknown"


def test_json_formatter_stable_key_ordering(json_formatter):
    """Test that JSON formatter produces stable key ordering."""
    record = make_record()
    record.correlation_id = "test-id"
    record.component = "lookup"
    record.event = "symlink_loop"
    record.path = "l0"

    output1 = json_formatter.format(record)
    output2 = json_formatter.format(record)

    assert output1 == output2
    keys = list(json.loads(output1).keys())
    assert keys == sorted(keys)


def test_json_formatter_keeps_path_fields_verbatim(json_formatter):
    """Test that path-valued fields are never redacted."""
    record = make_record()
    record.path = "projects/website/components/header"
    record.target = "../tokens/password.txt"
    record.resolved = "secrets/api_key"

    log_data = json.loads(json_formatter.format(record))

    assert log_data["path"] == "projects/website/components/header"
    assert log_data["target"] == "../tokens/password.txt"
    assert log_data["resolved"] == "secrets/api_key"


def test_json_formatter_redacts_sensitive_values(json_formatter):
    """Test that other string fields matching sensitive patterns are redacted."""
    record = make_record()
    record.view = "MapFS(token=abc)"
    record.op = "open"

    log_data = json.loads(json_formatter.format(record))

    assert log_data["view"] == "[REDACTED]"
    assert log_data["op"] == "open"


def test_redact_sensitive_keeps_ordinary_values():
    """Leave ordinary and empty values untouched."""
    assert redact_sensitive("") == ""
    assert redact_sensitive("docs/readme.txt") == "docs/readme.txt"
    assert redact_sensitive("a" * 40) == "[REDACTED]"


def test_json_formatter_with_exception(json_formatter):
    """Test that JSON formatter includes exception information."""
    try:
        raise ValueError("Test error")
    except ValueError:
        record = make_record(logging.ERROR, sys.exc_info())

        log_data = json.loads(json_formatter.format(record))

        assert "exception" in log_data
        assert "ValueError: Test error" in log_data["exception"]
