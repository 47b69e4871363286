import io
import json

import pytest

from echobench.logging_config import (
    bind_context,
    clear_context,
    correlation_id_var,
    get_logger,
    set_correlation_id,
    setup_logging,
)


def last_record(stream):
    return json.loads(stream.getvalue().strip().splitlines()[-1])


@pytest.fixture
def stream(restore_root_logger):
    out = io.StringIO()
    yield out
    clear_context()


def test_logs_are_json_with_correlation_id(stream):
    setup_logging(level="INFO", stream=stream)
    set_correlation_id("req-42")

    get_logger("echobench.test").info("Request completed", extra={"status_code": 200})

    record = last_record(stream)
    assert record["message"] == "Request completed"
    assert record["level"] == "INFO"
    assert record["name"] == "echobench.test"
    assert record["correlation_id"] == "req-42"
    assert record["status_code"] == 200
    assert "timestamp" in record


def test_correlation_id_defaults_to_none_marker(stream):
    setup_logging(stream=stream)
    get_logger("echobench.test").warning("no request")
    assert last_record(stream)["correlation_id"] == "none"


def test_level_filters_lower_records(stream):
    setup_logging(level="warning", stream=stream)
    get_logger("echobench.test").info("hidden")
    assert stream.getvalue() == ""


def test_level_comes_from_environment(stream, monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "error")
    setup_logging(stream=stream)
    get_logger("echobench.test").warning("hidden")
    assert stream.getvalue() == ""


def test_run_context_is_stamped_on_every_record(stream):
    setup_logging(stream=stream, component="load-runner")
    bind_context(variant="timestamp", user_class="TimestampPayloadUser")

    get_logger("echobench.test").info("Load test configured")

    record = last_record(stream)
    assert record["component"] == "load-runner"
    assert record["variant"] == "timestamp"
    assert record["user_class"] == "TimestampPayloadUser"


def test_extra_fields_win_over_run_context(stream):
    setup_logging(stream=stream, variant="static")
    get_logger("echobench.test").info("override", extra={"variant": "timestamp"})
    assert last_record(stream)["variant"] == "timestamp"


def test_set_correlation_id_generates_uuid(restore_root_logger):
    generated = set_correlation_id()
    assert correlation_id_var.get() == generated
    assert len(generated) == 36
