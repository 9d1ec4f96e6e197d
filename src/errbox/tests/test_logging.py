"""Tests for structured logging of errors."""

from __future__ import annotations

import io
from collections.abc import Iterator

import orjson
import pytest

from errbox.core import annotate, append
from errbox.foundation.config import clear_settings_cache
from errbox.observability import (
    ConsoleRenderer,
    JsonRenderer,
    NoOpRenderer,
    configure_logging,
    error_events,
    get_logger,
    log_context,
    log_error,
)


@pytest.fixture(autouse=True)
def reset() -> Iterator[None]:
    clear_settings_cache()
    yield
    configure_logging(format="none")
    clear_settings_cache()


def _boxed() -> BaseException | None:
    first = annotate(ValueError("bang"), "with num %d", 10)
    first.fields()["request_id"] = "abc123"
    return append(append(None, first), KeyError("k"))


def test_error_events_one_per_entry() -> None:
    events = error_events(_boxed())

    assert [e["index"] for e in events] == [1, 2]
    assert all(e["total"] == 2 for e in events)
    assert events[0]["cause"] == "bang"
    assert events[0]["fields"] == {"request_id": "abc123"}
    assert events[0]["annotations"][0]["message"] == "with num 10"
    assert events[1]["cause_type"] == "KeyError"
    assert events[1]["annotations"] == []


def test_error_events_plain_and_none() -> None:
    assert error_events(None) == []
    (event,) = error_events(ValueError("plain"))
    assert event["trace"] == "plain"


def test_log_error_json() -> None:
    out = io.StringIO()
    configure_logging(format="json", level="debug", output=out)
    log = get_logger("importer", job="nightly")

    assert log_error(_boxed(), log, event="import failed") == 2

    lines = [orjson.loads(line) for line in out.getvalue().splitlines()]
    assert [line["event"] for line in lines] == ["import failed", "import failed"]
    assert lines[0]["level"] == "error"
    assert lines[0]["logger"] == "importer"
    assert lines[0]["job"] == "nightly"
    assert lines[0]["fields"] == {"request_id": "abc123"}


def test_log_error_console() -> None:
    out = io.StringIO()
    configure_logging(format="console", output=out, colors=False)

    with log_context(run="r1"):
        log_error(annotate(ValueError("bang"), "ctx"), get_logger())

    text = out.getvalue()
    assert "[error] error" in text
    assert 'run="r1"' in text
    assert " +--> ctx" in text


def test_log_error_respects_level() -> None:
    out = io.StringIO()
    configure_logging(format="json", level="error", output=out)
    log_error(ValueError("x"), get_logger(), level="warning")
    assert out.getvalue() == ""


def test_configure_logging_renderers() -> None:
    assert isinstance(configure_logging(format="none"), NoOpRenderer)
    assert isinstance(configure_logging(format="json"), JsonRenderer)
    assert isinstance(configure_logging(format="console"), ConsoleRenderer)


def test_configure_logging_defaults_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ERRBOX_LOG_FORMAT", "none")
    clear_settings_cache()
    assert isinstance(configure_logging(), NoOpRenderer)


def test_configure_logging_unknown_format() -> None:
    with pytest.raises(ValueError, match="Unknown format"):
        configure_logging(format="xml")


def test_bind_and_unbind() -> None:
    log = get_logger("svc", a=1).bind(b=2)
    assert log.context == {"a": 1, "logger": "svc", "b": 2}
    assert log.unbind("a").context == {"logger": "svc", "b": 2}
