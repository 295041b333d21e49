"""Tests for structlog configuration helpers."""
import json
import logging

import pytest
import structlog

from svs.utils.logging import configure_logging, get_logger, log_context


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


@pytest.mark.unit
def test_configure_logging_rejects_unknown_level(restore_logging):
    with pytest.raises(ValueError):
        configure_logging(level="chatty")


@pytest.mark.unit
def test_configure_logging_sets_root_level(restore_logging):
    configure_logging(level="warning")
    assert logging.getLogger().level == logging.WARNING

    configure_logging(level=logging.DEBUG)
    assert logging.getLogger().level == logging.DEBUG


@pytest.mark.unit
def test_json_output_carries_bound_context(restore_logging, capsys):
    configure_logging(level="INFO", json_output=True)

    with log_context(source="a.dat"):
        get_logger("svs.test").info("file_processed", index=1)
    get_logger("svs.test").info("run_finished")

    first, second = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
    assert first["event"] == "file_processed"
    assert first["source"] == "a.dat"
    assert first["index"] == 1
    assert first["level"] == "info"
    assert "source" not in second


@pytest.mark.unit
def test_log_context_restores_outer_binding(restore_logging):
    with log_context(source="outer.dat"):
        with log_context(source="inner.dat", index=3):
            assert structlog.contextvars.get_contextvars() == {
                "source": "inner.dat",
                "index": 3,
            }
        assert structlog.contextvars.get_contextvars() == {"source": "outer.dat"}
    assert structlog.contextvars.get_contextvars() == {}
