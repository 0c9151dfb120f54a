"""Tests for logging setup and source tagging."""

from __future__ import annotations

import logging
import sys

import pytest

from kicad_import.logging_config import (
    DEFAULT_SOURCE,
    create_logger,
    get_source,
    log_source,
    setup_logging,
)


@pytest.fixture()
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestLogSource:
    def test_default_is_none(self) -> None:
        assert get_source() is None

    def test_context_sets_and_resets(self) -> None:
        with log_source("a.kicad_pcb"):
            assert get_source() == "a.kicad_pcb"
            with log_source("b.kicad_pcb"):
                assert get_source() == "b.kicad_pcb"
            assert get_source() == "a.kicad_pcb"
        assert get_source() is None

    def test_reset_on_exception(self) -> None:
        with pytest.raises(ValueError):
            with log_source("a.kicad_pcb"):
                raise ValueError("boom")
        assert get_source() is None

    def test_adapter_tags_records(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = create_logger("kicad_import.test")
        with caplog.at_level(logging.INFO, logger="kicad_import"):
            logger.info("outside")
            with log_source("x.kicad_pcb"):
                logger.info("inside")
        sources = [r.source for r in caplog.records]
        assert sources == [DEFAULT_SOURCE, "x.kicad_pcb"]


class TestSetupLogging:
    def test_level_from_env(
        self, monkeypatch: pytest.MonkeyPatch, restore_root_logger: logging.Logger
    ) -> None:
        monkeypatch.setenv("LOGGING_LEVEL", "WARNING")
        root = setup_logging()
        assert root.level == logging.WARNING

    def test_single_stderr_handler(self, restore_root_logger: logging.Logger) -> None:
        root = setup_logging("DEBUG")
        setup_logging("DEBUG")
        assert len(root.handlers) == 1
        handler = root.handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stderr

    def test_plain_logger_records_get_source(self, restore_root_logger: logging.Logger) -> None:
        root = setup_logging("INFO", format_string="%(source)s|%(message)s")
        record = logging.LogRecord("plain", logging.INFO, __file__, 1, "hi", None, None)
        handler = root.handlers[0]
        with log_source("y.kicad_pcb"):
            assert handler.filter(record)
        assert handler.format(record) == "y.kicad_pcb|hi"
