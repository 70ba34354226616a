#!/usr/bin/env python3

"""Tests for logging infrastructure."""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from rbx_api_utils.infrastructure.logging import (
    LoggerSetup,
    ProgressTracker,
    get_logger,
    log_timing,
)


@pytest.fixture
def clean_logging() -> Iterator[None]:
    """Save and restore root handlers around LoggerSetup tests."""
    root_logger = logging.getLogger()
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level
    LoggerSetup.reset()
    yield
    LoggerSetup.reset()
    root_logger.handlers[:] = saved_handlers
    root_logger.setLevel(saved_level)


@pytest.mark.unit
def test_log_timing_logs_start_and_completion(caplog) -> None:
    """Test that log_timing reports timing at DEBUG level."""

    @log_timing
    def work(value: int) -> int:
        return value * 2

    with caplog.at_level(logging.DEBUG):
        assert work(21) == 42

    assert "Starting" in caplog.text
    assert "Completed" in caplog.text


@pytest.mark.unit
def test_log_timing_reraises_failures(caplog) -> None:
    """Test that log_timing logs and re-raises exceptions."""

    @log_timing
    def explode() -> None:
        raise ValueError("boom")

    with caplog.at_level(logging.DEBUG), pytest.raises(ValueError, match="boom"):
        explode()

    assert "Failed" in caplog.text


@pytest.mark.unit
def test_logger_setup_console_only(clean_logging) -> None:
    """Test initialization without a log directory."""
    LoggerSetup.initialize(None, verbose=True)

    assert LoggerSetup.is_initialized()
    assert LoggerSetup.get_log_file_path() is None
    assert len(logging.getLogger().handlers) == 1


@pytest.mark.unit
def test_logger_setup_with_file(clean_logging, tmp_path: Path) -> None:
    """Test initialization with a timestamped log file."""
    log_dir = tmp_path / "logs"
    LoggerSetup.initialize(log_dir)
    get_logger("rbx_api_utils.test").debug("written to file")

    log_file = LoggerSetup.get_log_file_path()
    assert log_file is not None
    assert log_file.parent == log_dir
    for handler in logging.getLogger().handlers:
        handler.flush()
    assert "written to file" in log_file.read_text(encoding="utf-8")

    # Second initialization is a no-op
    LoggerSetup.initialize(tmp_path / "other")
    assert LoggerSetup.get_log_file_path() == log_file


@pytest.mark.unit
def test_progress_tracker_operations(caplog) -> None:
    """Test nested operation tracking and summary."""
    tracker = ProgressTracker(get_logger("rbx_api_utils.test"))

    with caplog.at_level(logging.DEBUG):
        with tracker.track_operation("Loading"):
            with tracker.track_operation("Parsing"):
                assert tracker.get_current_context() == "Loading -> Parsing"
        tracker.report_summary(class_count=5, enum_count=2)

    assert tracker.get_current_context() == "idle"
    assert "Indexed 5 classes and 2 enums" in caplog.text


@pytest.mark.unit
def test_progress_tracker_failed_operation(caplog) -> None:
    """Test that failures are logged and re-raised."""
    tracker = ProgressTracker(get_logger("rbx_api_utils.test"))

    with caplog.at_level(logging.ERROR), pytest.raises(RuntimeError):
        with tracker.track_operation("Indexing"):
            raise RuntimeError("bad dump")

    assert "Failed operation: Indexing" in caplog.text
    assert tracker.get_current_context() == "idle"


@pytest.mark.unit
def test_progress_tracker_memory_usage() -> None:
    """Test memory reporting through psutil."""
    tracker = ProgressTracker(get_logger("rbx_api_utils.test"))
    assert tracker.log_memory_usage() > 0
