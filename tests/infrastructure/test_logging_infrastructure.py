"""Tests for logging setup, timing and progress tracking."""

import logging
from pathlib import Path

import pytest

from signature_expander.infrastructure.config import Config
from signature_expander.infrastructure.logging import LoggerSetup, ProgressTracker, get_logger, log_timing
from signature_expander.infrastructure.logging.logger_setup import PACKAGE_LOGGER


@pytest.fixture
def logger_setup(tmp_path: Path):
    """Initialize logging into a temporary directory and tear it down afterwards."""
    LoggerSetup.shutdown()
    LoggerSetup.initialize(tmp_path / "logs", verbose=True)
    yield LoggerSetup
    LoggerSetup.shutdown()


class TestLoggerSetup:
    """Console and file handler installation."""

    @pytest.mark.unit
    def test_initialize_creates_log_file(self, logger_setup, tmp_path: Path) -> None:
        log_file = logger_setup.get_log_file_path()
        assert logger_setup.is_initialized()
        assert log_file is not None
        assert log_file.parent == tmp_path / "logs"
        assert log_file.name.startswith("signature_expander_")
        assert log_file.exists()

    @pytest.mark.unit
    def test_initialize_is_idempotent(self, logger_setup, tmp_path: Path) -> None:
        first = logger_setup.get_log_file_path()
        handlers = len(logging.getLogger(PACKAGE_LOGGER).handlers)
        logger_setup.initialize(tmp_path / "other", verbose=False)
        assert logger_setup.get_log_file_path() == first
        assert len(logging.getLogger(PACKAGE_LOGGER).handlers) == handlers

    @pytest.mark.unit
    def test_shutdown_resets_state(self, logger_setup) -> None:
        logger_setup.shutdown()
        assert not logger_setup.is_initialized()
        assert logger_setup.get_log_file_path() is None
        assert logging.getLogger(PACKAGE_LOGGER).handlers == []

    @pytest.mark.unit
    def test_root_logger_untouched(self, tmp_path: Path) -> None:
        LoggerSetup.shutdown()
        root_handlers = list(logging.getLogger().handlers)
        try:
            LoggerSetup.initialize(tmp_path, verbose=True)
            assert logging.getLogger().handlers == root_handlers
        finally:
            LoggerSetup.shutdown()

    @pytest.mark.unit
    def test_console_only(self) -> None:
        LoggerSetup.shutdown()
        try:
            LoggerSetup.initialize(None)
            assert LoggerSetup.get_log_file_path() is None
            assert len(logging.getLogger(PACKAGE_LOGGER).handlers) == 1
        finally:
            LoggerSetup.shutdown()

    @pytest.mark.unit
    def test_initialize_from_config(self, tmp_path: Path) -> None:
        LoggerSetup.shutdown()
        try:
            LoggerSetup.initialize_from_config(Config(log_dir=tmp_path / "configured"))
            assert LoggerSetup.get_log_file_path().parent == tmp_path / "configured"
        finally:
            LoggerSetup.shutdown()


class TestLogTiming:
    """The timing decorator."""

    @pytest.mark.unit
    def test_logs_completion(self, caplog) -> None:
        @log_timing
        def work() -> int:
            return 7

        with caplog.at_level(logging.DEBUG):
            assert work() == 7
        assert any("work completed in" in record.getMessage() for record in caplog.records)

    @pytest.mark.unit
    def test_logs_and_reraises_failure(self, caplog) -> None:
        @log_timing
        def broken() -> None:
            raise ValueError("bad input")

        with caplog.at_level(logging.DEBUG), pytest.raises(ValueError, match="bad input"):
            broken()
        assert any(record.levelno == logging.ERROR for record in caplog.records)

    @pytest.mark.unit
    def test_method_label_uses_template_prefix(self, caplog) -> None:
        class Expander:
            template_prefix = "rpc"

            @log_timing
            def expand(self) -> str:
                return "done"

        with caplog.at_level(logging.DEBUG):
            Expander().expand()
        assert any(record.getMessage().startswith("[rpc] ") for record in caplog.records)

    @pytest.mark.unit
    def test_preserves_metadata(self) -> None:
        @log_timing
        def documented() -> None:
            """Docstring."""

        assert documented.__name__ == "documented"
        assert documented.__doc__ == "Docstring."


class TestProgressTracker:
    """Batch progress counters."""

    @pytest.mark.unit
    def test_counts_declarations_and_parameters(self) -> None:
        tracker = ProgressTracker(get_logger("test"))
        with tracker.track_operation("batch"):
            assert tracker.get_current_context() == "batch"
            with tracker.track_declaration("Mix(a, b)"):
                tracker.count_parameters(2)
        assert tracker.declaration_count == 1
        assert tracker.parameter_count == 2
        assert tracker.failure_count == 0
        assert tracker.get_current_context() == "idle"

    @pytest.mark.unit
    def test_failure_is_counted_and_reraised(self) -> None:
        tracker = ProgressTracker(get_logger("test"))
        with pytest.raises(RuntimeError):
            with tracker.track_declaration("Mix(a"):
                raise RuntimeError("boom")
        assert tracker.failure_count == 1

    @pytest.mark.unit
    def test_nested_context(self) -> None:
        tracker = ProgressTracker(get_logger("test"))
        with tracker.track_operation("outer"), tracker.track_operation("inner"):
            assert tracker.get_current_context() == "outer -> inner"

    @pytest.mark.unit
    def test_summary_and_memory_logging(self, caplog) -> None:
        tracker = ProgressTracker(get_logger("test"))
        with caplog.at_level(logging.DEBUG, logger="test"):
            tracker.report_summary()
            tracker.log_memory_usage()
        messages = [record.getMessage() for record in caplog.records]
        assert any(message.startswith("Expansion complete") for message in messages)

