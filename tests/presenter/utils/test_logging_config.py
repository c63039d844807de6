"""
Tests for logging configuration, step timings and the progress indicator.
"""

import io
import logging
import sys
from unittest.mock import patch

import pytest

from presenter.utils.logging_config import LoggingConfig, ProgressIndicator, mask_value


class TestConfigureLogging:

    @pytest.mark.parametrize("level,expected", [
        ("debug", logging.DEBUG),
        ("INFO", logging.INFO),
        ("warning", logging.WARNING),
        ("error", logging.ERROR),
        ("verbose", logging.INFO),
    ])
    def test_root_level(self, level, expected):
        LoggingConfig().configure_logging(level=level)

        root_logger = logging.getLogger()
        assert root_logger.level == expected
        console = [h for h in root_logger.handlers if isinstance(h, logging.StreamHandler)]
        assert len(console) == 1
        assert console[0].stream is sys.stderr

    def test_configured_once_without_force(self):
        config = LoggingConfig()
        config.configure_logging(level="error")
        config.configure_logging(level="debug")

        assert logging.getLogger().level == logging.ERROR

        config.configure_logging(level="debug", force=True)
        assert logging.getLogger().level == logging.DEBUG

    def test_debug_format_includes_logger_name(self):
        config = LoggingConfig()
        config.configure_logging(level="debug", include_timestamps=False)

        record = logging.LogRecord("presenter.scraper", logging.DEBUG, __file__, 1, "Scraping", None, None)
        assert config._console_handler.format(record) == "presenter.scraper - DEBUG - Scraping"

    def test_log_file_written(self, tmp_path):
        log_file = tmp_path / "logs" / "presenter.log"
        config = LoggingConfig()
        config.configure_logging(level="info", log_file=str(log_file))

        logging.getLogger("presenter.test").info("Share link ready")
        config._log_file_handler.close()

        assert "INFO - Share link ready" in log_file.read_text(encoding="utf-8")


class TestTimingsAndDetails:

    def test_timed_operation_reports_duration(self):
        config = LoggingConfig()

        with patch.object(config, "log_operation_timing") as log_timing:
            with config.timed_operation("Scrape webpage"):
                pass

        operation, duration = log_timing.call_args[0]
        assert operation == "Scrape webpage"
        assert duration >= 0

    def test_timed_operation_skips_timing_on_error(self):
        config = LoggingConfig()

        with patch.object(config, "log_operation_timing") as log_timing:
            with pytest.raises(RuntimeError):
                with config.timed_operation("Scrape webpage"):
                    raise RuntimeError("boom")

        log_timing.assert_not_called()

    @pytest.mark.parametrize("key,value,expected", [
        ("alai_password", "hunter2", "***MASKED***"),
        ("FIRECRAWL_API_KEY", "fc-123", "***MASKED***"),
        ("access_token", "", None),
        ("provider", "cloud-gemini", "cloud-gemini"),
        ("use_llm", True, True),
    ])
    def test_mask_value(self, key, value, expected):
        assert mask_value(key, value) == expected


class TestProgressIndicator:

    def test_update_with_total(self):
        stream = io.StringIO()
        progress = ProgressIndicator("Building slides", total_steps=4, stream=stream)

        progress.update(message="Slide 1")
        progress.update(step=2)

        output = stream.getvalue()
        assert "Slide 1 [#####---------------] 25.0% (1/4)" in output
        assert "Building slides [##########----------] 50.0% (2/4)" in output

    def test_update_without_total(self):
        stream = io.StringIO()
        progress = ProgressIndicator("Building slides", stream=stream)

        progress.update()
        progress.finish()

        output = stream.getvalue()
        assert "Building slides Step 1" in output
        assert "Building slides completed [OK]" in output

    def test_progress_context_reports_failure(self, capsys):
        with pytest.raises(ValueError):
            with LoggingConfig().progress_context("Building slides", 2) as progress:
                progress.update()
                raise ValueError("slide rejected")

        assert "Building slides failed: slide rejected" in capsys.readouterr().err
