"""Unit tests for logging utilities."""

import json
import logging
from pathlib import Path

import pytest
from pyfakefs.fake_filesystem import FakeFilesystem

from appspec.config import LogFormat, LoggingConfig, LogLevel
from appspec.utils import create_logger, create_logger_from_config
from appspec.utils._logging import _log_level_from_string


@pytest.fixture(autouse=True)
def no_debug_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("APPSPEC_DEBUG", raising=False)


class TestLogLevelFromString:
    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            ("debug", logging.DEBUG),
            ("INFO", logging.INFO),
            ("warning", logging.WARNING),
            ("error", logging.ERROR),
            ("chatty", logging.WARNING),
        ],
    )
    def test_maps_names(self, level: str, expected: int) -> None:
        assert _log_level_from_string(level) == expected

    def test_debug_env_forces_debug(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APPSPEC_DEBUG", "1")

        assert _log_level_from_string("error") == logging.DEBUG
        assert _log_level_from_string("error", respect_env=False) == logging.ERROR


class TestCreateLogger:
    def test_creates_log_directory_if_missing(self, fs: FakeFilesystem) -> None:
        log_path = Path("/logs/appspec.log")
        assert not log_path.parent.exists()

        _ = create_logger(log_file=str(log_path))

        assert log_path.parent.exists()

    def test_json_format(self, fs: FakeFilesystem) -> None:
        logger = create_logger(level="info", log_format="json", log_file="/logs/a.log")

        logger.info("app_spec_saved", path="/app/app.yaml")

        record = json.loads(Path("/logs/a.log").read_text().splitlines()[0])
        assert record["event"] == "app_spec_saved"
        assert record["path"] == "/app/app.yaml"
        assert record["level"] == "info"
        assert "timestamp" in record

    def test_text_format(self, fs: FakeFilesystem) -> None:
        logger = create_logger(level="info", log_file="/logs/a.log")

        logger.info("app_spec_saved", key="value")

        content = Path("/logs/a.log").read_text()
        assert "app_spec_saved" in content
        assert "key=value" in content

    def test_filters_below_level(self, fs: FakeFilesystem) -> None:
        logger = create_logger(level="error", log_file="/logs/a.log")

        logger.debug("debug_level_message")
        logger.error("error_level_message")

        content = Path("/logs/a.log").read_text()
        assert "debug_level_message" not in content
        assert "error_level_message" in content

    def test_logs_to_stderr_without_file(self, capsys: pytest.CaptureFixture[str]) -> None:
        logger = create_logger(level="warning")

        logger.warning("app_spec_load_failed")

        assert "app_spec_load_failed" in capsys.readouterr().err


class TestCreateLoggerFromConfig:
    def test_uses_config_values(self, fs: FakeFilesystem) -> None:
        config = LoggingConfig(
            level=LogLevel.DEBUG, format=LogFormat.JSON, file="/logs/cfg.log"
        )

        logger = create_logger_from_config(config)
        logger.debug("app_spec_read")

        record = json.loads(Path("/logs/cfg.log").read_text())
        assert record["event"] == "app_spec_read"
