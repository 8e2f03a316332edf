"""Unit tests for logging utilities."""

import json
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest
from pyfakefs.fake_filesystem import FakeFilesystem

from gitprompt.utils import create_null_logger, create_prompt_logger
from gitprompt.utils._logging import (
    DEFAULT_BACKUP_COUNT,
    DEFAULT_MAX_BYTES,
    _create_logger,  # pyright: ignore[reportPrivateUsage]
    _log_level_from_string,  # pyright: ignore[reportPrivateUsage]
)


class TestLogLevelFromString:
    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            ("debug", logging.DEBUG),
            ("INFO", logging.INFO),
            ("warning", logging.WARNING),
            ("error", logging.ERROR),
        ],
    )
    def test_known_levels(self, level: str, expected: int) -> None:
        assert _log_level_from_string(level) == expected

    def test_unknown_level_defaults_to_warning(self) -> None:
        assert _log_level_from_string("chatty") == logging.WARNING

    def test_debug_env_overrides_when_respected(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("GITPROMPT_DEBUG", "1")
        assert _log_level_from_string("error", respect_env=True) == logging.DEBUG
        assert _log_level_from_string("error") == logging.ERROR


class TestCreateLogger:
    def test_creates_log_directory_if_missing(self, fs: FakeFilesystem) -> None:
        log_path = Path("/logs/test.log")
        assert not log_path.parent.exists()

        _ = _create_logger(str(log_path), log_level=logging.INFO)

        assert log_path.parent.exists()

    def test_json_format(self, fs: FakeFilesystem) -> None:
        logger = _create_logger("/logs/test.log", log_level=logging.INFO)

        logger.info("git_query", args=["status"], exit_code=0)

        entry = json.loads(Path("/logs/test.log").read_text().splitlines()[-1])
        assert entry["event"] == "git_query"
        assert entry["args"] == ["status"]
        assert entry["level"] == "info"
        assert "timestamp" in entry

    def test_text_format(self, fs: FakeFilesystem) -> None:
        logger = _create_logger(
            "/logs/test.log", log_level=logging.INFO, log_format="text"
        )

        logger.info("test_event", key="value")

        log_content = Path("/logs/test.log").read_text()
        assert "test_event" in log_content
        assert "key=value" in log_content

    def test_filters_below_level(self, fs: FakeFilesystem) -> None:
        logger = _create_logger("/logs/test.log", log_level=logging.WARNING)

        logger.debug("hidden")
        logger.warning("shown")

        log_content = Path("/logs/test.log").read_text()
        assert "hidden" not in log_content
        assert "shown" in log_content

    def test_uses_rotating_handler(self, fs: FakeFilesystem) -> None:
        _ = _create_logger("/logs/rotating.log", log_level=logging.INFO)

        stdlib_logger = logging.getLogger("gitprompt.rotating")
        handlers = [
            h for h in stdlib_logger.handlers if isinstance(h, RotatingFileHandler)
        ]
        assert len(handlers) == 1
        assert handlers[0].maxBytes == DEFAULT_MAX_BYTES
        assert handlers[0].backupCount == DEFAULT_BACKUP_COUNT
        assert stdlib_logger.propagate is False


class TestCreatePromptLogger:
    def test_writes_to_given_file(self, fs: FakeFilesystem) -> None:
        logger = create_prompt_logger(level="info", log_file="/state/prompt.log")

        logger.info("status_rendered", state="Normal")

        assert "status_rendered" in Path("/state/prompt.log").read_text()

    def test_binds_command(self, fs: FakeFilesystem) -> None:
        logger = create_prompt_logger(
            level="info", log_file="/state/prompt.log", command="status"
        )

        logger.info("status_rendered")

        entry = json.loads(Path("/state/prompt.log").read_text().splitlines()[-1])
        assert entry["command"] == "status"


class TestCreateNullLogger:
    def test_discards_everything(self) -> None:
        logger = create_null_logger()

        # Must not raise or write anywhere
        logger.debug("x")
        logger.error("y", detail=1)
