"""Tests for config/models.py module.

Covers:
- LogOutputConfig model
- TestingConfig model
- GlobalConfig / ProjectConfig run-level models
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from testplane.config.models import (
    DEFAULT_TEST_COMMAND,
    GlobalConfig,
    LoggingConfig,
    LogOutputConfig,
    ProjectConfig,
    TestingConfig,
    TestplaneConfig,
)


class TestLogOutputConfig:
    """Tests for LogOutputConfig model."""

    def test_defaults(self) -> None:
        config = LogOutputConfig()
        assert config.format == "console"
        assert config.destination == "stderr"
        assert config.level is None

    def test_absolute_path_destination(self) -> None:
        config = LogOutputConfig(destination="/var/log/testplane.log")
        assert config.destination == "/var/log/testplane.log"

    def test_relative_path_fails(self) -> None:
        with pytest.raises(ValidationError, match="absolute path"):
            LogOutputConfig(destination="logs/testplane.log")


class TestTestingConfig:
    """Tests for TestingConfig model."""

    def test_defaults(self) -> None:
        config = TestingConfig()
        assert config.max_workers is None
        assert config.default_timeout_sec == 300
        assert tuple(config.default_test_command) == DEFAULT_TEST_COMMAND

    def test_rejects_zero_workers(self) -> None:
        with pytest.raises(ValidationError, match="max_workers"):
            TestingConfig(max_workers=0)

    def test_rejects_empty_command(self) -> None:
        with pytest.raises(ValidationError, match="must not be empty"):
            TestingConfig(default_test_command=[])


def test_root_config_sections() -> None:
    config = TestplaneConfig()
    assert isinstance(config.logging, LoggingConfig)
    assert config.logging.level == "WARNING"
    assert isinstance(config.testing, TestingConfig)


class TestGlobalConfig:
    """Frozen run-wide configuration."""

    def test_is_frozen(self) -> None:
        config = GlobalConfig()
        with pytest.raises(ValidationError):
            config.verbose = True  # type: ignore[misc]

    def test_with_overrides_returns_new_object(self) -> None:
        config = GlobalConfig(silent=False)

        updated = config.with_overrides(verbose=True)

        assert updated is not config
        assert updated.verbose is True
        assert updated.silent is False
        assert config.verbose is None

    def test_with_overrides_rejects_unknown_fields(self) -> None:
        with pytest.raises(ValueError, match="Unknown config fields"):
            GlobalConfig().with_overrides(colour=True)

    def test_from_settings_fields_win(self) -> None:
        settings = TestingConfig(default_timeout_sec=12, max_workers=3)

        config = GlobalConfig.from_settings(settings, max_workers=1)

        assert config.test_timeout_sec == 12
        assert config.max_workers == 1
        assert config.test_command == DEFAULT_TEST_COMMAND


class TestProjectConfig:
    """Per-project configuration."""

    def test_roots_default_to_root_dir(self, tmp_path: Path) -> None:
        config = ProjectConfig(root_dir=str(tmp_path))
        assert config.roots == (str(tmp_path),)

    def test_explicit_roots_kept(self, tmp_path: Path) -> None:
        src = str(tmp_path / "src")
        config = ProjectConfig(root_dir=str(tmp_path), roots=(src,))
        assert config.roots == (src,)

    def test_cache_directory_anchored_at_root(self, tmp_path: Path) -> None:
        config = ProjectConfig(root_dir=str(tmp_path))
        assert config.cache_directory == str(tmp_path / ".testplane" / "cache")

    def test_cache_directory_survives_root_dir_change(self, tmp_path: Path) -> None:
        config = ProjectConfig(root_dir=str(tmp_path))

        moved = config.with_overrides(root_dir="/elsewhere")

        assert moved.root_dir == "/elsewhere"
        assert moved.cache_directory == config.cache_directory
        assert moved.roots == config.roots

    def test_root_dir_required(self) -> None:
        with pytest.raises(ValidationError):
            ProjectConfig()  # type: ignore[call-arg]
