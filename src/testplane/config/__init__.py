"""Config module exports."""

from testplane.config.loader import TestplaneSettings, load_config
from testplane.config.models import (
    GlobalConfig,
    LoggingConfig,
    ProjectConfig,
    TestingConfig,
    TestplaneConfig,
)

__all__ = [
    "load_config",
    "TestplaneConfig",
    "TestplaneSettings",
    "GlobalConfig",
    "ProjectConfig",
    "LoggingConfig",
    "TestingConfig",
]
