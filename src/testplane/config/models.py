"""Pydantic configuration models with env var support.

Two families of models live here:

1. Tool settings (``TestplaneConfig`` and its sections), loaded by
   ``load_config()`` from defaults, YAML files and environment variables.
2. Run-level configuration (``GlobalConfig`` and ``ProjectConfig``), resolved
   by the embedding host before a run starts. These are frozen: a run never
   mutates them, it replaces them wholesale via ``with_overrides()``.

Environment Variable Format:
    TESTPLANE__<SECTION>__<KEY>=<VALUE>

Examples:
    TESTPLANE__LOGGING__LEVEL=DEBUG
    TESTPLANE__TESTING__MAX_WORKERS=4
    TESTPLANE__TESTING__DEFAULT_TIMEOUT_SEC=120
"""

from pathlib import Path
from typing import Any, Literal, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DEFAULT_TEST_COMMAND: tuple[str, ...] = ("python", "-m", "pytest", "-q", "{path}")


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        TESTPLANE__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. Test output goes to the console, not the log.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class TestingConfig(BaseModel):
    """Defaults for the bundled runner and sequencer.

    Env vars:
        TESTPLANE__TESTING__MAX_WORKERS: Worker ceiling when argv sets none
        TESTPLANE__TESTING__DEFAULT_TIMEOUT_SEC: Per-file timeout
    """

    max_workers: int | None = Field(
        default=None,
        description="Worker ceiling. None derives it from the CPU count.",
    )
    default_timeout_sec: int = Field(
        default=300,
        description="Per-file timeout (5 min). "
        "RISK: Too low may kill slow integration tests.",
    )
    default_test_command: list[str] = Field(
        default_factory=lambda: list(DEFAULT_TEST_COMMAND),
        description="Command run once per test file. '{path}' is replaced by the file path.",
    )

    @field_validator("max_workers")
    @classmethod
    def validate_max_workers(cls, v: int | None) -> int | None:
        if v is not None and v < 1:
            raise ValueError(f"max_workers must be >= 1, got {v}")
        return v

    @field_validator("default_test_command")
    @classmethod
    def validate_test_command(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("default_test_command must not be empty")
        return v


class TestplaneConfig(BaseModel):
    """Root tool configuration for testplane.

    All settings can be configured via:
    1. Environment variables: TESTPLANE__SECTION__KEY
    2. YAML config files (repo or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    testing: TestingConfig = Field(default_factory=TestingConfig)


# =============================================================================
# Run-level configuration (frozen)
# =============================================================================


class _FrozenConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    def with_overrides(self, **patch: Any) -> Self:
        """Return a new config merging ``patch`` over this one.

        The receiver is left untouched; callers swap the whole object.
        """
        unknown = set(patch) - set(type(self).model_fields)
        if unknown:
            raise ValueError(f"Unknown config fields: {sorted(unknown)}")
        return self.model_copy(update=patch)


class GlobalConfig(_FrozenConfig):
    """Settings shared by every project in a run."""

    silent: bool | None = None
    verbose: bool | None = None
    watch: bool = False
    test_results_processor: str | None = None
    test_command: tuple[str, ...] = DEFAULT_TEST_COMMAND
    test_name_args: tuple[str, ...] = ("-k", "{test_name_pattern}")
    test_timeout_sec: int = 300
    max_workers: int | None = None

    @classmethod
    def from_settings(cls, settings: TestingConfig, **fields: Any) -> "GlobalConfig":
        """Seed a run's global config from the loaded tool settings."""
        seeded: dict[str, Any] = {
            "test_command": tuple(settings.default_test_command),
            "test_timeout_sec": settings.default_timeout_sec,
            "max_workers": settings.max_workers,
        }
        seeded.update(fields)
        return cls(**seeded)


class ProjectConfig(_FrozenConfig):
    """Settings of one project root.

    Field names double as the statistic keys reported by discovery, so the
    no-tests diagnostics can show the configured value next to each count.
    """

    name: str = "default"
    root_dir: str
    roots: tuple[str, ...] = Field(default=(), validate_default=True)
    test_match: tuple[str, ...] = ("**/test_*.py", "**/*_test.py")
    test_regex: str | None = None
    test_path_ignore_patterns: tuple[str, ...] = ()
    module_file_extensions: tuple[str, ...] = ("py",)
    cache_directory: str = Field(default=".testplane/cache", validate_default=True)

    @field_validator("roots", mode="after")
    @classmethod
    def default_roots(cls, v: tuple[str, ...], info: ValidationInfo) -> tuple[str, ...]:
        if v:
            return v
        root_dir = info.data.get("root_dir")
        return (root_dir,) if root_dir else v

    @field_validator("cache_directory", mode="after")
    @classmethod
    def anchor_cache_directory(cls, v: str, info: ValidationInfo) -> str:
        # Anchored once, so later root_dir replacements do not move the cache
        path = Path(v).expanduser()
        root_dir = info.data.get("root_dir")
        if not path.is_absolute() and root_dir:
            path = Path(root_dir) / path
        return str(path)
