"""Fixtures shared by the testing subsystem tests."""

from __future__ import annotations

import io
from collections.abc import Callable
from pathlib import Path

import pytest

from testplane.config.models import ProjectConfig
from testplane.testing.models import Context

from tests.testing.fakes import RecordingEnvironment


@pytest.fixture
def make_context(tmp_path: Path) -> Callable[..., Context]:
    def _make(name: str = "proj", **config: object) -> Context:
        root = tmp_path / name
        root.mkdir(exist_ok=True)
        return Context(config=ProjectConfig(name=name, root_dir=str(root), **config))

    return _make


@pytest.fixture
def environment(tmp_path: Path) -> RecordingEnvironment:
    cwd = tmp_path / "cwd"
    cwd.mkdir()
    return RecordingEnvironment(cwd)


@pytest.fixture
def output_stream() -> io.StringIO:
    return io.StringIO()
