"""Test run orchestration: selection, discovery, ordering, execution."""

from testplane.testing.models import (
    AggregatedResult,
    Argv,
    Context,
    SearchResult,
    Test,
    TestFileResult,
    TestPathPattern,
    TestRunData,
)
from testplane.testing.run import RunCollaborators, RunHooks, run_tests
from testplane.testing.watcher import TestWatcher

__all__ = [
    "run_tests",
    "RunHooks",
    "RunCollaborators",
    "Argv",
    "Context",
    "Test",
    "TestPathPattern",
    "SearchResult",
    "TestRunData",
    "TestFileResult",
    "AggregatedResult",
    "TestWatcher",
]
