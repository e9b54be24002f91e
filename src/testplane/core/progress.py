"""User-facing console output for test runs.

Design principles:
- All user-facing text goes through a Rich console, never through structlog
- The console wraps whatever stream the caller hands in (stdout, a pipe, a
  StringIO in tests), so color only appears on real terminals
- Grammatically correct counts (1 file vs 2 files)

Usage::

    from testplane.core.progress import console_for, pluralize

    console = console_for(output_stream)
    console.print(f"{pluralize(3, 'file')} checked.")
"""

from __future__ import annotations

import sys
from typing import TextIO

from rich.console import Console


def console_for(stream: TextIO | None = None) -> Console:
    """Build a console that writes to ``stream``.

    Soft wrapping is on so long paths are never hard-wrapped at the terminal
    width; highlighting is off so only explicit styles are applied.
    """
    return Console(
        file=stream if stream is not None else sys.stdout,
        highlight=False,
        soft_wrap=True,
        emoji=False,
    )


def pluralize(count: int, singular: str, plural: str | None = None) -> str:
    """Return grammatically correct singular/plural form.

    Args:
        count: The number of items
        singular: Singular form (e.g., "file")
        plural: Plural form (default: singular + "s")

    Returns:
        Formatted string like "1 file", "0 files" or "3 files"
    """
    if plural is None:
        plural = singular + "s"
    word = singular if count == 1 else plural
    return f"{count} {word}"
