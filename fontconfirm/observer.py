"""
Verbose diagnostics for the fontconfirm CLI.

The scanner and the extractor accept an optional ``observer`` callable,
invoked as ``observer(event, **fields)``. Events emitted:

- ``directory_skipped``: ``directory``, ``reason``
- ``scan_complete``: ``count``, ``directories``
- ``parse_failed``: ``path``, ``error``
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Any, TextIO

Observer = Callable[..., None]


def notify(observer: Observer | None, event: str, **fields: Any) -> None:
    """Forward an event to ``observer`` if one is set."""
    if observer is not None:
        observer(event, **fields)


class VerbosePrinter:
    """Observer printing one ``[event] key=value ...`` line per event."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream

    def __call__(self, event: str, **fields: Any) -> None:
        details = " ".join(f"{key}={value}" for key, value in fields.items())
        print(f"[{event}] {details}".rstrip(), file=self.stream or sys.stderr)
