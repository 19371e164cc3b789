"""Append-only sink for tidy's stderr output."""

from __future__ import annotations

from functools import lru_cache
from typing import List, Tuple


class DiagnosticsLog:
    """Accumulates tool warnings across invocations."""

    def __init__(self) -> None:
        self._entries: List[str] = []

    def append(self, text: str) -> None:
        if text:
            self._entries.append(text)

    @property
    def entries(self) -> Tuple[str, ...]:
        return tuple(self._entries)

    @property
    def text(self) -> str:
        return "".join(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


@lru_cache(maxsize=1)
def get_diagnostics() -> DiagnosticsLog:
    """Return the diagnostics log shared by the running session."""
    return DiagnosticsLog()
