"""Text buffers and spans the cleanup step rewrites in place."""

from __future__ import annotations

from contextlib import contextmanager
from functools import lru_cache
from typing import Dict, Iterator, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Span(BaseModel):
    """Half-open character range ``[start, end)`` inside a buffer."""

    model_config = ConfigDict(frozen=True)

    start: int = Field(ge=0)
    end: int = Field(ge=0)

    @model_validator(mode="after")
    def check_order(self) -> "Span":
        if self.end < self.start:
            raise ValueError(f"Span end {self.end} precedes start {self.start}")
        return self

    def __len__(self) -> int:
        return self.end - self.start


class TextBuffer:
    """Named, mutable text holder."""

    def __init__(self, text: str = "", name: str = "*tidy*"):
        self.name = name
        self._text = text

    @property
    def text(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    def __repr__(self) -> str:
        return f"TextBuffer(name={self.name!r}, length={len(self._text)})"

    def whole(self) -> Span:
        return Span(start=0, end=len(self._text))

    def _check(self, span: Span) -> None:
        if span.end > len(self._text):
            raise ValueError(
                f"Span {span.start}-{span.end} exceeds buffer {self.name!r} "
                f"of length {len(self._text)}"
            )

    def substring(self, span: Span) -> str:
        self._check(span)
        return self._text[span.start : span.end]

    def replace(self, span: Span, text: str) -> Span:
        """Replace ``span`` with ``text`` and return the span now covering it."""
        self._check(span)
        self._text = self._text[: span.start] + text + self._text[span.end :]
        return Span(start=span.start, end=span.start + len(text))

    def erase(self) -> None:
        self._text = ""


@contextmanager
def transient_buffer(text: str, name: str = "*tidy-temp*") -> Iterator[TextBuffer]:
    """Yield a scratch buffer holding ``text``; it is erased on exit."""
    buffer = TextBuffer(text, name=name)
    try:
        yield buffer
    finally:
        buffer.erase()


class RetainedBuffers:
    """Buffers kept around after a debug fetch for later inspection."""

    def __init__(self) -> None:
        self._buffers: Dict[str, TextBuffer] = {}

    def retain(self, buffer: TextBuffer) -> None:
        self._buffers[buffer.name] = buffer

    def get(self, name: str) -> Optional[TextBuffer]:
        return self._buffers.get(name)

    def names(self) -> List[str]:
        return list(self._buffers)

    def discard(self, name: str) -> None:
        self._buffers.pop(name, None)

    def __contains__(self, name: object) -> bool:
        return name in self._buffers

    def __len__(self) -> int:
        return len(self._buffers)


@lru_cache(maxsize=1)
def get_retained_buffers() -> RetainedBuffers:
    """Return the session-wide registry of retained buffers."""
    return RetainedBuffers()
