"""Run HTML Tidy over text and buffer spans."""

from __future__ import annotations

import logging
import subprocess
from typing import List

from pydantic import BaseModel

from .buffers import Span, TextBuffer
from .config import Settings, get_settings
from .diagnostics import DiagnosticsLog, get_diagnostics
from .errors import TidyDomError
from .options import build_options

logger = logging.getLogger(__name__)


class ExecutionError(TidyDomError):
    """The cleanup tool could not be launched or produced nothing."""


class CleanupResult(BaseModel):
    """Output of a single tidy run."""

    text: str
    stderr: str = ""
    returncode: int = 0


def build_command(settings: Settings | None = None) -> List[str]:
    """Return the full argv used to invoke tidy."""
    settings = settings or get_settings()
    if not settings.tool_path:
        raise ExecutionError(
            "Could not locate the tidy executable; set TIDY_DOM_TOOL_PATH"
        )
    return [settings.tool_path, *build_options(settings)]


def run_tidy(
    text: str,
    settings: Settings | None = None,
    diagnostics: DiagnosticsLog | None = None,
) -> CleanupResult:
    """Feed ``text`` to tidy and return its cleaned output.

    Tidy exits 1 on warnings and 2 on errors while still writing a
    document, so the exit status only matters when stdout is empty.
    Whatever tidy writes to stderr is appended to ``diagnostics``.
    """
    settings = settings or get_settings()
    diagnostics = diagnostics if diagnostics is not None else get_diagnostics()
    command = build_command(settings)
    logger.debug("Running %s", " ".join(command))
    try:
        completed = subprocess.run(
            command,
            input=text,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except OSError as exc:
        raise ExecutionError(f"Failed to run {command[0]!r}: {exc}") from exc

    diagnostics.append(completed.stderr)
    logger.debug(
        "tidy exited with status %s (%d chars out, %d chars err)",
        completed.returncode,
        len(completed.stdout),
        len(completed.stderr),
    )
    if completed.returncode != 0 and not completed.stdout:
        message = completed.stderr.strip() or "no output"
        raise ExecutionError(
            f"tidy exited with status {completed.returncode}: {message}"
        )
    return CleanupResult(
        text=completed.stdout,
        stderr=completed.stderr,
        returncode=completed.returncode,
    )


def clean_region(
    buffer: TextBuffer,
    span: Span | None = None,
    settings: Settings | None = None,
    diagnostics: DiagnosticsLog | None = None,
) -> Span:
    """Replace ``span`` of ``buffer`` with tidy's output and return the new bounds."""
    if span is None:
        span = buffer.whole()
    result = run_tidy(buffer.substring(span), settings=settings, diagnostics=diagnostics)
    return buffer.replace(span, result.text)
