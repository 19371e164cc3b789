"""Fetch a page over HTTP and parse it through tidy."""

from __future__ import annotations

import logging
from xml.etree import ElementTree

import httpx

from .buffers import TextBuffer, get_retained_buffers
from .config import Settings, get_settings
from .diagnostics import DiagnosticsLog
from .errors import TidyDomError
from .parsing import parse_buffer

logger = logging.getLogger(__name__)


class RetrievalError(TidyDomError):
    """Fetching a URL failed."""


def fetch_url_text(url: str, client: httpx.Client | None = None) -> str:
    """Return the body of a blocking GET request."""
    logger.debug("Fetching %s", url)
    try:
        if client is None:
            response = httpx.get(url, follow_redirects=True)
        else:
            response = client.get(url, follow_redirects=True)
        response.raise_for_status()
    except httpx.HTTPError as exc:
        raise RetrievalError(f"Failed to fetch {url}: {exc}") from exc
    return response.text


def fetch_and_parse(
    url: str,
    settings: Settings | None = None,
    diagnostics: DiagnosticsLog | None = None,
    client: httpx.Client | None = None,
) -> ElementTree.Element:
    """Fetch ``url``, tidy the body and return the parsed root element.

    With ``settings.debug`` the page buffer, by then holding tidy's output,
    is kept in the retained-buffer registry under the URL.
    """
    settings = settings or get_settings()
    buffer = TextBuffer(fetch_url_text(url, client=client), name=url)
    try:
        return parse_buffer(buffer, settings=settings, diagnostics=diagnostics)
    finally:
        if settings.debug:
            get_retained_buffers().retain(buffer)
        else:
            buffer.erase()
