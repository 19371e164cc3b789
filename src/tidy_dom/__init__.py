"""Clean HTML with tidy and parse the result into an XML element tree."""

from .buffers import Span, TextBuffer, get_retained_buffers, transient_buffer
from .cleanup import CleanupResult, ExecutionError, build_command, clean_region, run_tidy
from .config import Flavor, Settings, get_settings
from .diagnostics import DiagnosticsLog, get_diagnostics
from .errors import TidyDomError
from .options import build_options
from .parsing import ParseError, parse_buffer, parse_region, parse_string, parse_xml
from .retrieval import RetrievalError, fetch_and_parse, fetch_url_text

__all__ = [
    "Settings",
    "Flavor",
    "get_settings",
    "Span",
    "TextBuffer",
    "transient_buffer",
    "get_retained_buffers",
    "DiagnosticsLog",
    "get_diagnostics",
    "build_options",
    "build_command",
    "CleanupResult",
    "run_tidy",
    "clean_region",
    "parse_xml",
    "parse_region",
    "parse_buffer",
    "parse_string",
    "fetch_url_text",
    "fetch_and_parse",
    "TidyDomError",
    "ExecutionError",
    "ParseError",
    "RetrievalError",
]
