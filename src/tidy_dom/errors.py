"""Base exception shared by the pipeline stages."""


class TidyDomError(RuntimeError):
    """Base tidy-dom exception."""
