"""Translate settings into tidy command-line flags."""

from __future__ import annotations

from typing import List

from .config import Flavor, Settings, get_settings

FLAVOR_FLAGS = {
    Flavor.XHTML: ["-numeric", "-asxhtml"],
    Flavor.HTML: ["-omit", "-ashtml"],
}


def build_options(settings: Settings | None = None) -> List[str]:
    """Return the tidy flags for the current settings, tool path excluded."""
    settings = settings or get_settings()
    options = ["-quiet"]
    if settings.wrap_column is not None:
        options.extend(["-wrap", str(settings.wrap_column)])
    if settings.indent:
        options.append("-indent")
    options.extend(FLAVOR_FLAGS.get(settings.flavor, []))
    return options
