"""Runtime configuration for the tidy pipeline."""

import shutil
from enum import Enum
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_WRAP_COLUMN = 70
DISABLED_VALUES = {"", "none", "off", "disabled", "nil"}


class Flavor(str, Enum):
    """Markup flavor tidy is asked to emit.

    Only ``XHTML`` output is well-formed XML. ``HTML`` output omits optional
    end tags and leaves void elements unclosed, so parsing it fails.
    """

    XHTML = "xhtml"
    HTML = "html"


def discover_tool_path() -> Optional[str]:
    """Locate the tidy executable on PATH."""
    return shutil.which("tidy")


class Settings(BaseSettings):
    """Options shared by every cleanup, parse and fetch call."""

    tool_path: Optional[str] = Field(default_factory=lambda: discover_tool_path())
    flavor: Flavor = Flavor.XHTML
    indent: bool = True
    wrap_column: Optional[int] = DEFAULT_WRAP_COLUMN
    strip_namespaces: bool = True
    debug: bool = False
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="TIDY_DOM_",
        extra="ignore",
    )

    @field_validator("flavor", mode="before")
    @classmethod
    def validate_flavor(cls, value):
        if isinstance(value, Flavor):
            return value
        normalized = str(value).strip().lower()
        allowed = {flavor.value for flavor in Flavor}
        if normalized not in allowed:
            raise ValueError(f"Unsupported flavor '{value}'. Allowed: {sorted(allowed)}")
        return normalized

    @field_validator("wrap_column", mode="before")
    @classmethod
    def validate_wrap_column(cls, value):
        if value is None:
            return None
        if isinstance(value, str) and value.strip().lower() in DISABLED_VALUES:
            return None
        return value

    @field_validator("wrap_column")
    @classmethod
    def check_wrap_positive(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value <= 0:
            raise ValueError("wrap_column must be a positive integer or disabled")
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the cached Settings instance."""
    return Settings()
