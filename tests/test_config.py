import pytest
from pydantic import ValidationError

from tidy_dom.config import DEFAULT_WRAP_COLUMN, Flavor, Settings, get_settings


def test_defaults(monkeypatch):
    monkeypatch.setattr("tidy_dom.config.discover_tool_path", lambda: "/usr/bin/tidy")
    settings = Settings()
    assert settings.tool_path == "/usr/bin/tidy"
    assert settings.flavor is Flavor.XHTML
    assert settings.indent is True
    assert settings.wrap_column == DEFAULT_WRAP_COLUMN
    assert settings.debug is False


def test_unknown_flavor_rejected():
    with pytest.raises(ValidationError):
        Settings(tool_path="tidy", flavor="xml")


def test_flavor_is_case_insensitive():
    assert Settings(tool_path="tidy", flavor="HTML").flavor is Flavor.HTML


@pytest.mark.parametrize("value", ["", "none", "Off", "disabled", "nil"])
def test_wrap_disabled_spellings(value):
    assert Settings(tool_path="tidy", wrap_column=value).wrap_column is None


def test_false_is_not_a_wrap_spelling():
    with pytest.raises(ValidationError):
        Settings(tool_path="tidy", wrap_column="false")


@pytest.mark.parametrize("value", [0, -4])
def test_non_positive_wrap_rejected(value):
    with pytest.raises(ValidationError):
        Settings(tool_path="tidy", wrap_column=value)


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("TIDY_DOM_TOOL_PATH", "/opt/tidy/bin/tidy")
    monkeypatch.setenv("TIDY_DOM_FLAVOR", "html")
    monkeypatch.setenv("TIDY_DOM_INDENT", "false")
    monkeypatch.setenv("TIDY_DOM_WRAP_COLUMN", "off")
    monkeypatch.setenv("TIDY_DOM_DEBUG", "true")
    settings = Settings()
    assert settings.tool_path == "/opt/tidy/bin/tidy"
    assert settings.flavor is Flavor.HTML
    assert settings.indent is False
    assert settings.wrap_column is None
    assert settings.debug is True


def test_get_settings_is_cached():
    get_settings.cache_clear()
    try:
        assert get_settings() is get_settings()
    finally:
        get_settings.cache_clear()
