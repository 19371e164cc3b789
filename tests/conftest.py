import shutil
import stat
import sys

import pytest

from tidy_dom.config import Settings
from tidy_dom.diagnostics import DiagnosticsLog

FAKE_TIDY = """#!{python}
import os
import sys

data = sys.stdin.read()
mode = os.environ.get("FAKE_TIDY_MODE", "echo")
sys.stderr.write("args: " + " ".join(sys.argv[1:]) + "\\n")
if mode == "wrap":
    data = "<div>" + data + "</div>"
elif mode == "empty":
    data = ""
sys.stdout.write(data)
sys.exit(1 if mode in ("warn", "empty") else 0)
"""


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "requires_tidy: test runs the real HTML Tidy executable"
    )


def pytest_collection_modifyitems(config, items):
    if shutil.which("tidy") is not None:
        return
    skip_tidy = pytest.mark.skip(reason="HTML Tidy is not installed")
    for item in items:
        if "requires_tidy" in item.keywords:
            item.add_marker(skip_tidy)


@pytest.fixture()
def fake_tidy(tmp_path, monkeypatch):
    monkeypatch.delenv("FAKE_TIDY_MODE", raising=False)
    path = tmp_path / "fake-tidy"
    path.write_text(FAKE_TIDY.format(python=sys.executable), encoding="utf-8")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture()
def test_settings(fake_tidy):
    return Settings(tool_path=str(fake_tidy), wrap_column=72)


@pytest.fixture()
def tidy_settings():
    return Settings(tool_path=shutil.which("tidy"))


@pytest.fixture()
def diagnostics():
    return DiagnosticsLog()
