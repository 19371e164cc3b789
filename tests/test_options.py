import itertools

import pytest

from tidy_dom.config import Flavor, Settings
from tidy_dom.options import build_options


@pytest.mark.parametrize(
    "flavor,indent,wrap_column",
    list(itertools.product(["xhtml", "html"], [True, False], [72, None])),
)
def test_quiet_flag_present_once(flavor, indent, wrap_column):
    settings = Settings(
        tool_path="tidy", flavor=flavor, indent=indent, wrap_column=wrap_column
    )
    options = build_options(settings)
    assert options.count("-quiet") == 1
    assert ("-indent" in options) is indent
    assert ("-wrap" in options) is (wrap_column is not None)


def test_xhtml_flags():
    options = build_options(Settings(tool_path="tidy", flavor=Flavor.XHTML))
    assert "-numeric" in options
    assert "-asxhtml" in options
    assert "-omit" not in options
    assert "-ashtml" not in options


def test_html_flags():
    options = build_options(Settings(tool_path="tidy", flavor="html"))
    assert "-omit" in options
    assert "-ashtml" in options
    assert "-numeric" not in options
    assert "-asxhtml" not in options


def test_wrap_column_carries_value():
    options = build_options(Settings(tool_path="tidy", wrap_column=72))
    index = options.index("-wrap")
    assert options[index + 1] == "72"


def test_wrap_disabled():
    options = build_options(Settings(tool_path="tidy", wrap_column="disabled"))
    assert "-wrap" not in options


def test_full_option_order():
    settings = Settings(tool_path="tidy", flavor="xhtml", indent=True, wrap_column=72)
    assert build_options(settings) == [
        "-quiet",
        "-wrap",
        "72",
        "-indent",
        "-numeric",
        "-asxhtml",
    ]
