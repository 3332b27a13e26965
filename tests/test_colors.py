import pytest

from splitshare.colors import Code


def test_red_escape_sequence():
    assert str(Code(31)) == "\033[31m"


def test_default_background_escape_sequence():
    assert str(Code(49)) == "\033[49m"


def test_blink_values():
    assert Code(5) is Code.BLINK
    assert Code(25) is Code.RST_BLINK


@pytest.mark.parametrize("value", [31, 32, 34, 39, 30, 41, 42, 44, 49, 5, 25])
def test_every_code_renders_as_sgr(value):
    rendered = str(Code(value))
    assert rendered.startswith("\033[")
    assert rendered.endswith("m")
    assert rendered[2:-1] == str(value)