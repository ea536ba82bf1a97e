# tests/utilities/test_core_util.py
import pytest

from qif_codec.utilities.core_util import empty_to_none, is_null_or_whitespace, split_tag


@pytest.mark.parametrize("s, expected", [(None, True), ("", True), ("  \t", True), ("x", False)])
def test_is_null_or_whitespace(s, expected):
    assert is_null_or_whitespace(s) is expected


def test_empty_to_none():
    assert empty_to_none("") is None
    assert empty_to_none("Gifts") == "Gifts"


def test_split_tag_keeps_non_ascii_remainder_intact():
    # Arrange
    line = "PCafé Ünïcode"

    # Act
    code, value = split_tag(line)

    # Assert
    assert code == "P"
    assert value == "Café Ünïcode"


def test_split_tag_on_empty_line():
    assert split_tag("") == ("", "")


def test_split_tag_with_multibyte_tag():
    assert split_tag("éabc") == ("é", "abc")


@pytest.mark.parametrize(
    "line, expected",
    [
        ("P\u0301Vendor", ("P\u0301", "Vendor")),
        ("M\u0301\u0308x", ("M\u0301\u0308", "x")),
        ("\u2764\ufe0fLove", ("\u2764\ufe0f", "Love")),
        ("P\u00e9tanque", ("P", "\u00e9tanque")),
    ],
)
def test_split_tag_keeps_combining_marks_with_the_tag(line, expected):
    assert split_tag(line) == expected
