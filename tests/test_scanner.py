import pytest

from scanner import scan_float, scan_identifier, scan_integer


@pytest.mark.parametrize("text, expected", [
    ("7", 1),
    ("123", 3),
    ("42abc", 2),
    ("1.5", 1),
    ("12 34", 2),
    ("a1", None),
    ("-1", None),
    ("", None),
])
def test_scan_integer(text, expected):
    assert scan_integer(text) == expected


@pytest.mark.parametrize("text, expected", [
    ("1.5", 3),
    ("12.34+x", 5),
    ("3.14159", 7),
    ("1.5.3", 3),
    ("1.", None),
    ("1.x", None),
    (".5", None),
    ("1+2.5", None),
    ("12", None),
    ("a.5", None),
    ("", None),
])
def test_scan_float(text, expected):
    assert scan_float(text) == expected


@pytest.mark.parametrize("text, expected", [
    ("x", 1),
    ("x1_y", 4),
    ("_tmp+1", 4),
    ("CamelCase*2", 9),
    ("abc def", 3),
    ("a\u017f", 1),
    ("a\u0131b", 1),
    ("\u212ax", None),
    ("1x", None),
    ("+x", None),
    ("", None),
])
def test_scan_identifier(text, expected):
    assert scan_identifier(text) == expected


def test_no_match_is_not_zero():
    assert scan_integer("x") is None
    assert scan_integer("x") != 0
