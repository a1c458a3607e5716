import re

import pytest

from charclass import CharClass, belongs_to, peek


@pytest.mark.parametrize("ch, char_class", [
    ("0", CharClass.DIGIT),
    ("9", CharClass.DIGIT),
    ("a", CharClass.LETTER),
    ("Z", CharClass.LETTER),
    ("_", CharClass.LETTER),
    ("+", CharClass.ADDOP),
    ("-", CharClass.ADDOP),
    ("%", CharClass.MULOP),
    ("/", CharClass.MULOP),
    ("(", CharClass.LPAREN),
    ("-", CharClass.MINUS),
])
def test_members(ch, char_class):
    assert belongs_to(ch, char_class)


@pytest.mark.parametrize("ch, char_class", [
    ("a", CharClass.DIGIT),
    ("1", CharClass.LETTER),
    (".", CharClass.DIGIT),
    ("*", CharClass.ADDOP),
    ("+", CharClass.MULOP),
    (")", CharClass.LPAREN),
    ("+", CharClass.MINUS),
    ("", CharClass.DIGIT),
    ("12", CharClass.DIGIT),
    (" ", CharClass.LETTER),
])
def test_non_members(ch, char_class):
    assert not belongs_to(ch, char_class)


def test_peek_looks_at_first_character_only():
    assert peek("1abc", CharClass.DIGIT)
    assert not peek("a123", CharClass.DIGIT)
    assert not peek("", CharClass.LETTER)


@pytest.mark.parametrize("char_class", list(CharClass))
def test_regex_agrees_with_membership(char_class):
    pattern = re.compile(char_class.regex, re.IGNORECASE | re.ASCII)
    for ch in "09aZ_+-*/%().x \u017f\u0131\u0130\u212a":
        assert bool(pattern.fullmatch(ch)) == belongs_to(ch, char_class), ch


@pytest.mark.parametrize("ch", ["\u017f", "\u0131", "\u0130", "\u212a", "\u00e9"])
def test_non_ascii_letters_are_not_letters(ch):
    assert not belongs_to(ch, CharClass.LETTER)
