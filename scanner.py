import re
from typing import Optional, Type

import sly

from charclass import CharClass


class AnchoredLexer(sly.Lexer):
    """Base for the literal lexers.

    Nothing is ignored, so the first token a subclass yields always starts at
    index 0. An unmatched character ends the scan instead of raising.
    """
    tokens = set()
    reflags = re.IGNORECASE | re.ASCII

    def error(self, t):
        self.index += len(t.value)


class IntegerLexer(AnchoredLexer):
    tokens = {INTEGER} # type: ignore
    INTEGER = CharClass.DIGIT.regex + "+"


class FloatLexer(AnchoredLexer):
    tokens = {FLOAT} # type: ignore
    FLOAT = CharClass.DIGIT.regex + r"+\." + CharClass.DIGIT.regex + "+"


class IdentifierLexer(AnchoredLexer):
    tokens = {ID} # type: ignore
    ID = CharClass.LETTER.regex + "(?:" + CharClass.LETTER.regex + "|" + CharClass.DIGIT.regex + ")*"


def leading_match(lexer_class: Type[AnchoredLexer], text: str) -> Optional[int]:
    """Length of the literal at the start of ``text``, or None."""
    for tok in lexer_class().tokenize(text):
        return len(tok.value)
    return None


def scan_integer(text: str) -> Optional[int]:
    return leading_match(IntegerLexer, text)


def scan_float(text: str) -> Optional[int]:
    # the end of the fractional digit run, i.e. the float's whole length
    return leading_match(FloatLexer, text)


def scan_identifier(text: str) -> Optional[int]:
    return leading_match(IdentifierLexer, text)


if __name__ == "__main__":
    for s in ("12.5+x", "42abc", "x1_y*2", ".5"):
        print(s, scan_float(s), scan_integer(s), scan_identifier(s))
