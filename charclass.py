import enum
import re


class CharClass(enum.Enum):
    DIGIT = "0123456789"
    # matched case-insensitively
    LETTER = "abcdefghijklmnopqrstuvwxyz_"
    ADDOP = "+-"
    MULOP = "*/%"
    LPAREN = "("
    MINUS = "-"

    @property
    def regex(self) -> str:
        return "[" + re.escape(self.value) + "]"


def belongs_to(ch: str, char_class: CharClass) -> bool:
    if len(ch) != 1:
        return False
    if char_class is CharClass.LETTER and ch.isascii():
        ch = ch.lower()
    return ch in char_class.value


def peek(text: str, char_class: CharClass) -> bool:
    return bool(text) and belongs_to(text[0], char_class)
