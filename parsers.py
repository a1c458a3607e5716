import dataclasses
from typing import List, Optional, Tuple

from charclass import CharClass
from grammar import Cursor, Token, TokenSink
import scanner

class InputTooComplex(RuntimeError):
    pass


@dataclasses.dataclass(frozen=True)
class Recognition:
    text: str
    valid: bool
    tokens: Tuple[Token, ...]

    @property
    def images(self) -> List[str]:
        return [token.image for token in self.tokens]

    def __bool__(self):
        return self.valid


class Recognizer:
    """Recursive descent recognizer for one input string.

    Each production returns True if it matched at the cursor, consuming what it
    matched and recording it in the token sink. Nothing is rolled back on
    failure, so the sink keeps every token consumed up to the mismatch.

    Without ``max_depth`` nesting is only bounded by the interpreter stack.
    """

    def __init__(self, source: str, max_depth: Optional[int] = None):
        self.cursor = Cursor(source)
        self.sink = TokenSink()
        self.max_depth = max_depth
        self.depth = 0

    def recognize(self) -> bool:
        return self.expression(self.cursor)

    # <expr> -> <term> { <addop> <term> }
    def expression(self, cursor: Cursor) -> bool:
        cursor.strip()
        if not self.term(cursor):
            return False
        cursor.strip()
        while cursor.peek(CharClass.ADDOP):
            self.sink.take(cursor, 1)
            cursor.strip()
            # empty parens after an addop
            if cursor.startswith("()"):
                self.sink.take(cursor, 1)
                self.sink.take(cursor, 1)
                return False
            if not cursor or not self.term(cursor):
                return False
            cursor.strip()
        # anything left over means the input is not <term> { <addop> <term> }
        return not cursor

    # <term> -> <factor> { <mulop> <factor> }
    def term(self, cursor: Cursor) -> bool:
        cursor.strip()
        if not cursor or not self.factor(cursor):
            return False
        cursor.strip()
        while cursor.peek(CharClass.MULOP):
            self.sink.take(cursor, 1)
            cursor.strip()
            if not cursor or not self.factor(cursor):
                return False
            cursor.strip()
        return True

    # <factor> -> <integer> | <float> | <id> | '(' <expr> ')' | [-] <factor>
    def factor(self, cursor: Cursor) -> bool:
        if self.max_depth is not None and self.depth >= self.max_depth:
            raise InputTooComplex(f"Nesting deeper than {self.max_depth} factors")
        self.depth += 1
        try:
            return self._factor(cursor)
        finally:
            self.depth -= 1

    def _factor(self, cursor: Cursor) -> bool:
        if not cursor:
            return False

        if cursor.peek(CharClass.DIGIT):
            end = scanner.scan_float(cursor.text)
            if end is None:
                self.sink.take(cursor, scanner.scan_integer(cursor.text))
            else:
                dot = cursor.text.index(".")
                self.sink.take(cursor, dot)
                self.sink.take(cursor, 1)
                self.sink.take(cursor, end - dot - 1)
            return True

        if cursor.peek(CharClass.LETTER):
            end = scanner.scan_identifier(cursor.text)
            if end is None:
                return False
            self.sink.take(cursor, end)
            return True

        if cursor.peek(CharClass.LPAREN):
            self.sink.take(cursor, 1)
            close = cursor.find_closing_paren()
            if close is None:
                return False
            if not self.expression(cursor.bounded(close)):
                return False
            cursor.resume_at(close)
            self.sink.take(cursor, 1)
            return True

        if cursor.peek(CharClass.MINUS):
            self.sink.take(cursor, 1)
            cursor.strip()
            return self.factor(cursor)

        return False


def recognize(text: str, max_depth: Optional[int] = None) -> Recognition:
    text = text.strip()
    recognizer = Recognizer(text, max_depth)
    try:
        valid = recognizer.recognize()
    except (InputTooComplex, RecursionError):
        valid = False
    return Recognition(text, valid, tuple(recognizer.sink))


class Evaluator:
    """Judges one expression at a time and remembers the tokens of the last one."""

    def __init__(self, max_depth: Optional[int] = None):
        self.max_depth = max_depth
        self.last = Recognition("", False, ())

    def evaluate(self, s: str) -> bool:
        self.last = recognize(s, self.max_depth)
        return self.last.valid

    @property
    def tokens(self) -> List[str]:
        return self.last.images

    def format_tokens(self) -> str:
        return "Tokens: " + ", ".join(self.tokens)
