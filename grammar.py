import dataclasses
import json
from typing import Iterator, List, Optional

from charclass import CharClass, peek

EBNF = """
<expr>    -> <term> { <addop> <term> }
<term>    -> <factor> { <mulop> <factor> }
<factor>  -> <integer> | <float> | <id> | '(' <expr> ')' | [-] <factor>
<integer> -> <digit> { <digit> }
<float>   -> <integer> . <integer>
<id>      -> <letter> { <letter> | <digit> }
<letter>  -> A..Z | a..z | _
<digit>   -> 0..9
<addop>   -> + | -
<mulop>   -> * | / | %
"""


class TokenJSONEncoder(json.JSONEncoder):
    def default(self, o):
        if isinstance(o, Token):
            return o.image
        if dataclasses.is_dataclass(o):
            return {f.name: getattr(o, f.name) for f in dataclasses.fields(o)}
        return super().default(o)


@dataclasses.dataclass(frozen=True, order=True)
class Token:
    image: str
    # offset of the first character in the original input
    index: int

    def __str__(self):
        return self.image


@dataclasses.dataclass
class Cursor:
    """The unconsumed part of ``source``, as the half-open range [start, end).

    A cursor only ever shrinks. Parenthesized sub-expressions are matched on a
    bounded cursor sharing the same source, so the outer cursor is restored by
    moving its start to an absolute offset instead of rebuilding strings.
    """
    source: str
    start: int = 0
    end: Optional[int] = None

    def __post_init__(self):
        if self.end is None:
            self.end = len(self.source)
        if not 0 <= self.start <= self.end <= len(self.source):
            raise ValueError(f"Invalid cursor bounds [{self.start}, {self.end}) for {len(self.source)} characters")

    @property
    def text(self) -> str:
        return self.source[self.start:self.end]

    def __len__(self):
        return self.end - self.start

    def __bool__(self):
        return self.end > self.start

    def peek(self, char_class: CharClass) -> bool:
        return self.start < self.end and peek(self.source[self.start], char_class)

    def startswith(self, prefix: str) -> bool:
        return self.source.startswith(prefix, self.start, self.end)

    def strip(self):
        while self.start < self.end and self.source[self.start].isspace():
            self.start += 1
        while self.end > self.start and self.source[self.end - 1].isspace():
            self.end -= 1

    def advance(self, length: int):
        if not 0 <= length <= len(self):
            raise ValueError(f"Cannot consume {length} of {len(self)} remaining characters")
        self.start += length

    def find_closing_paren(self) -> Optional[int]:
        # called just after the opening paren has been consumed
        depth = 1
        for i in range(self.start, self.end):
            if self.source[i] == "(":
                depth += 1
            elif self.source[i] == ")":
                depth -= 1
            if depth == 0:
                return i
        return None

    def bounded(self, stop: int) -> "Cursor":
        return Cursor(self.source, self.start, stop)

    def resume_at(self, offset: int):
        if not self.start <= offset <= self.end:
            raise ValueError(f"Cannot resume at {offset} outside [{self.start}, {self.end}]")
        self.start = offset


class TokenSink:
    def __init__(self):
        self.tokens: List[Token] = []

    def take(self, cursor: Cursor, length: int) -> Token:
        """Consume the next ``length`` characters of the cursor as one token."""
        token = Token(cursor.source[cursor.start:cursor.start + length], cursor.start)
        cursor.advance(length)
        self.tokens.append(token)
        return token

    def images(self) -> List[str]:
        return [token.image for token in self.tokens]

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)

    def __len__(self):
        return len(self.tokens)
