# lexer.py - docseek tokenizer
# Splits text into NUMBER / WORD / PUNCT tokens given as offsets into the source.

from enum import Enum
from typing import NamedTuple, Optional


class TokenKind(Enum):
    NUMBER = "number"
    WORD   = "word"
    PUNCT  = "punct"


class Token(NamedTuple):
    kind: TokenKind
    start: int
    end: int

    def text(self, source: str) -> str:
        return source[self.start:self.end]


class Lexer:
    """Lazy tokenizer over one document.

    The only state is the source and the position of what is left of it, so a
    fresh Lexer per document starts over cleanly.
    """

    def __init__(self, source: str):
        self.source = source
        self.pos = 0

    def _skip_whitespace(self):
        while self.pos < len(self.source) and self.source[self.pos].isspace():
            self.pos += 1

    def _chop_while(self, predicate) -> int:
        end = self.pos
        while end < len(self.source) and predicate(self.source[end]):
            end += 1
        return end

    def next_token(self) -> Optional[Token]:
        self._skip_whitespace()
        if self.pos >= len(self.source):
            return None

        start = self.pos
        ch = self.source[start]
        if ch.isnumeric():
            kind, end = TokenKind.NUMBER, self._chop_while(str.isnumeric)
        elif ch.isalpha():
            kind, end = TokenKind.WORD, self._chop_while(str.isalnum)
        else:
            kind, end = TokenKind.PUNCT, start + 1

        self.pos = end
        return Token(kind, start, end)

    def __iter__(self):
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token


def normalize(text: str) -> str:
    """Fold a token into the term used as index key."""
    return text.upper()


def tokenize(text: str) -> list:
    return [normalize(token.text(text)) for token in Lexer(text)]
