"""
Token recognizers.

Each recognizer answers one question: does a token of my family start at
this offset, and if so how many bytes does it cover? The scanner tries
them in a fixed priority order and accepts the first answer, so the order
returned by build_recognizers() is the whole of the conflict resolution
(e.g. '==' must be tried before '=').

Author: xwest
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .config import LexerConfig, OverflowPolicy, BangPolicy, INT32_MAX, INT32_MIN
from .tokens import (
    TokenType, DOUBLE_CHAR_TOKENS, SINGLE_CHAR_TOKENS, BOOLEAN_LITERALS
)


@dataclass(frozen=True)
class RecognizerMatch:
    """A successful recognition: how much to consume and what to emit."""
    length: int
    type: TokenType
    lexeme: bytes
    value: Any = None


class Recognizer:
    """Base class for a single token family."""

    name = "recognizer"

    def match(self, buffer: bytes, offset: int) -> Optional[RecognizerMatch]:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class PatternRecognizer(Recognizer):
    """Maximal-munch recognizer driven by a compiled bytes regex."""

    def __init__(self, name: str, pattern: re.Pattern, token_type: TokenType):
        self.name = name
        self.pattern = pattern
        self.token_type = token_type

    def match(self, buffer: bytes, offset: int) -> Optional[RecognizerMatch]:
        m = self.pattern.match(buffer, offset)
        if m is None:
            return None
        lexeme = m.group(0)
        return RecognizerMatch(len(lexeme), self.token_type, lexeme, self.convert(lexeme))

    def convert(self, lexeme: bytes) -> Any:
        """Decode the payload of a matched lexeme; None by default."""
        return None


class NumberOverflow(OverflowError):
    """A decimal literal outside the signed 32-bit range."""

    def __init__(self, lexeme: bytes):
        super().__init__(f"{lexeme.decode('ascii')} does not fit in 32 bits")
        self.lexeme = lexeme


def decode_decimal(digits: bytes, policy: OverflowPolicy = OverflowPolicy.ERROR) -> int:
    """
    Interpret ASCII digits as a base-10 integer in the signed 32-bit range.

    Raises:
        NumberOverflow: If the value exceeds INT32_MAX under OverflowPolicy.ERROR
    """
    # value stays below 2**36, so each step is constant time
    value = 0
    for digit in digits:
        value = value * 10 + (digit - 0x30)
        if value > INT32_MAX:
            if policy is OverflowPolicy.ERROR:
                raise NumberOverflow(digits)
            if policy is OverflowPolicy.SATURATE:
                return INT32_MAX
            value %= 2 ** 32

    if value > INT32_MAX:
        # WRAP: map the unsigned residue into the signed range
        value -= 2 ** 32
    return value


class NumberRecognizer(PatternRecognizer):
    """Unsigned decimal integer literals: [0-9]+"""

    def __init__(self, overflow: OverflowPolicy = OverflowPolicy.ERROR):
        super().__init__("number", re.compile(rb"[0-9]+"), TokenType.NUMBER)
        self.overflow = overflow

    def convert(self, lexeme: bytes) -> int:
        return decode_decimal(lexeme, self.overflow)


class WhitespaceRecognizer(PatternRecognizer):
    """Runs of ASCII whitespace, newlines included"""

    def __init__(self):
        super().__init__("whitespace", re.compile(rb"\s+"), TokenType.WHITESPACE)


class LiteralRecognizer(Recognizer):
    """
    Exact byte-sequence recognizer.

    The table is tried in insertion order; the first entry whose bytes
    appear at the offset wins.
    """

    def __init__(self, name: str, table: Dict[bytes, Tuple[TokenType, Any]]):
        self.name = name
        self.table = dict(table)

    def match(self, buffer: bytes, offset: int) -> Optional[RecognizerMatch]:
        for lexeme, (token_type, value) in self.table.items():
            if buffer.startswith(lexeme, offset):
                return RecognizerMatch(len(lexeme), token_type, lexeme, value)
        return None


def double_char_recognizer() -> LiteralRecognizer:
    return LiteralRecognizer(
        "double-char",
        {lexeme: (token_type, None) for lexeme, token_type in DOUBLE_CHAR_TOKENS.items()}
    )


def single_char_recognizer(bang_policy: BangPolicy = BangPolicy.DISTINCT) -> LiteralRecognizer:
    table = {lexeme: (token_type, None) for lexeme, token_type in SINGLE_CHAR_TOKENS.items()}
    if bang_policy is BangPolicy.LEGACY:
        table[b"!"] = (TokenType.CLOSE_BRACE, None)
    return LiteralRecognizer("single-char", table)


def boolean_recognizer() -> LiteralRecognizer:
    # Literal probing, not word-boundary aware: "Truest" starts with True
    return LiteralRecognizer(
        "boolean",
        {lexeme: (TokenType.BOOLEAN, value) for lexeme, value in BOOLEAN_LITERALS.items()}
    )


def build_recognizers(config: Optional[LexerConfig] = None) -> Tuple[Recognizer, ...]:
    """Return the recognizers in priority order."""
    config = config or LexerConfig()
    return (
        NumberRecognizer(config.overflow),
        WhitespaceRecognizer(),
        double_char_recognizer(),
        single_char_recognizer(config.bang_policy),
        boolean_recognizer(),
    )
