"""
bytelex Lexer - turns a byte buffer into a positioned token list

The scanner keeps one cursor and a priority-ordered tuple of recognizers.
Each step hands the buffer and cursor offset to the recognizers in order;
the first match is consumed and emitted, no backtracking. When nothing
matches, the scan stops with an UNRECOGNIZED_TOKEN error at the cursor.

xwest
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Union

from .tokens import Token
from .config import LexerConfig
from .position import PositionTracker
from .recognizers import Recognizer, NumberOverflow, build_recognizers
from .errors import (
    LexerError, create_unrecognized_token_error, create_number_overflow_error
)

logger = logging.getLogger(__name__)

Source = Union[bytes, bytearray, memoryview, str]


@dataclass
class ScanResult:
    """Outcome of a scan: either every token, or the error that stopped it."""
    tokens: List[Token] = field(default_factory=list)
    error: Optional[LexerError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def has_errors(self) -> bool:
        """Check if the scan failed."""
        return self.error is not None

    def unwrap(self) -> List[Token]:
        """Return the tokens, raising the scan error if there was one."""
        if self.error is not None:
            raise self.error
        return self.tokens


def _as_bytes(source: Source) -> bytes:
    if isinstance(source, str):
        return source.encode("utf-8")
    return bytes(source)


class Lexer:
    """
    bytelex lexical analyzer.

    Converts a raw byte buffer into a stream of tokens. Whitespace is
    emitted as WHITESPACE tokens rather than skipped, and scanning stops
    at the first byte no recognizer accepts.
    """

    def __init__(
        self,
        source: Source,
        filename: str = "<bytes>",
        config: Optional[LexerConfig] = None,
        recognizers: Optional[Sequence[Recognizer]] = None
    ):
        """
        Initialize the lexer with a source buffer.

        Args:
            source: Source bytes (a str is UTF-8 encoded)
            filename: Name of the source for error reporting
            config: Overflow and '!' policies
            recognizers: Override the recognizer priority list
        """
        self.source = _as_bytes(source)
        self.filename = filename
        self.config = config or LexerConfig()
        if recognizers is None:
            recognizers = build_recognizers(self.config)
        self.recognizers = tuple(recognizers)
        self.cursor = PositionTracker(self.source)

    def scan(self) -> ScanResult:
        """
        Scan the whole buffer.

        Returns:
            ScanResult holding all tokens on success, or only the error
        """
        self.cursor.reset()
        tokens: List[Token] = []
        logger.debug("scanning %s (%d bytes)", self.filename, len(self.source))

        while not self.cursor.at_end:
            try:
                token = self._next_token()
            except LexerError as e:
                logger.debug("scan of %s failed at %s: %s",
                             self.filename, e.location, e.kind.name)
                return ScanResult(error=e)
            tokens.append(token)

        logger.debug("scanned %s: %d tokens", self.filename, len(tokens))
        return ScanResult(tokens=tokens)

    def tokenize(self) -> List[Token]:
        """
        Scan the whole buffer.

        Raises:
            LexerError: At the first unrecognized byte or overflowing literal
        """
        return self.scan().unwrap()

    def _next_token(self) -> Token:
        location = self.cursor.location(self.filename)

        for recognizer in self.recognizers:
            try:
                match = recognizer.match(self.source, self.cursor.offset)
            except NumberOverflow as e:
                raise create_number_overflow_error(e.lexeme, location) from e
            if match is None:
                continue
            if match.length <= 0:
                raise ValueError(
                    f"{recognizer!r} matched an empty lexeme at offset {self.cursor.offset}"
                )

            self.cursor.advance(match.length)
            return Token(match.type, match.lexeme, match.value, location)

        raise create_unrecognized_token_error(self.source[self.cursor.offset], location)


def scan(source: Source, filename: str = "<bytes>",
         config: Optional[LexerConfig] = None) -> ScanResult:
    """Scan a buffer, returning the error as a value instead of raising it."""
    return Lexer(source, filename, config).scan()


def tokenize_bytes(source: Union[bytes, bytearray, memoryview], filename: str = "<bytes>",
                   config: Optional[LexerConfig] = None) -> List[Token]:
    """
    Convenience function to tokenize a byte buffer.

    Raises:
        LexerError: If scanning fails
    """
    return Lexer(source, filename, config).tokenize()


def tokenize_string(source: str, filename: str = "<string>",
                    config: Optional[LexerConfig] = None) -> List[Token]:
    """Tokenize UTF-8 encoded text."""
    return Lexer(source, filename, config).tokenize()


def tokenize_file(filepath: str, config: Optional[LexerConfig] = None) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Args:
        filepath: Path to source file
        config: Scanner configuration

    Returns:
        List of tokens

    Raises:
        LexerError: If scanning fails
        IOError: If file cannot be read
    """
    with open(filepath, 'rb') as f:
        source = f.read()

    return tokenize_bytes(source, filepath, config)
