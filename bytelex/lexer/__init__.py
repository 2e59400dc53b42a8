"""
bytelex Lexer Package

Implements a byte-level lexical analyzer (scanner) for the bytelex
expression language.

Key Features:
- Priority-ordered recognizers kept as data
- Maximal munch for numbers and whitespace
- Incremental line/column tracking
- Fail-fast errors with source locations

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation
from .config import LexerConfig, OverflowPolicy, BangPolicy
from .errors import LexerError, LexErrorKind
from .recognizers import Recognizer, RecognizerMatch, build_recognizers
from .lexer import (
    Lexer, ScanResult, scan, tokenize_bytes, tokenize_string, tokenize_file
)

__all__ = [
    "Lexer",
    "ScanResult",
    "Token",
    "TokenType",
    "SourceLocation",
    "LexerConfig",
    "OverflowPolicy",
    "BangPolicy",
    "LexerError",
    "LexErrorKind",
    "Recognizer",
    "RecognizerMatch",
    "build_recognizers",
    "scan",
    "tokenize_bytes",
    "tokenize_string",
    "tokenize_file",
]
