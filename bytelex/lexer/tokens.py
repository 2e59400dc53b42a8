"""
Token definitions for the bytelex scanner.

This module defines every token type the scanner can produce:
- Literals (decimal integers, booleans, single bytes)
- Arithmetic and logical operators
- Grouping punctuation
- Whitespace runs (kept in the stream, never skipped)

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any, Dict


class TokenType(Enum):
    """
    Enumeration of all token types in bytelex.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Literals
    # ========================================================================
    NUMBER = auto()                 # 42
    BOOLEAN = auto()                # True, False
    CHARACTER = auto()              # single raw byte (no recognizer yet)

    # ========================================================================
    # Operators
    # ========================================================================

    # Arithmetic
    CROSS = auto()                  # +
    DASH = auto()                   # -
    STAR = auto()                   # *
    SLASH = auto()                  # /

    # Assignment / comparison
    EQUAL = auto()                  # =
    DOUBLE_EQUAL = auto()           # ==
    NOT_EQUAL = auto()              # !=

    # Logical
    LOGICAL_AND = auto()            # &&
    LOGICAL_OR = auto()             # ||
    NOT = auto()                    # !

    # ========================================================================
    # Punctuation
    # ========================================================================
    OPEN_PAREN = auto()             # (
    CLOSE_PAREN = auto()            # )
    OPEN_BRACE = auto()             # {
    CLOSE_BRACE = auto()            # }

    # ========================================================================
    # Layout
    # ========================================================================
    WHITESPACE = auto()             # run of spaces, tabs, newlines


# Two-byte operators. Disjoint, so order among them does not matter.
DOUBLE_CHAR_TOKENS: Dict[bytes, TokenType] = {
    b"==": TokenType.DOUBLE_EQUAL,
    b"!=": TokenType.NOT_EQUAL,
    b"&&": TokenType.LOGICAL_AND,
    b"||": TokenType.LOGICAL_OR,
}

# Single-byte tokens, in the order they are tried.
SINGLE_CHAR_TOKENS: Dict[bytes, TokenType] = {
    b"=": TokenType.EQUAL,
    b"+": TokenType.CROSS,
    b"-": TokenType.DASH,
    b"*": TokenType.STAR,
    b"/": TokenType.SLASH,
    b"(": TokenType.OPEN_PAREN,
    b")": TokenType.CLOSE_PAREN,
    b"{": TokenType.OPEN_BRACE,
    b"}": TokenType.CLOSE_BRACE,
    b"!": TokenType.NOT,
}

BOOLEAN_LITERALS: Dict[bytes, bool] = {
    b"True": True,
    b"False": False,
}

OPERATOR_TYPES = frozenset(DOUBLE_CHAR_TOKENS.values()) | frozenset({
    TokenType.EQUAL, TokenType.CROSS, TokenType.DASH,
    TokenType.STAR, TokenType.SLASH, TokenType.NOT,
})

LITERAL_TYPES = frozenset({
    TokenType.NUMBER, TokenType.BOOLEAN, TokenType.CHARACTER,
})


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source buffer.

    Used for error reporting and debugging output.
    """
    filename: str
    line: int
    column: int
    offset: int  # Byte offset from start of buffer

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token.

    Contains the token type, the raw bytes it was scanned from, the
    decoded payload (int for NUMBER, bool for BOOLEAN, byte value for
    CHARACTER, None otherwise) and the position of its first byte.
    """
    type: TokenType
    lexeme: bytes                   # Raw bytes from source
    value: Any                      # Decoded payload
    location: SourceLocation

    def __str__(self) -> str:
        text = self.lexeme.decode("ascii", errors="backslashreplace")
        if self.value is not None:
            body = f"{self.type.name}({text!r} -> {self.value!r})"
        else:
            body = f"{self.type.name}({text!r})"
        return f"{body}@{self.line}:{self.column}"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.value!r}, {self.location!r})")

    @property
    def line(self) -> int:
        return self.location.line

    @property
    def column(self) -> int:
        return self.location.column

    @property
    def offset(self) -> int:
        return self.location.offset

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.type in LITERAL_TYPES

    @property
    def is_operator(self) -> bool:
        """Check if this token is an operator."""
        return self.type in OPERATOR_TYPES
