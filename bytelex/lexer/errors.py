"""
Error handling for the bytelex scanner.

Scanning is fail-fast: the first byte no recognizer accepts ends the scan.
Errors carry a kind, the source location of the failure and an
IDE-friendly diagnostic.

Author: xwest
"""

from enum import Enum, auto
from typing import Optional, List
from dataclasses import dataclass
from .tokens import SourceLocation


class LexErrorKind(Enum):
    """Categories of scanner failure."""
    UNRECOGNIZED_TOKEN = auto()     # No recognizer matched at the cursor
    NUMBER_OVERFLOW = auto()        # Decimal literal outside the i32 range


# Diagnostic code for each error kind
ERROR_CODES = {
    LexErrorKind.UNRECOGNIZED_TOKEN: "L001",
    LexErrorKind.NUMBER_OVERFLOW: "L007",
}


@dataclass
class Diagnostic:
    """A renderable scanner diagnostic."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning", "info", "hint"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Exception raised (or returned inside a ScanResult) when scanning fails.

    Terminal: the scanner never continues past the failure point.
    """

    def __init__(
        self,
        kind: LexErrorKind,
        message: str,
        location: SourceLocation,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.kind = kind
        self.location = location
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=ERROR_CODES[kind],
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def line(self) -> int:
        return self.location.line

    @property
    def column(self) -> int:
        return self.location.column

    @property
    def code(self) -> str:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)

    def __repr__(self) -> str:
        return (f"LexerError({self.kind.name}, line={self.line}, "
                f"column={self.column})")


def _describe_byte(byte: int) -> str:
    if 0x20 <= byte < 0x7F:
        return f"'{chr(byte)}'"
    return f"0x{byte:02X}"


def create_unrecognized_token_error(byte: int, location: SourceLocation) -> LexerError:
    """Create an error for a byte that no recognizer accepts."""
    if byte >= 0x80:
        help_text = "Only ASCII source bytes can form tokens."
    elif 0x20 <= byte < 0x7F:
        help_text = f"The character {_describe_byte(byte)} does not start any token."
    else:
        help_text = "Non-printable control bytes are not allowed."

    return LexerError(
        LexErrorKind.UNRECOGNIZED_TOKEN,
        f"Unrecognized token starting with {_describe_byte(byte)}",
        location,
        help_text=help_text
    )


def create_number_overflow_error(lexeme: bytes, location: SourceLocation) -> LexerError:
    """Create an error for a decimal literal that does not fit in 32 bits."""
    return LexerError(
        LexErrorKind.NUMBER_OVERFLOW,
        f"Number literal overflow: '{lexeme.decode('ascii')}'",
        location,
        help_text="Number literals must lie between 0 and 2147483647.",
        suggestions=["Use a smaller literal", "Select the 'saturate' or 'wrap' overflow policy"]
    )
