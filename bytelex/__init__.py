"""
bytelex Package

Lexical front end for a small expression language: a byte-level scanner
producing positioned tokens.

Architecture:
    bytelex/
    ├── lexer/           # Tokenization and lexical analysis
    └── cli.py           # Debug entry point

Author: xwest
License: MIT
"""

__version__ = "0.1.0-alpha"
__author__ = "xwest"
__email__ = "dev@bytelex.org"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType, LexerError, scan

__all__ = [
    # Core classes
    "Lexer",
    "Token",
    "TokenType",
    "LexerError",
    "scan",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
