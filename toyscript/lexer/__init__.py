"""
ToyScript Lexer Package

Implements the lexical analyzer (tokenizer) for the ToyScript language.

Key Features:
- Single-character symbols with priority over everything else
- Double-quoted strings with backslash-escaped quotes (kept verbatim)
- Signed 64-bit integer literals with overflow detection
- Keyword and boolean recognition
- Newline tokens with line tracking for error messages
"""

from .tokens import Token, TokenType, Cursor, render_tokens
from .lexer import Lexer, tokenize, tokenize_file
from .errors import LexerError, LexerErrorKind

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "Cursor",
    "LexerError",
    "LexerErrorKind",
    "tokenize",
    "tokenize_file",
    "render_tokens",
]
