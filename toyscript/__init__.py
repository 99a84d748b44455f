"""
ToyScript Package

Lexical analysis for ToyScript, a small line-oriented scripting language.
Turns source text into the token stream a parser would consume.

Architecture:
    toyscript/
    ├── lexer/           # Tokens, errors and the tokenizer
    └── cli.py           # toylex command-line driver

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Lexer, LexerError, LexerErrorKind, Token, TokenType, tokenize

__all__ = [
    "Lexer",
    "LexerError",
    "LexerErrorKind",
    "Token",
    "TokenType",
    "tokenize",

    "__version__",
    "__license__",
]
