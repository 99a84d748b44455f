"""
Token definitions for the ToyScript lexer.

This module defines every token kind the lexer can produce:
- Keywords (if, loop, break, continue, let, fn, macro)
- Operators and punctuation (single characters only)
- Literals (strings, integers, booleans, and a reserved float kind)
- Identifiers

It also holds the scanning cursor and the lookup tables the lexer uses.
"""

from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional


class TokenType(Enum):
    """
    Enumeration of all token kinds in ToyScript.

    The set is closed: parsers are expected to match on it exhaustively.
    """

    # ========================================================================
    # Keywords and structure
    # ========================================================================
    IF = auto()                     # if
    LOOP = auto()                   # loop
    BREAK = auto()                  # break
    CONTINUE = auto()               # continue
    LET = auto()                    # let
    FN = auto()                     # fn
    MACRO = auto()                  # macro
    LPAREN = auto()                 # (
    RPAREN = auto()                 # )
    LBRACE = auto()                 # {
    RBRACE = auto()                 # }
    NEWLINE = auto()                # \n (kept, the grammar is line oriented)

    # ========================================================================
    # Operators and punctuation
    # ========================================================================
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    TIMES = auto()                  # *
    DIVIDE = auto()                 # /
    EQUAL = auto()                  # =
    LESS = auto()                   # <
    GREAT = auto()                  # >
    PERIOD = auto()                 # .
    COMMA = auto()                  # ,

    # ========================================================================
    # Literals
    # ========================================================================
    STR = auto()                    # "hello", quotes kept, escapes untouched
    INT = auto()                    # 42 (signed 64-bit range)
    FLOAT = auto()                  # reserved, the lexer never produces it yet
    BOOL = auto()                   # true, false

    IDENT = auto()                  # anything else that isn't whitespace

    @property
    def display_name(self) -> str:
        """Name used when printing tokens, e.g. ``LParen`` or ``Ident``."""
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    TokenType.IF: "If",
    TokenType.LOOP: "Loop",
    TokenType.BREAK: "Break",
    TokenType.CONTINUE: "Continue",
    TokenType.LET: "Let",
    TokenType.FN: "Fn",
    TokenType.MACRO: "Macro",
    TokenType.LPAREN: "LParen",
    TokenType.RPAREN: "RParen",
    TokenType.LBRACE: "LBrace",
    TokenType.RBRACE: "RBrace",
    TokenType.NEWLINE: "Newline",
    TokenType.PLUS: "Plus",
    TokenType.MINUS: "Minus",
    TokenType.TIMES: "Times",
    TokenType.DIVIDE: "Divide",
    TokenType.EQUAL: "Equal",
    TokenType.LESS: "Less",
    TokenType.GREAT: "Great",
    TokenType.PERIOD: "Period",
    TokenType.COMMA: "Comma",
    TokenType.STR: "Str",
    TokenType.INT: "Int",
    TokenType.FLOAT: "Float",
    TokenType.BOOL: "Bool",
    TokenType.IDENT: "Ident",
}


@dataclass(frozen=True)
class Cursor:
    """
    Scanning position in the source text.

    Every scanning step receives a cursor and hands back a new one, so
    a cursor is never shared or modified in place.
    """
    offset: int = 0  # Index into the source string
    line: int = 1

    def advance(self, count: int = 1) -> "Cursor":
        """Move forward over ``count`` characters on the same line."""
        return Cursor(self.offset + count, self.line)

    def newline(self) -> "Cursor":
        """Move forward over a single newline character."""
        return Cursor(self.offset + 1, self.line + 1)

    def __str__(self) -> str:
        return f"line {self.line}"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the ToyScript language.

    Equality only looks at the kind and the payload. The raw lexeme and
    the location are carried along for error reporting and rendering.
    """
    type: TokenType
    value: Any = None               # Payload for STR, INT, FLOAT, BOOL, IDENT
    lexeme: str = field(default="", compare=False)
    location: Optional[Cursor] = field(default=None, compare=False)

    def __str__(self) -> str:
        name = self.type.display_name
        if self.type == TokenType.BOOL:
            return f"{name}({'true' if self.value else 'false'})"

        if self.value is not None:
            return f"{name}({self.value})"

        return name

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.location!r})"

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.type in LITERALS

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a reserved word (booleans excluded)."""
        return self.type in KEYWORD_TYPES

    @property
    def is_symbol(self) -> bool:
        """Check if this token came from a single-character symbol."""
        return self.type in SYMBOL_TYPES


# Lookup tables used by the lexer

KEYWORDS = {
    "if": TokenType.IF,
    "loop": TokenType.LOOP,
    "break": TokenType.BREAK,
    "continue": TokenType.CONTINUE,
    "let": TokenType.LET,
    "fn": TokenType.FN,
    "macro": TokenType.MACRO,
}

BOOLEANS = {
    "true": True,
    "false": False,
}

SYMBOLS = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.TIMES,
    "/": TokenType.DIVIDE,
    "=": TokenType.EQUAL,
    "<": TokenType.LESS,
    ">": TokenType.GREAT,
    ".": TokenType.PERIOD,
    ",": TokenType.COMMA,
    "\n": TokenType.NEWLINE,
}

KEYWORD_TYPES = frozenset(KEYWORDS.values())
SYMBOL_TYPES = frozenset(SYMBOLS.values())
LITERALS = frozenset({TokenType.STR, TokenType.INT, TokenType.FLOAT, TokenType.BOOL})

QUOTE = '"'
ESCAPE = '\\'
INLINE_WHITESPACE = frozenset(" \t")

# Characters with the Unicode White_Space property. str.isspace() also
# accepts the \x1c-\x1f separators, which must stay inside words.
WHITESPACE = frozenset(
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)
DIGITS = frozenset("0123456789")

# Largest value an INT token may hold (signed 64-bit)
INT_MAX = 2 ** 63 - 1
INT_MAX_DIGITS = len(str(INT_MAX))

_SPELLINGS = {token_type: text for text, token_type in {**KEYWORDS, **SYMBOLS}.items()}


def spell(token: Token) -> str:
    """Return source text that lexes back to ``token``."""
    if token.type in _SPELLINGS:
        return _SPELLINGS[token.type]

    if token.type == TokenType.BOOL:
        return "true" if token.value else "false"

    return str(token.value)


def render_tokens(tokens: Iterable[Token]) -> str:
    """
    Turn a token sequence back into source text.

    Tokens on the same line are separated by a single space, so the
    original spacing is not preserved but lexing the result gives the
    same tokens again.
    """
    parts = []
    at_line_start = True
    for token in tokens:
        if token.type == TokenType.NEWLINE:
            parts.append("\n")
            at_line_start = True
            continue

        if not at_line_start:
            parts.append(" ")

        parts.append(spell(token))
        at_line_start = False

    return "".join(parts)
