"""
Error handling for the ToyScript lexer.

Provides the error taxonomy for malformed input, source location
information and a readable diagnostic for tools that want more than
the one-line description.
"""

from enum import Enum, auto
from typing import Optional
from dataclasses import dataclass

from .tokens import Cursor


class LexerErrorKind(Enum):
    """What went wrong while scanning."""
    END_OF_DATA = auto()            # No more input; never raised, see Lexer._next_token
    UNMATCHED_TOKEN = auto()        # String literal opened but never closed
    INTEGER_OVERFLOW = auto()       # Digit run larger than a signed 64-bit integer


@dataclass
class Diagnostic:
    """Detailed report attached to a lexer error."""
    message: str
    location: Optional[Cursor]
    filename: str = "<unknown>"
    severity: str = "error"
    code: Optional[str] = None
    help_text: Optional[str] = None

    @property
    def code_description(self) -> Optional[str]:
        """Short category name for the error code, e.g. "Unmatched string quote"."""
        return ERROR_CODES.get(self.code) if self.code else None

    def __str__(self) -> str:
        header = self.severity.upper()
        if self.code:
            header += f"[{self.code}]"

        result = f"{header}: {self.message}\n"
        if self.code_description:
            result += f"  note: {self.code_description}\n"

        if self.location is not None:
            result += f"  --> {self.filename}:{self.location.line}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        return result


class LexerError(Exception):
    """
    Exception raised when the lexer meets input it cannot tokenize.

    ``kind`` is the discriminant callers match on, ``description`` the
    human readable text (possibly absent). Converting the error to a
    string yields the description, or nothing when there is none.
    """

    def __init__(
        self,
        kind: LexerErrorKind,
        description: Optional[str] = None,
        location: Optional[Cursor] = None,
        filename: str = "<unknown>",
        code: Optional[str] = None,
        help_text: Optional[str] = None
    ):
        super().__init__(description or "")
        self.kind = kind
        self.description = description
        self.location = location
        self.diagnostic = Diagnostic(
            message=description or kind.name.lower().replace("_", " "),
            location=location,
            filename=filename,
            code=code,
            help_text=help_text
        )

    def __str__(self) -> str:
        return self.description or ""


# Error codes for categorization
ERROR_CODES = {
    "L001": "Unmatched string quote",
    "L002": "Integer literal overflow",
}


def create_unmatched_quote_error(location: Cursor, filename: str = "<unknown>") -> LexerError:
    """Create an error for a string literal with no closing quote."""
    return LexerError(
        LexerErrorKind.UNMATCHED_TOKEN,
        f"mismatched '\"' starting at line {location.line}",
        location=location,
        filename=filename,
        code="L001",
        help_text="String literals must be closed with an unescaped '\"'."
    )


def create_integer_overflow_error(digits: str, location: Cursor, filename: str = "<unknown>") -> LexerError:
    """Create an error for an integer literal outside the signed 64-bit range."""
    return LexerError(
        LexerErrorKind.INTEGER_OVERFLOW,
        f"'{digits}' at line {location.line} is too big",
        location=location,
        filename=filename,
        code="L002",
        help_text="Integer literals must not exceed 9223372036854775807."
    )
