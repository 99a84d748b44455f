"""
ToyScript Lexer - turns source text into a flat list of tokens

The grammar is tiny: single-character symbols, double-quoted strings,
decimal integers, and everything else is a word (keyword or identifier).
Symbols always win, so a word stops as soon as a symbol, a quote or
whitespace shows up.

TODO: float literals. "3.14" currently comes out as Int(3) Period Int(14).
"""

import logging
from typing import List, Optional, Tuple

from .tokens import (
    Token, TokenType, Cursor, KEYWORDS, BOOLEANS, SYMBOLS,
    QUOTE, ESCAPE, INLINE_WHITESPACE, WHITESPACE, DIGITS, INT_MAX, INT_MAX_DIGITS
)
from .errors import (
    LexerError, create_unmatched_quote_error, create_integer_overflow_error
)


Scanned = Tuple[Token, Cursor]


class Lexer:
    """
    ToyScript lexical analyzer.

    Holds nothing but the source text and its filename. The scanning
    position lives in a Cursor value threaded through each step, so a
    Lexer can be tokenized any number of times, from any thread.
    """

    _logger = logging.getLogger("Lexer")

    def __init__(self, source: str, filename: str = "<unknown>"):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            filename: Name of source file for error reporting
        """
        self.source = source
        self.filename = filename

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source code.

        Returns:
            List of tokens in source order (no EOF marker)

        Raises:
            LexerError: On an unterminated string or an oversized integer.
                No partial token list is returned.
        """
        tokens: List[Token] = []
        cursor = Cursor()

        while True:
            try:
                scanned = self._next_token(cursor)

            except LexerError as e:
                self._logger.debug("Lexing %s failed: %s", self.filename, e)
                raise

            if scanned is None:
                break

            token, cursor = scanned
            tokens.append(token)

        self._logger.debug("Lexed %d tokens from %s", len(tokens), self.filename)
        return tokens

    def _next_token(self, cursor: Cursor) -> Optional[Scanned]:
        """Scan one token starting at cursor; None once the input is used up."""
        cursor = self._skip_whitespace(cursor)
        if cursor.offset >= len(self.source):
            return None

        scanned = self._match_symbol(cursor)
        if scanned is not None:
            return scanned

        if self.source[cursor.offset] in DIGITS:
            return self._scan_number(cursor)

        return self._scan_word(cursor)

    def _match_symbol(self, cursor: Cursor) -> Optional[Scanned]:
        """
        Try the symbol rules at cursor.

        Returns None when the character isn't a symbol, which is not an
        error: the caller moves on to number and word scanning.
        """
        char = self.source[cursor.offset]
        if char == QUOTE:
            return self._scan_string(cursor)

        token_type = SYMBOLS.get(char)
        if token_type is None:
            return None

        if token_type == TokenType.NEWLINE:
            end = cursor.newline()
        else:
            end = cursor.advance()

        return Token(token_type, None, char, cursor), end

    def _scan_string(self, cursor: Cursor) -> Scanned:
        """Scan a string literal; the payload keeps both quotes and any escapes."""
        search = cursor.offset + 1

        while True:
            close = self.source.find(QUOTE, search)
            if close == -1:
                raise create_unmatched_quote_error(cursor, self.filename)

            # An odd run of backslashes right before the quote escapes it
            backslashes = 0
            pos = close - 1
            while pos > cursor.offset and self.source[pos] == ESCAPE:
                backslashes += 1
                pos -= 1

            if backslashes % 2 == 0:
                break

            search = close + 1

        lexeme = self.source[cursor.offset:close + 1]
        end = Cursor(close + 1, cursor.line + lexeme.count("\n"))
        return Token(TokenType.STR, lexeme, lexeme, cursor), end

    def _scan_number(self, cursor: Cursor) -> Scanned:
        """Scan a run of ASCII digits as a signed 64-bit integer."""
        end = cursor.offset
        while end < len(self.source) and self.source[end] in DIGITS:
            end += 1

        digits = self.source[cursor.offset:end]
        # Check the length first: int() refuses very long digit strings
        significant = digits.lstrip("0") or "0"
        if len(significant) > INT_MAX_DIGITS or int(significant) > INT_MAX:
            raise create_integer_overflow_error(digits, cursor, self.filename)

        value = int(significant)
        return Token(TokenType.INT, value, digits, cursor), cursor.advance(len(digits))

    def _scan_word(self, cursor: Cursor) -> Scanned:
        """
        Scan a keyword, boolean or identifier.

        The first character is always taken. After that the word runs
        until whitespace, a quote or a symbol character. Whitespace here
        means the Unicode White_Space set, so the U+001C-U+001F separators that
        str.isspace() accepts stay inside the word. Digits and any other
        characters are part of the word.
        """
        end = cursor.offset + 1
        while end < len(self.source):
            char = self.source[end]
            if char in WHITESPACE or char == QUOTE or char in SYMBOLS:
                break

            end += 1

        text = self.source[cursor.offset:end]
        next_cursor = cursor.advance(len(text))

        if text in KEYWORDS:
            return Token(KEYWORDS[text], None, text, cursor), next_cursor

        if text in BOOLEANS:
            return Token(TokenType.BOOL, BOOLEANS[text], text, cursor), next_cursor

        return Token(TokenType.IDENT, text, text, cursor), next_cursor

    def _skip_whitespace(self, cursor: Cursor) -> Cursor:
        """Skip spaces and tabs. Newlines are tokens, so they stay."""
        offset = cursor.offset
        while offset < len(self.source) and self.source[offset] in INLINE_WHITESPACE:
            offset += 1

        return cursor.advance(offset - cursor.offset)


def tokenize(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
    """
    return Lexer(source, filename).tokenize()


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Args:
        filepath: Path to source file

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
        OSError: If file cannot be read
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize(source, str(filepath))
