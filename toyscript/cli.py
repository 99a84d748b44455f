#!/usr/bin/env python3
"""
toylex - ToyScript tokenizer driver

Usage:
    toylex [options] [path]

Tokenizes a ToyScript program and prints the tokens. With no path and no
--expr the built-in demo program is used. A path of "-" reads stdin.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .lexer import Lexer, LexerError, Token

DEMO_PROGRAM = "fn main() { 3 + 4 }"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(verbose: bool) -> None:
    """Send log records to stderr, DEBUG when verbose, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="toylex",
        description="Tokenize a ToyScript program",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    toylex                          # Tokenize the demo program
    toylex script.toy               # Tokenize a file
    toylex -e 'let x = 5'           # Tokenize a snippet
    cat script.toy | toylex -       # Tokenize stdin
        """
    )

    parser.add_argument('path', nargs='?',
                        help='Source file to tokenize ("-" for stdin)')
    parser.add_argument('-e', '--expr',
                        help='Tokenize this text instead of a file')
    parser.add_argument('--format', choices=['list', 'lines'], default='list',
                        help='Print tokens as one list (default) or one per line')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging on stderr')
    return parser


def format_tokens(tokens: List[Token], style: str) -> str:
    """Render tokens for display."""
    if style == 'lines':
        return "\n".join(f"{token.location.line}\t{token}" for token in tokens)

    return "[" + ", ".join(str(token) for token in tokens) + "]"


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point; returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.expr is not None and args.path is not None:
        parser.error("give either a path or --expr, not both")

    setup_logging(args.verbose)
    logger = logging.getLogger("toylex")

    if args.expr is not None:
        source, filename = args.expr, "<expr>"
    elif args.path == "-":
        source, filename = sys.stdin.read(), "<stdin>"
    elif args.path is not None:
        try:
            with open(args.path, 'r', encoding='utf-8') as f:
                source = f.read()

        except OSError as e:
            print(f"error: cannot read {args.path}: {e.strerror}", file=sys.stderr)
            return 1

        except UnicodeDecodeError as e:
            print(f"error: cannot read {args.path}: not valid UTF-8 ({e.reason} at byte {e.start})", file=sys.stderr)
            return 1

        filename = args.path
    else:
        source, filename = DEMO_PROGRAM, "<demo>"

    logger.debug("Tokenizing %s (%d characters)", filename, len(source))

    try:
        tokens = Lexer(source, filename).tokenize()

    except LexerError as e:
        print(f"error: {e}", file=sys.stderr)
        logger.debug("Diagnostic:\n%s", e.diagnostic)
        return 1

    print(format_tokens(tokens, args.format))
    return 0


if __name__ == "__main__":
    sys.exit(main())
