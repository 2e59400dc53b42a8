#!/usr/bin/env python3
"""
bytelex debug entry point.

Scans a buffer and prints the token stream, or the diagnostic of the
first error. With no input it scans a built-in sample.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .lexer import Lexer, LexerConfig, OverflowPolicy, BangPolicy, TokenType, ScanResult

logger = logging.getLogger(__name__)

SAMPLE_SOURCE = b"(11 + 12) \n* False - 123 {} || && ==="


def format_result(result: ScanResult, skip_whitespace: bool = False) -> str:
    """Render a scan result the way the debug entry point prints it."""
    if result.has_errors():
        return str(result.error).rstrip("\n")

    lines = []
    for token in result.tokens:
        if skip_whitespace and token.type is TokenType.WHITESPACE:
            continue
        lines.append(str(token))
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bytelex-debug",
        description="Scan source bytes and print the token stream",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    bytelex-debug                         # Scan the built-in sample
    bytelex-debug program.bl              # Scan a file
    bytelex-debug -e "(1 + 2) == 3"       # Scan literal text
    bytelex-debug -e 99999999999 --overflow wrap
        """
    )

    parser.add_argument('file', nargs='?',
                        help='Source file to scan (defaults to the built-in sample)')
    parser.add_argument('-e', '--expr',
                        help='Scan this text instead of a file')
    parser.add_argument('--overflow', choices=[p.value for p in OverflowPolicy],
                        default=OverflowPolicy.ERROR.value,
                        help='Policy for literals above 2147483647 (default: error)')
    parser.add_argument('--legacy-bang', action='store_true',
                        help="Emit CLOSE_BRACE for '!' as older scanners did")
    parser.add_argument('--skip-whitespace', action='store_true',
                        help='Hide WHITESPACE tokens in the output')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the debug scanner"""

    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    if args.file and args.expr is not None:
        parser.error("give either FILE or --expr, not both")

    if args.expr is not None:
        source, filename = args.expr.encode("utf-8"), "<expr>"
    elif args.file:
        try:
            with open(args.file, 'rb') as f:
                source = f.read()
        except OSError as e:
            logger.error("cannot read %s: %s", args.file, e)
            return 2
        filename = args.file
    else:
        source, filename = SAMPLE_SOURCE, "<sample>"

    config = LexerConfig(
        overflow=OverflowPolicy(args.overflow),
        bang_policy=BangPolicy.LEGACY if args.legacy_bang else BangPolicy.DISTINCT,
    )

    result = Lexer(source, filename, config).scan()
    print(format_result(result, skip_whitespace=args.skip_whitespace))

    if result.has_errors():
        return 1
    logger.debug("%d tokens", len(result.tokens))
    return 0


if __name__ == "__main__":
    sys.exit(main())
