"""
Command line wrapper around XkcdPassword
"""

import argparse
import sys
from typing import List, Optional

from xkcdphrase.config import Settings, get_settings, validate_settings
from xkcdphrase.errors import XkcdPasswordError
from xkcdphrase.generator import XkcdPassword
from xkcdphrase.logging_config import setup_logging
from xkcdphrase.wordlist import available_wordlists


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="xkcdphrase",
        description="Generate XKCD-style passphrases from a word list",
    )
    parser.add_argument("-w", "--words", type=int, default=settings.XKCD_WORDS,
                        help=f"Number of words (default: {settings.XKCD_WORDS})")
    parser.add_argument("-d", "--digits", type=int, default=settings.XKCD_DIGITS,
                        help=f"Append a random number with this many digits (default: {settings.XKCD_DIGITS})")
    parser.add_argument("-l", "--wordlist", default=settings.XKCD_WORDLIST,
                        help="Registered word list name or path to a file, one word per line")
    parser.add_argument("-c", "--count", type=int, default=settings.XKCD_COUNT,
                        help=f"Number of passphrases to generate (default: {settings.XKCD_COUNT})")
    parser.add_argument("--list-wordlists", action="store_true",
                        help="Print registered word list names and exit")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log at INFO level")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    try:
        settings = get_settings()
    except ValueError as e:
        # Malformed values, e.g. XKCD_WORDS=many
        print(f"Error: {e}", file=sys.stderr)
        return 1

    args = build_parser(settings).parse_args(argv)

    if args.list_wordlists:
        for name in available_wordlists():
            print(name)
        return 0

    # Flags override the environment, so check the values in effect
    effective = settings.model_copy(update={
        "XKCD_WORDLIST": args.wordlist,
        "XKCD_WORDS": args.words,
        "XKCD_DIGITS": args.digits,
        "XKCD_COUNT": args.count,
        "LOG_LEVEL": "INFO" if args.verbose else settings.LOG_LEVEL,
    })
    try:
        validate_settings(effective)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging(effective.LOG_LEVEL)

    try:
        generator = XkcdPassword(wordlist=effective.XKCD_WORDLIST)
        for _ in range(effective.XKCD_COUNT):
            print(generator.xkcd(words=effective.XKCD_WORDS, digits=effective.XKCD_DIGITS))
    except XkcdPasswordError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
