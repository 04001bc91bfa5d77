"""
Logging configuration
Events are logged but generated passphrases and keys never are
"""

import logging
import sys
from typing import Optional, Set


class SecretFilter(logging.Filter):
    """
    Redacts records whose rendered message assigns a sensitive name,
    e.g. "passphrase=..." in the format string or in its arguments

    A bare value logged without a name ("%s", pw) cannot be recognised;
    callers must not log secrets at all.
    """

    SENSITIVE_KEYS: Set[str] = {
        "passphrase",
        "password",
        "secret",
        "key",
    }

    REDACTED = "[REDACTED - Sensitive data filtered]"

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            rendered = record.getMessage()
        except (TypeError, ValueError):
            rendered = str(record.msg)

        if "=" in rendered:
            lowered = rendered.lower()
            if any(key in lowered for key in self.SENSITIVE_KEYS):
                record.msg = self.REDACTED
                record.args = None
        return True


def setup_logging(level: Optional[str] = None):
    """Configure CLI logging"""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    handler.addFilter(SecretFilter())

    root = logging.getLogger()
    root.setLevel((level or "WARNING").upper())

    # Clear existing handlers to avoid duplicates
    root.handlers = []
    root.addHandler(handler)


generator_logger = logging.getLogger("xkcdphrase.generator")
entropy_logger = logging.getLogger("xkcdphrase.entropy")
wordlist_logger = logging.getLogger("xkcdphrase.wordlist")


def log_wordlist_loaded(source: str, size: int):
    """Log where the word list came from (never its content)"""
    wordlist_logger.info(f"Loaded word list {source} ({size} words)")


def log_entropy_source_created(kind: str, seeded: str):
    """Log entropy source construction (never the key)"""
    entropy_logger.debug(f"Created {kind} seeded from {seeded}")


def log_weak_word_count(words: int):
    """Log a request that will produce a weak passphrase"""
    generator_logger.warning(f"{words} word(s) make for a rather poor passphrase, use at least 3")


def log_passphrase_generated(words: int, digits: int):
    """Log generation parameters only"""
    generator_logger.debug(f"Generated passphrase with {words} words and {digits} digits")
