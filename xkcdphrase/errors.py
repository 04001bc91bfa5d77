"""
Exceptions raised by passphrase generation
Every error carries enough context for the caller to self-diagnose
"""

from typing import Any, Optional


class XkcdPasswordError(Exception):
    """Base class for all xkcdphrase errors"""


class InvalidWordlist(XkcdPasswordError):
    """Word list specifier is neither a registered provider nor a usable file"""

    def __init__(self, specifier: Any, reason: Optional[str] = None):
        self.specifier = specifier
        self.reason = reason or "has to be either a registered word list or a readable file"
        super().__init__(f"Invalid wordlist: >{specifier}<. {self.reason}")


class InsufficientWordlist(XkcdPasswordError):
    """More words requested than the word list holds"""

    def __init__(self, requested: int, available: int):
        self.requested = requested
        self.available = available
        super().__init__(
            f"Requested {requested} words but the word list only has {available} distinct entries"
        )


class InvalidArgument(XkcdPasswordError, ValueError):
    """Generation parameter out of range"""

    def __init__(self, field: str, value: Any, reason: str):
        self.field = field
        self.value = value
        super().__init__(f"{field}={value!r}: {reason}")


class EntropySourceFailure(XkcdPasswordError):
    """Secure random source could not produce data"""
