"""
Yet another XKCD style password generator
"""

from xkcdphrase.entropy import CounterModeEntropySource, EntropySource, default_entropy_source
from xkcdphrase.errors import (
    EntropySourceFailure,
    InsufficientWordlist,
    InvalidArgument,
    InvalidWordlist,
    XkcdPasswordError,
)
from xkcdphrase.generator import XkcdPassword
from xkcdphrase.wordlist import DEFAULT_WORDLIST, available_wordlists, load_wordlist, register_wordlist

__version__ = "0.900"

__all__ = [
    "CounterModeEntropySource",
    "DEFAULT_WORDLIST",
    "EntropySource",
    "EntropySourceFailure",
    "InsufficientWordlist",
    "InvalidArgument",
    "InvalidWordlist",
    "XkcdPassword",
    "XkcdPasswordError",
    "available_wordlists",
    "default_entropy_source",
    "load_wordlist",
    "register_wordlist",
]
