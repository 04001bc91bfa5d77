"""
Word list loading
A specifier is either a registered provider name (the BIP39 lists
shipped with the mnemonic package are registered as bip39-<language>)
or the path of a plain text file with one word per line
"""

import os
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from mnemonic import Mnemonic

from xkcdphrase.errors import InvalidWordlist
from xkcdphrase.logging_config import log_wordlist_loaded

Wordlist = Tuple[str, ...]
WordlistLoader = Callable[[], Iterable[str]]

DEFAULT_WORDLIST = "bip39-english"

_PROVIDERS: Dict[str, WordlistLoader] = {}


def register_wordlist(name: str) -> Callable[[WordlistLoader], WordlistLoader]:
    """Decorator registering a zero-argument loader under name"""
    def decorator(loader: WordlistLoader) -> WordlistLoader:
        if name in _PROVIDERS:
            raise ValueError(f"Word list provider {name!r} is already registered")
        _PROVIDERS[name] = loader
        return loader
    return decorator


def available_wordlists() -> List[str]:
    return sorted(_PROVIDERS)


def _register_bip39_providers():
    for language in Mnemonic.list_languages():
        register_wordlist(f"bip39-{language}")(lambda language=language: Mnemonic(language).wordlist)


_register_bip39_providers()


def _unique(words: Iterable[str]) -> Wordlist:
    """Drop duplicates, keeping the first occurrence"""
    return tuple(dict.fromkeys(words))


def _read_wordlist_file(path: str) -> Wordlist:
    words = []
    try:
        with open(path, "r", encoding="utf-8") as f:
            for lineno, line in enumerate(f, start=1):
                word = line.rstrip("\r\n")
                if not word:
                    raise InvalidWordlist(path, f"blank line {lineno}")
                words.append(word)
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidWordlist(path, f"could not be read: {e}") from e

    if not words:
        raise InvalidWordlist(path, "file contains no words")
    return _unique(words)


def load_wordlist(specifier: Optional[str] = None) -> Wordlist:
    """
    Resolve specifier to an immutable tuple of distinct words

    Raises:
      InvalidWordlist if specifier is neither a registered provider
      nor a readable file, or the file holds blank lines or nothing
    """
    if specifier is None:
        specifier = DEFAULT_WORDLIST

    if isinstance(specifier, str) and specifier in _PROVIDERS:
        words = _unique(_PROVIDERS[specifier]())
        if not words:
            raise InvalidWordlist(specifier, "provider returned no words")
        log_wordlist_loaded(specifier, len(words))
        return words

    try:
        path = os.fspath(specifier)
    except TypeError:
        raise InvalidWordlist(specifier)

    if not os.path.isfile(path) or not os.access(path, os.R_OK):
        raise InvalidWordlist(specifier)

    words = _read_wordlist_file(path)
    log_wordlist_loaded(path, len(words))
    return words
