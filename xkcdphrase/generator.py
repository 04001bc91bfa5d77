"""
XKCD-style passphrase generator
Picks distinct random words, shuffles them, optionally appends a
zero-padded random number and concatenates everything in CamelCase
"""

from typing import List, Optional

from xkcdphrase.algorithms import choose, shuffle
from xkcdphrase.entropy import EntropySource, default_entropy_source
from xkcdphrase.errors import InsufficientWordlist
from xkcdphrase.logging_config import log_passphrase_generated, log_weak_word_count
from xkcdphrase.schemas import DEFAULT_WORDS, parse_request
from xkcdphrase.wordlist import DEFAULT_WORDLIST, Wordlist, load_wordlist


def ucfirst(component: str) -> str:
    """Upper-case the first character only, leave the rest alone"""
    return component[:1].upper() + component[1:]


class XkcdPassword:
    """
    Passphrase generator

    The word list is loaded once at construction. The entropy source is
    only referenced, so several generators may share one.
    """

    def __init__(self, wordlist: Optional[str] = None, entropy: Optional[EntropySource] = None):
        self.wordlist = wordlist if wordlist is not None else DEFAULT_WORDLIST
        self._list: Wordlist = load_wordlist(self.wordlist)
        self.entropy = entropy if entropy is not None else default_entropy_source()

    @property
    def words(self) -> Wordlist:
        return self._list

    def xkcd(self, words: int = DEFAULT_WORDS, digits: Optional[int] = None) -> str:
        """
        Generate a passphrase

        Anything below 3 words makes for a rather poor passphrase and
        anything above 7 gets hard to remember; both are accepted.

        Raises:
          InvalidArgument if words < 1 or digits < 0
          InsufficientWordlist if words exceeds the word list size
        """
        request = parse_request(words, digits)
        if request.words > len(self._list):
            raise InsufficientWordlist(requested=request.words, available=len(self._list))
        if request.is_weak:
            log_weak_word_count(request.words)

        components: List[str] = shuffle(self.entropy, choose(self.entropy, request.words, self._list))

        if request.digits:
            number = self.entropy.rand_int(10 ** request.digits)
            components.append(f"{number:0{request.digits}d}")

        log_passphrase_generated(request.words, request.digits)
        return "".join(ucfirst(c) for c in components)

    produce = xkcd
