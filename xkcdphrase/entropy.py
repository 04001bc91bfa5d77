"""
Entropy sources for passphrase generation
The default source keys AES-256 from the OS CSPRNG and reads the
counter-mode keystream, so the OS source is touched only once
"""

import os
import threading
from typing import List, Optional, Sequence, TypeVar

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from xkcdphrase.errors import EntropySourceFailure, InvalidArgument
from xkcdphrase.logging_config import log_entropy_source_created

T = TypeVar("T")

KEY_BYTES = 32
_COUNTER_BLOCK = b"\x00" * 16


class EntropySource:
    """
    Injectable randomness capability

    Subclasses implement either random_bytes() or rand_int(); shuffle()
    is derived from rand_int().
    """

    def random_bytes(self, n: int) -> bytes:
        raise NotImplementedError

    def rand_int(self, n: int) -> int:
        """
        Uniform integer in [0, n)
        Rejection sampling over the smallest covering bit mask, so the
        result is unbiased for any n, not only powers of two
        """
        if not isinstance(n, int) or isinstance(n, bool) or n < 1:
            raise InvalidArgument("n", n, "range size must be a positive integer")
        if n == 1:
            return 0

        bits = (n - 1).bit_length()
        size = (bits + 7) // 8
        mask = (1 << bits) - 1
        while True:
            value = int.from_bytes(self.random_bytes(size), "big") & mask
            if value < n:
                return value

    def shuffle(self, seq: Sequence[T]) -> List[T]:
        """Return a uniformly random permutation of seq (Fisher-Yates)"""
        items = list(seq)
        for i in range(len(items) - 1, 0, -1):
            j = self.rand_int(i + 1)
            items[i], items[j] = items[j], items[i]
        return items


class CounterModeEntropySource(EntropySource):
    """AES-256-CTR keystream seeded from os.urandom"""

    def __init__(self, key: Optional[bytes] = None):
        if key is None:
            key = _read_os_key()
            seeded = "os.urandom"
        else:
            if not isinstance(key, (bytes, bytearray)) or len(key) != KEY_BYTES:
                raise InvalidArgument("key", "<redacted>", f"must be exactly {KEY_BYTES} bytes")
            seeded = "explicit key"

        try:
            cipher = Cipher(algorithms.AES(bytes(key)), modes.CTR(_COUNTER_BLOCK))
            self._encryptor = cipher.encryptor()
        except (UnsupportedAlgorithm, ValueError) as e:
            raise EntropySourceFailure(f"AES-CTR keystream unavailable: {e}") from e

        # Guards the keystream position
        self._lock = threading.Lock()
        log_entropy_source_created(type(self).__name__, seeded)

    def random_bytes(self, n: int) -> bytes:
        if n < 0:
            raise InvalidArgument("n", n, "byte count must not be negative")
        with self._lock:
            return self._encryptor.update(b"\x00" * n)


def _read_os_key() -> bytes:
    """Read the cipher key from the OS secure random source"""
    try:
        key = os.urandom(KEY_BYTES)
    except (OSError, NotImplementedError) as e:
        raise EntropySourceFailure(f"OS secure random source failed: {e}") from e
    if len(key) != KEY_BYTES:
        raise EntropySourceFailure(
            f"OS secure random source returned {len(key)} bytes, expected {KEY_BYTES}"
        )
    return key


def default_entropy_source() -> CounterModeEntropySource:
    """Fresh secure entropy source, share it explicitly if needed"""
    return CounterModeEntropySource()
