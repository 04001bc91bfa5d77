"""
Pytest fixtures for xkcdphrase tests
"""

from typing import Iterable, List, Optional, Sequence

import pytest

from xkcdphrase.config import get_settings
from xkcdphrase.entropy import EntropySource


class ScriptedEntropySource(EntropySource):
    """
    Deterministic stand-in for tests

    rand_int() pops scripted values (a range of size 1 needs none),
    shuffle() applies scripted index orders, or keeps the order when
    none are left.
    """

    def __init__(self, ints: Iterable[int] = (), permutations: Iterable[Sequence[int]] = ()):
        self.ints: List[int] = list(ints)
        self.permutations: List[Sequence[int]] = list(permutations)
        self.requested_ranges: List[int] = []

    def rand_int(self, n: int) -> int:
        self.requested_ranges.append(n)
        if n == 1:
            return 0
        value = self.ints.pop(0)
        assert 0 <= value < n, f"scripted value {value} outside [0, {n})"
        return value

    def shuffle(self, seq):
        if not self.permutations:
            return list(seq)
        order = self.permutations.pop(0)
        return [seq[i] for i in order]


class ScriptedBytesSource(EntropySource):
    """Feeds fixed bytes to the base class rejection sampler"""

    def __init__(self, data: bytes):
        self.data = bytearray(data)

    def random_bytes(self, n: int) -> bytes:
        chunk, self.data = bytes(self.data[:n]), self.data[n:]
        assert len(chunk) == n, "scripted bytes exhausted"
        return chunk


@pytest.fixture
def scripted():
    """Factory for scripted entropy sources"""
    def factory(ints=(), permutations=()):
        return ScriptedEntropySource(ints, permutations)
    return factory


@pytest.fixture
def xkcd_words() -> List[str]:
    return ["correct", "horse", "battery", "staple"]


@pytest.fixture
def wordlist_file(tmp_path):
    """Write a word list file and return its path"""
    def factory(content: str, name: Optional[str] = "words.txt"):
        path = tmp_path / name
        path.write_bytes(content.encode("utf-8"))
        return str(path)
    return factory


@pytest.fixture
def xkcd_wordlist(wordlist_file, xkcd_words) -> str:
    return wordlist_file("\n".join(xkcd_words) + "\n")


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch, tmp_path):
    """Isolate tests from any .env file and cached settings"""
    monkeypatch.chdir(tmp_path)
    for name in ("XKCD_WORDLIST", "XKCD_WORDS", "XKCD_DIGITS", "XKCD_COUNT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def scripted_bytes():
    """Factory for byte-scripted entropy sources"""
    return ScriptedBytesSource
