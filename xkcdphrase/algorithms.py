"""
Sampling primitives driven by an EntropySource
"""

from typing import List, Sequence, TypeVar

from xkcdphrase.entropy import EntropySource
from xkcdphrase.errors import InsufficientWordlist, InvalidArgument

T = TypeVar("T")


def choose(source: EntropySource, k: int, population: Sequence[T]) -> List[T]:
    """
    Uniformly random k-subset of population, without replacement

    Runs a partial Fisher-Yates over the indices, then returns the chosen
    items in population order. Every subset of size k is equally likely;
    ordering is left to shuffle().
    """
    if k < 0:
        raise InvalidArgument("k", k, "sample size must not be negative")
    size = len(population)
    if k > size:
        raise InsufficientWordlist(requested=k, available=size)

    indices = list(range(size))
    for i in range(k):
        j = i + source.rand_int(size - i)
        indices[i], indices[j] = indices[j], indices[i]

    return [population[i] for i in sorted(indices[:k])]


def shuffle(source: EntropySource, seq: Sequence[T]) -> List[T]:
    """Uniformly random permutation of seq"""
    return source.shuffle(seq)


def pick(source: EntropySource, seq: Sequence[T]) -> T:
    """One uniformly random element of seq"""
    if not seq:
        raise InvalidArgument("seq", seq, "cannot pick from an empty sequence")
    return seq[source.rand_int(len(seq))]
