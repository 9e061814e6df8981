from itertools import chain
from typing import Iterable, Iterator, TypeVar

T = TypeVar('T')


def flatten(ls: Iterable[Iterable[T]]) -> Iterator[T]:
    # flatten(['ABC', 'DEF']) --> A B C D E F
    """Flatten one level of nesting."""
    return chain.from_iterable(ls)
