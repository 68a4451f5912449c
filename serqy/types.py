from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, NamedTuple
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

# (value, position) -> new value. position is zero-based within the series, not the key.
SelectorFn = Callable[[V, int], U]
RowSelector = Callable[[V], Any]


class Pair(NamedTuple):
    """a (key, value) pair, the unit moved through a series"""
    key: Any
    value: Any


# a zero-arg producer of a fresh pair iterator
PairSource = Callable[[], Iterator[Pair]]


# --- errors ---

class SeriesError(Exception):
    """base class for every error raised by serqy"""
    pass


class ConfigurationError(SeriesError, ValueError):
    """the constructor argument has no recognizable shape or mixes exclusive fields"""
    pass


class LengthMismatchError(SeriesError, ValueError):
    """
    index and values differ in count.

    when detected during lockstep iteration only the shorter side is counted exactly,
    the longer side is reported as a lower bound (exact=False).
    """

    def __init__(self, index_count: int, values_count: int, exact: bool = True):
        self.index_count = index_count
        self.values_count = values_count
        self.exact = exact
        if exact:
            detail = f"index has {index_count} keys, values has {values_count} items"
        elif index_count < values_count:
            detail = f"index has {index_count} keys, values has at least {values_count} items"
        else:
            detail = f"index has at least {index_count} keys, values has {values_count} items"
        super().__init__(f"index and values differ in length: {detail}")
