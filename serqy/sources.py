from __future__ import annotations
import logging
from collections.abc import Sequence

import numpy as np
from .types import *

logger = logging.getLogger(__name__)

# first key of a synthesized index
DEFAULT_INDEX_START = 0

_MISSING = object()


class LazySequence(Generic[T]):
    """
    one view over anything that can feed a series: arrays and arbitrary iterables alike.

    arrays have a known length and can be walked any number of times. an iterator
    (an object that is its own iterator, e.g. a generator) is one-shot: the first walk
    consumes it and every later walk yields nothing.
    """

    def __init__(self, producer: Callable[[], Iterable[T]], length: Optional[int] = None,
                 one_shot: bool = False, field_name: str = 'values'):
        self._producer = producer
        self.length = length
        self.one_shot = one_shot
        self.field_name = field_name
        self._spent = False

    @classmethod
    def adapt(cls, data: Any, field_name: str) -> 'LazySequence':
        """adapt caller input, tagging it with the config field it came from"""
        if isinstance(data, LazySequence):
            return data
        if isinstance(data, (str, bytes)):
            raise ConfigurationError(f"'{field_name}' must be an array or an iterable of items, "
                                     f"not a {type(data).__name__}")
        if isinstance(data, np.ndarray):
            # hand out native python scalars, not numpy ones
            return cls(data.tolist, length=len(data), field_name=field_name)
        if isinstance(data, Sequence):
            return cls(lambda: data, length=len(data), field_name=field_name)

        try:
            iterator = iter(data)
        except TypeError:
            raise ConfigurationError(f"'{field_name}' must be an array or an iterable, "
                                     f"got {type(data).__name__}") from None
        if iterator is data:
            return cls(lambda: data, one_shot=True, field_name=field_name)
        return cls(lambda: data, field_name=field_name)

    @property
    def is_spent(self) -> bool:
        return self.one_shot and self._spent

    def __iter__(self) -> Iterator[T]:
        if self.one_shot:
            if self._spent:
                return iter(())
            self._spent = True
        return iter(self._producer())

    def __repr__(self) -> str:
        kind = 'one-shot' if self.one_shot else 'restartable'
        return f"LazySequence(field={self.field_name!r}, {kind}, length={self.length})"


# --- pair construction ---

def default_pairs(values: LazySequence) -> Iterator[Pair]:
    """pair values with sequential integer keys generated in step with them"""
    if values.is_spent:
        _warn_spent(values)
        return
    for key, value in enumerate(values, DEFAULT_INDEX_START):
        yield Pair(key, value)


def aligned_pairs(index: LazySequence, values: LazySequence) -> Iterator[Pair]:
    """
    zip keys and values positionally, pulling one of each per pair.

    raises LengthMismatchError as soon as one side runs out while the other still
    produces an item. pairs already yielded stay yielded.
    """
    for source in (index, values):
        if source.is_spent:
            _warn_spent(source)
            return

    keys = iter(index)
    count = 0
    for value in values:
        key = next(keys, _MISSING)
        if key is _MISSING:
            raise _mismatch(index, values, count, count + 1)
        yield Pair(key, value)
        count += 1
    if next(keys, _MISSING) is not _MISSING:
        raise _mismatch(index, values, count + 1, count)


def checked_pairs(pairs: LazySequence) -> Iterator[Pair]:
    """yield caller supplied pairs, rejecting anything that is not a (key, value) item"""
    if pairs.is_spent:
        _warn_spent(pairs)
        return
    for position, item in enumerate(pairs):
        if isinstance(item, Pair):
            yield item
            continue
        try:
            if isinstance(item, (str, bytes)):
                raise TypeError(item)
            key, value = item
        except (TypeError, ValueError):
            raise ConfigurationError(f"'{pairs.field_name}' item at position {position} "
                                     f"is not a (key, value) pair: {item!r}") from None
        yield Pair(key, value)


def _mismatch(index: LazySequence, values: LazySequence,
              index_seen: int, values_seen: int) -> LengthMismatchError:
    if index.length is not None and values.length is not None:
        return LengthMismatchError(index.length, values.length)
    return LengthMismatchError(index_seen, values_seen, exact=False)


def _warn_spent(source: LazySequence) -> None:
    logger.warning(f"'{source.field_name}' is a single-pass iterable that was already consumed, "
                   f"yielding an empty sequence. bake() the series to read it more than once.")
