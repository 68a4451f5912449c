from __future__ import annotations
import typing
from functools import partial
from itertools import islice
from numbers import Integral
from ..types import *
from ..sources import default_pairs, aligned_pairs

if typing.TYPE_CHECKING:
    from ..series import Series
    from ..index import Index


# --- stateless pair transforms ---
# each wraps a pair source in a new one without consuming it

def select_pairs(source: PairSource, selector: SelectorFn[V, U]) -> PairSource:
    def selected() -> Iterator[Pair]:
        for position, (key, value) in enumerate(source()):
            yield Pair(key, selector(value, position))
    return selected


def skip_pairs(source: PairSource, count: int) -> PairSource:
    if count <= 0:
        return source
    # islice drops whole pairs, so keys and values always advance together
    return lambda: islice(source(), count, None)


class _CoreOperations(Generic[K, V]):
    def select(self: 'Series[K, V]', selector: SelectorFn[V, U]) -> 'Series[K, U]':
        """
        project each value with selector(value, position). keys are kept.
        position counts from zero within this series and is unrelated to the key.
        """
        from ..series import Series
        if not callable(selector):
            raise TypeError(f"selector must be callable, got {type(selector).__name__}")
        return Series._from_source(select_pairs(self._iter_pairs, selector))

    def skip(self: 'Series[K, V]', count: int) -> 'Series[K, V]':
        """skip the first 'count' pairs"""
        from ..series import Series
        if isinstance(count, bool) or not isinstance(count, Integral):
            raise TypeError(f"skip count must be an integer, got {type(count).__name__}")
        if count <= 0:
            # nothing dropped, share the cache if there is one
            return Series._from_source(self._iter_pairs, cache=self._cache)
        return Series._from_source(skip_pairs(self._iter_pairs, int(count)))

    def with_index(self: 'Series[K, V]',
                   new_index: Union[Iterable[U], 'Index[U]', 'Series[Any, U]']) -> 'Series[U, V]':
        """
        same values, new keys. lengths are not compared here; a mismatch raises
        LengthMismatchError when the new series is walked.
        """
        from ..series import Series, as_key_sequence
        keys = as_key_sequence(new_index)
        return Series._from_source(partial(aligned_pairs, keys, self._values_sequence()))

    def reset_index(self: 'Series[K, V]') -> 'Series[int, V]':
        """same values keyed 0, 1, 2, ..."""
        from ..series import Series
        return Series._from_source(partial(default_pairs, self._values_sequence()))
