from __future__ import annotations

import logging
from functools import partial

from .types import *
from .config import resolve_config, EmptyConfig, ValuesConfig, PairsConfig, SeriesConfig
from .sources import LazySequence, default_pairs, aligned_pairs, checked_pairs
from .index import Index

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor

logger = logging.getLogger(__name__)


# --- base series implementation ---

class _BaseSeries(Generic[K, V]):
    def _setup(self, source: PairSource, cache: Optional[List[Pair]] = None) -> None:
        """hold a pair source and the write-once cache that baking fills"""
        self._source = source
        self._cache = cache
        self._failure: Optional[Exception] = None

    @property
    def is_baked(self) -> bool:
        return self._cache is not None

    def _iter_pairs(self) -> Iterator[Pair]:
        """a fresh pair iterator, read from the cache once baked"""
        if self._cache is not None:
            return iter(self._cache)
        return self._source()

    def _materialize(self) -> List[Pair]:
        """
        walk the pair source once and cache the result. a failed walk caches nothing
        and its error is raised again by every later call, the source is not re-walked.
        """
        if self._failure is not None:
            raise self._failure
        if self._cache is None:
            logger.debug("baking series")
            try:
                pairs = list(self._source())
            except Exception as e:
                self._failure = e
                raise
            self._cache = pairs
            logger.debug(f"baked series of {len(pairs)} pairs")
        return self._cache

    def _values_sequence(self, field_name: str = 'values') -> LazySequence:
        """this series' values as a lazy sequence, for re-pairing with other keys"""
        if self._cache is not None:
            return LazySequence.adapt([pair.value for pair in self._cache], field_name)
        return LazySequence(lambda: (pair.value for pair in self._iter_pairs()), field_name=field_name)

    def __iter__(self) -> Iterator[V]:
        return (pair.value for pair in self._iter_pairs())

    def __len__(self) -> int:
        return self.to.count()


# --- main series class ---

class Series(
    _BaseSeries[K, V],
    _CoreOperations[K, V]
):
    """
    an ordered, index-aligned, lazily evaluated sequence of values.

    `config` is one of:
      - None: an empty series.
      - an array or iterable of values, keyed 0, 1, 2, ...
      - a mapping with 'values' (and optionally 'index'), or 'pairs', plus 'baked'.
      - a pandas series, keeping its index.
      - a ValuesConfig / PairsConfig / EmptyConfig.

    nothing is iterated at construction unless 'baked' is set. generators and other
    single-pass inputs can be walked once; bake() a series that is read more than once.
    """

    def __init__(self, config: Any = None):
        resolved = resolve_config(config)
        self._init_from_config(resolved)
        self.to = TerminalAccessor(self)
        if resolved.baked:
            self._materialize()

    @classmethod
    def _from_source(cls, source: PairSource, cache: Optional[List[Pair]] = None) -> 'Series':
        """wrap an existing pair source, skipping config resolution"""
        series = cls.__new__(cls)
        series._setup(source, cache)
        series.to = TerminalAccessor(series)
        return series

    def _init_from_config(self, config: SeriesConfig) -> None:
        if isinstance(config, EmptyConfig):
            self._init_empty()
        elif isinstance(config, ValuesConfig):
            if config.index is None:
                self._init_values(config.values)
            else:
                self._init_indexed(config.values, config.index)
        elif isinstance(config, PairsConfig):
            self._init_pairs(config.pairs)
        else:
            raise ConfigurationError(f"unsupported configuration variant {type(config).__name__}")

    def _init_empty(self) -> None:
        empty: List[Pair] = []
        self._setup(partial(iter, empty), cache=empty)

    def _init_values(self, values: Any) -> None:
        sequence = LazySequence.adapt(values, 'values')
        self._setup(partial(default_pairs, sequence))

    def _init_indexed(self, values: Any, index: Any) -> None:
        sequence = LazySequence.adapt(values, 'values')
        keys = as_key_sequence(index)
        if keys.length is not None and sequence.length is not None and keys.length != sequence.length:
            raise LengthMismatchError(keys.length, sequence.length)
        self._setup(partial(aligned_pairs, keys, sequence))

    def _init_pairs(self, pairs: Any) -> None:
        sequence = LazySequence.adapt(pairs, 'pairs')
        self._setup(partial(checked_pairs, sequence))

    # --- access ---

    def get_index(self) -> Index[K]:
        """the keys of this series. on an unbaked series, walking the index walks the pairs."""
        if self._cache is not None:
            index = Index([pair.key for pair in self._cache])
            return index.bake()
        return Index(LazySequence(lambda: (pair.key for pair in self._iter_pairs()), field_name='index'))

    def bake(self) -> 'Series[K, V]':
        """force evaluation. returns self when already baked, otherwise a new baked series."""
        if self.is_baked:
            return self
        pairs = self._materialize()
        return Series._from_source(partial(iter, pairs), cache=pairs)

    def to_array(self) -> List[V]:
        """the values as a list. bakes this series on first call."""
        return [pair.value for pair in self._materialize()]

    def to_pairs(self) -> List[Pair]:
        """the (key, value) pairs as a list. bakes this series on first call."""
        return list(self._materialize())

    def inflate(self, selector: Optional[RowSelector[V]] = None):
        """convert to a pandas dataframe, one row per value"""
        return self.to.df(selector)

    def __str__(self) -> str:
        return self.to.pandas().to_string()

    def __repr__(self) -> str:
        if self._cache is not None:
            return f"Series(baked, length={len(self._cache)})"
        return "Series(lazy)"


def as_key_sequence(keys: Any) -> LazySequence:
    """adapt anything accepted as an index: an Index, a Series (its values) or an array/iterable"""
    if isinstance(keys, Index):
        return keys.as_sequence()
    if isinstance(keys, Series):
        return keys._values_sequence('index')
    return LazySequence.adapt(keys, 'index')
