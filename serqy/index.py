from __future__ import annotations
from .types import *
from .sources import LazySequence, DEFAULT_INDEX_START


class Index(Generic[K]):
    """
    the ordered keys of a series. duplicates are allowed.

    keys may come from an array or a lazy iterable; counting a lazy index walks it
    and caches the keys, so a single-pass source should be counted before iterating.
    """

    def __init__(self, keys: Union[Iterable[K], 'Index[K]', None] = None):
        if keys is None:
            keys = []
        if isinstance(keys, Index):
            self._keys = keys.as_sequence()
        else:
            self._keys = LazySequence.adapt(keys, 'index')
        self._cache: Optional[List[K]] = None

    @classmethod
    def default(cls, length: int) -> 'Index[int]':
        """sequential integer keys for `length` values"""
        return cls(range(DEFAULT_INDEX_START, DEFAULT_INDEX_START + length))

    @property
    def is_baked(self) -> bool:
        return self._cache is not None

    def as_sequence(self) -> LazySequence:
        """the keys as a lazy sequence, read from the cache once baked"""
        if self._cache is not None:
            return LazySequence.adapt(self._cache, 'index')
        return self._keys

    def _materialize(self) -> List[K]:
        if self._cache is None:
            self._cache = list(self._keys)
        return self._cache

    def bake(self) -> 'Index[K]':
        if self.is_baked:
            return self
        baked = Index(self._materialize())
        baked._cache = self._cache
        return baked

    def to_array(self) -> List[K]:
        return list(self._materialize())

    def count(self) -> int:
        if self._cache is not None:
            return len(self._cache)
        if self._keys.length is not None:
            return self._keys.length
        return len(self._materialize())

    def __len__(self) -> int:
        return self.count()

    def __iter__(self) -> Iterator[K]:
        if self._cache is not None:
            return iter(self._cache)
        return iter(self._keys)

    def __repr__(self) -> str:
        if self._cache is not None:
            return f"Index({self._cache!r})"
        return f"Index(lazy, field={self._keys.field_name!r})"
