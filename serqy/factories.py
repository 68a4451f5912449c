import typing
from .types import *
from .config import ValuesConfig, PairsConfig

if typing.TYPE_CHECKING:
    from .series import Series

def from_values(values: Iterable[V], index: Optional[Iterable[K]] = None, baked: bool = False) -> 'Series[K, V]':
    """create series from values, keyed by index or by 0, 1, 2, ..."""
    from .series import Series
    return Series(ValuesConfig(values=values, index=index, baked=baked))

def from_pairs(pairs: Iterable[Tuple[K, V]], baked: bool = False) -> 'Series[K, V]':
    """create series from (key, value) pairs"""
    from .series import Series
    return Series(PairsConfig(pairs=pairs, baked=baked))

def empty() -> 'Series[Any, Any]':
    """create empty series"""
    from .series import Series
    return Series()

# --- aliases ---
from .series import Series as S
