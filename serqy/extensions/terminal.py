from __future__ import annotations
import typing
from collections.abc import Mapping
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..series import Series


class TerminalAccessor(Generic[K, V]):
    """conversions out of a series. every one of them bakes the series."""

    def __init__(self, series_instance: 'Series[K, V]'):
        self._series = series_instance

    def list(self) -> List[V]:
        """convert to list of values"""
        return self._series.to_array()

    def pairs(self) -> List[Pair]:
        """convert to list of (key, value) pairs"""
        return self._series.to_pairs()

    def keys(self) -> List[K]:
        """convert to list of keys"""
        return [pair.key for pair in self._series._materialize()]

    def dict(self) -> Dict[K, V]:
        """convert to dictionary keyed by index. with duplicate keys the last value wins."""
        return {key: value for key, value in self._series._materialize()}

    def array(self) -> np.ndarray:
        """convert values to numpy array"""
        return np.array(self.list())

    def pandas(self, name: Optional[str] = None) -> pd.Series:
        """convert to pandas series, keeping the keys as its index"""
        pairs = self._series._materialize()
        values = [pair.value for pair in pairs]
        keys = [pair.key for pair in pairs]
        # pin the dtype for empty input, pandas would otherwise guess
        dtype = object if not values else None
        return pd.Series(values, index=keys, name=name, dtype=dtype)

    def df(self, selector: Optional[RowSelector[V]] = None) -> pd.DataFrame:
        """
        inflate to a pandas dataframe with one row per value, indexed by key.
        mapping rows become columns, anything else lands in a single 'value' column.
        """
        pairs = self._series._materialize()
        rows = [selector(pair.value) if selector else pair.value for pair in pairs]
        keys = [pair.key for pair in pairs]
        if rows and all(isinstance(row, Mapping) for row in rows):
            return pd.DataFrame([dict(row) for row in rows], index=keys)
        return pd.DataFrame({'value': rows}, index=keys)

    def count(self) -> int:
        """count pairs"""
        return len(self._series._materialize())
