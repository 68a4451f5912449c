from __future__ import annotations
import logging
from collections.abc import Mapping
from dataclasses import dataclass

import pandas as pd
from .types import *

logger = logging.getLogger(__name__)

_CONFIG_FIELDS = frozenset({'values', 'index', 'pairs', 'baked'})


# --- configuration variants ---
# every accepted constructor argument is resolved to exactly one of these, once, at entry

@dataclass(frozen=True)
class EmptyConfig:
    """no values at all. an empty series needs no evaluation, so it is born baked."""
    baked: bool = True


@dataclass(frozen=True)
class ValuesConfig:
    """values with an optional index. a missing index means sequential integer keys."""
    values: Any
    index: Any = None
    baked: bool = False


@dataclass(frozen=True)
class PairsConfig:
    """pre-paired (key, value) items"""
    pairs: Any
    baked: bool = False


SeriesConfig = Union[EmptyConfig, ValuesConfig, PairsConfig]


def resolve_config(config: Any) -> SeriesConfig:
    """
    map a constructor argument onto a configuration variant.

    accepts None, a variant instance, a mapping with 'values'/'index'/'pairs'/'baked',
    a pandas series, an array of values or any other iterable of values.
    """
    if config is None:
        return EmptyConfig()

    if isinstance(config, (EmptyConfig, ValuesConfig, PairsConfig)):
        resolved = config
    elif isinstance(config, Mapping):
        resolved = _resolve_mapping(config)
    elif isinstance(config, pd.Series):
        resolved = ValuesConfig(values=config.tolist(), index=config.index.tolist())
    elif isinstance(config, (str, bytes)):
        raise ConfigurationError(f"cannot build a series from a {type(config).__name__}, "
                                 f"pass a list of values or a config mapping")
    elif _is_iterable(config):
        resolved = ValuesConfig(values=config)
    else:
        raise ConfigurationError(f"unrecognized series configuration of type {type(config).__name__}")

    if not isinstance(resolved.baked, bool):
        raise ConfigurationError(f"'baked' must be a bool, got {type(resolved.baked).__name__}")
    logger.debug(f"resolved series configuration to {type(resolved).__name__}")
    return resolved


def _resolve_mapping(config: Mapping) -> SeriesConfig:
    unknown = set(config) - _CONFIG_FIELDS
    if unknown:
        raise ConfigurationError(f"unknown series configuration fields: {sorted(unknown, key=str)}")

    values = config.get('values')
    index = config.get('index')
    pairs = config.get('pairs')
    baked = config.get('baked', False)
    if not isinstance(baked, bool):
        raise ConfigurationError(f"'baked' must be a bool, got {type(baked).__name__}")

    if values is not None and pairs is not None:
        raise ConfigurationError("'values' and 'pairs' are mutually exclusive")
    if pairs is not None:
        if index is not None:
            raise ConfigurationError("'index' cannot be combined with 'pairs', pairs already carry their keys")
        return PairsConfig(pairs=pairs, baked=baked)
    if values is not None:
        return ValuesConfig(values=values, index=index, baked=baked)
    if index is not None:
        raise ConfigurationError("'index' was supplied without 'values'")
    # an empty mapping is the empty series, baked or not there is nothing to evaluate
    return EmptyConfig()


def _is_iterable(obj: Any) -> bool:
    try:
        iter(obj)
    except TypeError:
        return False
    return True
