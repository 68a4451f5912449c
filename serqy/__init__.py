r"""
'   ______ ______ ______  ______ __  __
'  / ___// ____// __  / / __  / \ \/ /
'  \__ \/ __/  / /_/ / / / / /   \  /
' ___/ / /___ / _, _/ / /_/ /    / /
'/____/_____//_/ |_|  \___\_\   /_/
"""

# expose the main classes
from .series import Series
from .index import Index

# expose the factory functions
from .factories import (
    from_values,
    from_pairs,
    empty,
    S
)

# expose configuration and supporting types
from .config import EmptyConfig, ValuesConfig, PairsConfig, resolve_config
from .sources import LazySequence, DEFAULT_INDEX_START
from .types import (
    Pair,
    SeriesError,
    ConfigurationError,
    LengthMismatchError
)

# define what `import *` does
__all__ = [
    "Series",
    "Index",
    "from_values",
    "from_pairs",
    "empty",
    "S",
    "EmptyConfig",
    "ValuesConfig",
    "PairsConfig",
    "resolve_config",
    "LazySequence",
    "DEFAULT_INDEX_START",
    "Pair",
    "SeriesError",
    "ConfigurationError",
    "LengthMismatchError"
]
