"""cogapp_tally - count, tally and proportion helpers for Polars, pandas and DuckDB."""

from .config import configure, get_connection, get_setting
from .exceptions import (
    ColumnNotFoundError,
    ConfigurationError,
    TallyError,
    TypeMismatchError,
)
from .processors import Chain
from .verbs import add_count, add_tally, count, prop, tally

__version__ = "0.1.0"

__all__ = [
    # Verbs
    "add_count",
    "add_tally",
    "count",
    "prop",
    "tally",
    # Processors
    "Chain",
    # Configuration
    "configure",
    "get_connection",
    "get_setting",
    # Exceptions
    "ColumnNotFoundError",
    "ConfigurationError",
    "TallyError",
    "TypeMismatchError",
]
