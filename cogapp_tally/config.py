"""Module-level configuration for cogapp_tally.

Defaults can be overridden with environment variables or at runtime:

    from cogapp_tally import configure
    configure(count_name="total", prop_name="share")

Environment variables:
    COGAPP_TALLY_COUNT_NAME: default count column name (``n``)
    COGAPP_TALLY_PROP_NAME: default proportion column name (``proportion``)
    DUCKDB_PROCESSOR_PATH: database used by DuckDB processors (``:memory:``)
"""

import os
from pathlib import Path
from typing import Any

import duckdb

from .exceptions import ConfigurationError

_config: dict[str, Any] = {
    "count_name": os.environ.get("COGAPP_TALLY_COUNT_NAME", "n"),
    "prop_name": os.environ.get("COGAPP_TALLY_PROP_NAME", "proportion"),
    "db_path": os.environ.get("DUCKDB_PROCESSOR_PATH", ":memory:"),
}


def _check_name(key: str, value: Any) -> str:
    if not isinstance(value, str) or not value:
        raise ConfigurationError(f"{key} must be a non-empty string, got {value!r}")
    return value


def configure(
    count_name: str | None = None,
    prop_name: str | None = None,
    db_path: str | Path | None = None,
) -> None:
    """Override default settings.

    Args:
        count_name: Default name for count columns added by tally/count.
        prop_name: Default name for the proportion column added by prop.
        db_path: Path to DuckDB database file, or ":memory:" for in-memory.

    Raises:
        ConfigurationError: If a column name is empty or not a string.
    """
    if count_name is not None:
        _config["count_name"] = _check_name("count_name", count_name)
    if prop_name is not None:
        _config["prop_name"] = _check_name("prop_name", prop_name)
    if db_path is not None:
        _config["db_path"] = str(db_path)


def get_setting(key: str) -> Any:
    """Return a configured value, validating column names on the way out."""
    if key not in _config:
        raise ConfigurationError(f"Unknown setting '{key}'. Known settings: {sorted(_config)}")
    value = _config[key]
    if key.endswith("_name"):
        return _check_name(key, value)
    return value


def get_connection() -> duckdb.DuckDBPyConnection:
    """Get a DuckDB connection using the configured database path."""
    return duckdb.connect(_config["db_path"])
