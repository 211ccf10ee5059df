"""DuckDB SQL processors for tallies and proportions.

Each processor registers its input DataFrame as `_input`, runs one SQL
statement and returns a pandas DataFrame. Results match the Polars
processors row for row, including group order and sort tie-breaks.

Processors:
    - DuckDBCountProcessor: Group-by counts or weighted sums
    - DuckDBPropProcessor: Group-by proportions

Connection Configuration:
    By default, processors use in-memory DuckDB. To use a persistent database:

        from cogapp_tally import configure
        configure(db_path="/path/to/database.duckdb")

    Or set the DUCKDB_PROCESSOR_PATH environment variable.
"""

from .count import DuckDBCountProcessor
from .prop import DuckDBPropProcessor

__all__ = [
    "DuckDBCountProcessor",
    "DuckDBPropProcessor",
]
