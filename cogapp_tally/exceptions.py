"""Exception classes for cogapp_tally processors.

Provides structured error handling with actionable error messages.
"""


class TallyError(Exception):
    """Base exception for all cogapp_tally errors."""

    pass


class ConfigurationError(TallyError):
    """Raised when configuration is invalid or incomplete.

    Example:
        raise ConfigurationError(
            "count_name must be a non-empty string. "
            "Check the COGAPP_TALLY_COUNT_NAME environment variable."
        )
    """

    pass


class ColumnNotFoundError(TallyError):
    """Raised when grouping or weight columns are missing from a DataFrame.

    Automatically lists available columns to help debugging.

    Args:
        processor_name: Name of the processor where the error occurred
        missing_columns: Set of column names that are missing
        available_columns: List of columns that exist in the DataFrame

    Attributes:
        processor_name: Name of the processor (included in error message)
        missing_columns: Set of missing column names
        available_columns: List of available column names

    Example:
        raise ColumnNotFoundError(
            "PolarsPropProcessor",
            {"buyer_country"},
            ["sale_id", "artwork_id", "sale_price_usd"]
        )
    """

    def __init__(
        self,
        processor_name: str,
        missing_columns: set[str],
        available_columns: list[str],
    ) -> None:
        self.processor_name = processor_name
        self.missing_columns = missing_columns
        self.available_columns = available_columns

        message = (
            f"[{processor_name}] Missing required columns: {sorted(missing_columns)}. "
            f"Available columns: {sorted(available_columns)}"
        )
        super().__init__(message)


class TypeMismatchError(TallyError):
    """Raised when a weight column does not hold numeric values.

    Args:
        processor_name: Name of the processor where the error occurred
        column: Name of the offending weight column
        dtype: Data type found for the column

    Example:
        raise TypeMismatchError("PolarsCountProcessor", "buyer_country", "String")
    """

    def __init__(self, processor_name: str, column: str, dtype: object) -> None:
        self.processor_name = processor_name
        self.column = column
        self.dtype = dtype

        message = (
            f"[{processor_name}] Weight column '{column}' must be numeric, got {dtype}. "
            f"Cast it first or drop wt to count rows instead."
        )
        super().__init__(message)
