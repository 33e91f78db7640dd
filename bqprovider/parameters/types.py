"""Core parameter types: declared BigQuery types and parameter directions."""

import datetime
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, Any, Final

if TYPE_CHECKING:
    from collections.abc import Mapping

__all__ = ("DB_TYPE_PYTHON_TYPES", "BigQueryDbType", "ParameterDirection", "infer_db_type", "is_value_compatible")


class BigQueryDbType(str, Enum):
    """Standard SQL types a BigQuery query parameter can be declared with."""

    STRING = "STRING"
    INT64 = "INT64"
    FLOAT64 = "FLOAT64"
    NUMERIC = "NUMERIC"
    BIGNUMERIC = "BIGNUMERIC"
    BOOL = "BOOL"
    BYTES = "BYTES"
    DATE = "DATE"
    DATETIME = "DATETIME"
    TIME = "TIME"
    TIMESTAMP = "TIMESTAMP"
    JSON = "JSON"

    def __str__(self) -> str:
        return self.value


class ParameterDirection(str, Enum):
    """Direction of a parameter relative to the query."""

    INPUT = "input"
    OUTPUT = "output"
    INPUT_OUTPUT = "input_output"
    RETURN_VALUE = "return_value"

    def __str__(self) -> str:
        return self.value


DB_TYPE_PYTHON_TYPES: "Final[Mapping[BigQueryDbType, tuple[type, ...]]]" = {
    BigQueryDbType.STRING: (str,),
    BigQueryDbType.INT64: (int,),
    BigQueryDbType.FLOAT64: (float, int),
    BigQueryDbType.NUMERIC: (Decimal, int, float),
    BigQueryDbType.BIGNUMERIC: (Decimal, int, float),
    BigQueryDbType.BOOL: (bool,),
    BigQueryDbType.BYTES: (bytes, bytearray, memoryview),
    BigQueryDbType.DATE: (datetime.date,),
    BigQueryDbType.DATETIME: (datetime.datetime,),
    BigQueryDbType.TIME: (datetime.time,),
    BigQueryDbType.TIMESTAMP: (datetime.datetime,),
    BigQueryDbType.JSON: (dict, list, str),
}

_INFERRED_TYPES: "Final[Mapping[type, BigQueryDbType]]" = {
    bool: BigQueryDbType.BOOL,
    int: BigQueryDbType.INT64,
    float: BigQueryDbType.FLOAT64,
    Decimal: BigQueryDbType.BIGNUMERIC,
    str: BigQueryDbType.STRING,
    bytes: BigQueryDbType.BYTES,
    datetime.date: BigQueryDbType.DATE,
    datetime.time: BigQueryDbType.TIME,
    dict: BigQueryDbType.JSON,
}


def infer_db_type(value: Any) -> BigQueryDbType:
    """Determine the BigQuery type for a python value.

    Args:
        value: The value to inspect.

    Returns:
        The matching type; STRING for ``None`` and unrecognized values.
    """
    value_type = type(value)
    if value_type is datetime.datetime:
        return BigQueryDbType.TIMESTAMP if value.tzinfo else BigQueryDbType.DATETIME
    return _INFERRED_TYPES.get(value_type, BigQueryDbType.STRING)


def is_value_compatible(value: Any, db_type: BigQueryDbType) -> bool:
    """Check whether a non-null value can be bound with the declared type."""
    if isinstance(value, bool):
        return db_type is BigQueryDbType.BOOL
    if isinstance(value, datetime.datetime):
        if db_type is BigQueryDbType.DATETIME:
            return value.tzinfo is None
        if db_type is BigQueryDbType.TIMESTAMP:
            return value.tzinfo is not None
        return False
    return isinstance(value, DB_TYPE_PYTHON_TYPES[db_type])
