"""Query parameter types and the parameter collection bound to a command."""

from bqprovider.parameters.collection import BigQueryParameterCollection
from bqprovider.parameters.parameter import BigQueryParameter
from bqprovider.parameters.types import BigQueryDbType, ParameterDirection, infer_db_type

__all__ = (
    "BigQueryDbType",
    "BigQueryParameter",
    "BigQueryParameterCollection",
    "ParameterDirection",
    "infer_db_type",
)
