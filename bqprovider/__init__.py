"""bqprovider: query parameters for BigQuery commands."""

from bqprovider import exceptions
from bqprovider.__metadata__ import __version__
from bqprovider.config import ParameterCollectionConfig, get_global_config, set_global_config
from bqprovider.exceptions import (
    BQProviderError,
    DuplicateParameterNameError,
    InvalidArgumentError,
    InvalidOperationError,
    ParameterIndexError,
)
from bqprovider.parameters import (
    BigQueryDbType,
    BigQueryParameter,
    BigQueryParameterCollection,
    ParameterDirection,
)
from bqprovider.utils.logging import configure_logging, get_logger

__all__ = (
    "__version__",
    "BQProviderError",
    "BigQueryDbType",
    "BigQueryParameter",
    "BigQueryParameterCollection",
    "DuplicateParameterNameError",
    "InvalidArgumentError",
    "InvalidOperationError",
    "ParameterCollectionConfig",
    "ParameterDirection",
    "ParameterIndexError",
    "configure_logging",
    "exceptions",
    "get_global_config",
    "get_logger",
    "set_global_config",
)
