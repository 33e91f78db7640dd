"""Type guard functions for runtime type checking in bqprovider."""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from typing_extensions import TypeGuard

    from bqprovider.parameters.parameter import BigQueryParameter

__all__ = ("is_parameter_name", "is_query_parameter")


def is_query_parameter(obj: Any) -> "TypeGuard[BigQueryParameter]":
    """Check if an object is a parameter the collection can hold.

    Args:
        obj: The object to check

    Returns:
        True if the object is a BigQueryParameter, False otherwise
    """
    from bqprovider.parameters.parameter import BigQueryParameter

    return isinstance(obj, BigQueryParameter)


def is_parameter_name(obj: Any) -> "TypeGuard[str]":
    """Check if a lookup key addresses a parameter by name rather than position."""
    return isinstance(obj, str)
