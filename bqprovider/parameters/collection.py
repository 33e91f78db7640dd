"""Ordered, name-addressable collection of query parameters.

The collection backs a command's parameter list. Items keep their insertion
order, which is the order positional placeholders are bound in. Members are
tracked by identity. Name uniqueness is only enforced by ``validate()``, so
binding code may hold duplicate names while it rearranges parameters.
"""

import logging
import threading
from collections.abc import Iterable, Iterator, MutableSequence
from typing import Any, Optional, Union

from mypy_extensions import mypyc_attr

from bqprovider.config import ParameterCollectionConfig, get_global_config
from bqprovider.exceptions import (
    DuplicateParameterNameError,
    InvalidArgumentError,
    InvalidOperationError,
    ParameterIndexError,
)
from bqprovider.parameters.parameter import BigQueryParameter
from bqprovider.parameters.types import BigQueryDbType
from bqprovider.utils.logging import get_logger, log_with_context
from bqprovider.utils.type_guards import is_parameter_name, is_query_parameter

__all__ = ("BigQueryParameterCollection",)

logger = get_logger("parameters.collection")

_SYNC_ROOT = "sync_root"


def _check_type(value: Any) -> BigQueryParameter:
    if not is_query_parameter(value):
        msg = f"Invalid parameter type: expected BigQueryParameter, got {type(value).__name__}"
        raise InvalidArgumentError(msg)
    return value


@mypyc_attr(allow_interpreted_subclasses=True)
class BigQueryParameterCollection:
    """Parameters of a BigQuery command, addressable by position or by name."""

    __slots__ = ("_handles", "_items", "config")

    def __init__(
        self,
        parameters: Optional[Iterable[Any]] = None,
        config: Optional[ParameterCollectionConfig] = None,
    ) -> None:
        self._items: list[BigQueryParameter] = []
        self._handles: dict[str, threading.RLock] = {}
        self.config = config or get_global_config()
        if parameters is not None:
            self.add_range(parameters)

    @property
    def count(self) -> int:
        return len(self._items)

    @property
    def is_fixed_size(self) -> bool:
        return False

    @property
    def is_read_only(self) -> bool:
        return False

    @property
    def is_synchronized(self) -> bool:
        """Mutations are not synchronized; lock ``sync_root`` to coordinate callers."""
        return False

    @property
    def sync_root(self) -> "threading.RLock":
        """Handle for callers that coordinate access to the collection externally.

        Created on first access. ``dict.setdefault`` inserts atomically, so
        concurrent first readers all receive the same handle.
        """
        handle = self._handles.get(_SYNC_ROOT)
        if handle is None:
            handle = self._handles.setdefault(_SYNC_ROOT, threading.RLock())
        return handle

    def add(self, parameter: Any) -> int:
        """Append a parameter.

        Returns:
            Position of the appended parameter.

        Raises:
            InvalidArgumentError: If ``parameter`` is None or not a BigQueryParameter.
        """
        if parameter is None:
            msg = "Parameter can't be None"
            raise InvalidArgumentError(msg)
        self._items.append(_check_type(parameter))
        return len(self._items) - 1

    def add_parameter(self, name: str, db_type: BigQueryDbType, value: Any = None) -> int:
        """Create a parameter with the given name and declared type and append it."""
        return self.add(BigQueryParameter(name, db_type, value))

    def add_range(self, values: Iterable[Any]) -> None:
        """Append every BigQueryParameter in ``values``, skipping anything else."""
        self._items.extend(value for value in values if is_query_parameter(value))

    def insert(self, index: int, parameter: Any) -> None:
        """Insert a parameter before ``index``; ``index == count`` appends."""
        parameter = _check_type(parameter)
        if index < 0 or index > len(self._items):
            msg = f"Insert position {index} is out of range for a collection of {len(self._items)} parameters"
            raise ParameterIndexError(msg)
        self._items.insert(index, parameter)

    def remove(self, parameter: Any) -> None:
        """Remove a parameter by identity.

        Raises:
            InvalidArgumentError: If ``parameter`` is not a BigQueryParameter.
            InvalidOperationError: If ``parameter`` is not in the collection.
        """
        _check_type(parameter)
        index = self.index_of(parameter)
        if index < 0:
            msg = "Item to remove not found"
            raise InvalidOperationError(msg)
        del self._items[index]

    def remove_at(self, key: Union[int, str]) -> None:
        """Remove the parameter at a position or with a name."""
        if is_parameter_name(key):
            index = self._check_name(key)
        else:
            index = self._range_check(key)
        del self._items[index]

    def index_of(self, value: Any) -> int:
        """Position of a parameter (by identity) or of a parameter name, -1 if absent."""
        if value is None:
            return -1
        if is_parameter_name(value):
            for index, item in enumerate(self._items):
                if item.name == value:
                    return index
            return -1
        _check_type(value)
        for index, item in enumerate(self._items):
            if item is value:
                return index
        return -1

    def contains(self, value: Any) -> bool:
        return self.index_of(value) >= 0

    def get_parameter(self, key: Union[int, str]) -> BigQueryParameter:
        """Return the parameter at a position or with a name.

        Raises:
            ParameterIndexError: If the position is out of range or no parameter has the name.
        """
        if is_parameter_name(key):
            index = self.index_of(key)
            if index < 0:
                msg = f"Parameter '{key}' not found"
                raise ParameterIndexError(msg)
            return self._items[index]
        return self._items[self._range_check(key)]

    def set_parameter(self, key: Union[int, str], parameter: Any) -> None:
        """Replace the parameter at a position or with a name.

        An unnamed replacement that is not already stored at the target position
        is given the first free ``<prefix>N`` name.

        Raises:
            InvalidArgumentError: If ``parameter`` is not a BigQueryParameter, the
                position is out of range, or no parameter has the name.
        """
        if is_parameter_name(key):
            index = self.index_of(key)
            if index < 0:
                msg = "Wrong parameter name"
                raise InvalidArgumentError(msg)
        else:
            _check_type(parameter)
            index = key
            if index < 0 or index >= len(self._items):
                msg = f"Position {index} is out of range for a collection of {len(self._items)} parameters"
                raise InvalidArgumentError(msg)
        self._replace(index, parameter)

    def clear(self) -> None:
        self._items.clear()

    def copy_to(self, destination: "MutableSequence[Any]", start_index: int = 0) -> None:
        """Write the parameters, in order, into ``destination`` starting at ``start_index``.

        ``destination`` is never resized; it must already have room for every parameter.
        """
        if start_index < 0:
            msg = f"Start index {start_index} must not be negative"
            raise ParameterIndexError(msg)
        if len(destination) - start_index < len(self._items):
            msg = (
                f"Destination of length {len(destination)} cannot hold {len(self._items)} "
                f"parameters starting at index {start_index}"
            )
            raise InvalidArgumentError(msg)
        for offset, item in enumerate(self._items):
            destination[start_index + offset] = item

    def validate(self) -> None:
        """Check the collection is ready to be sent with a query.

        Raises:
            DuplicateParameterNameError: If two parameters share a name.
            InvalidArgumentError: If a parameter fails its own validation.
        """
        log_with_context(logger, logging.DEBUG, "Validating parameter collection", count=len(self._items))
        self._check_duplicate_names()
        if self.config.validate_items:
            for item in self._items:
                item.validate()
        log_with_context(
            logger,
            logging.DEBUG,
            "Parameter collection is valid",
            count=len(self._items),
            names=[item.name for item in self._items],
        )

    def _range_check(self, index: int) -> int:
        if index < 0 or index >= len(self._items):
            msg = f"Position {index} is out of range for a collection of {len(self._items)} parameters"
            raise ParameterIndexError(msg)
        return index

    def _check_name(self, name: str) -> int:
        index = self.index_of(name)
        if index < 0:
            msg = "Wrong parameter name"
            raise InvalidArgumentError(msg)
        return index

    def _assign_default_name(self, index: int, parameter: BigQueryParameter) -> None:
        if index == self.index_of(parameter):
            return
        if parameter.name:
            return
        prefix = self.config.default_name_prefix
        suffix = 1
        candidate = f"{prefix}{suffix}"
        while self.index_of(candidate) != -1:
            suffix += 1
            candidate = f"{prefix}{suffix}"
        parameter.name = candidate
        log_with_context(
            logger, logging.DEBUG, "Assigned default parameter name", parameter_name=candidate, position=index
        )

    def _replace(self, index: int, parameter: Any) -> None:
        parameter = _check_type(parameter)
        self._assign_default_name(index, parameter)
        self._items[index] = parameter

    def _check_duplicate_names(self) -> None:
        seen: set[str] = set()
        for position, item in enumerate(self._items):
            name = item.name
            if not name:
                continue
            if name in seen:
                log_with_context(
                    logger, logging.DEBUG, "Duplicate parameter name", parameter_name=name, position=position
                )
                raise DuplicateParameterNameError(name)
            seen.add(name)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[BigQueryParameter]:
        return iter(self._items)

    def __contains__(self, value: object) -> bool:
        if value is None or not (is_parameter_name(value) or is_query_parameter(value)):
            return False
        return self.index_of(value) >= 0

    def __getitem__(self, key: Union[int, str]) -> BigQueryParameter:
        return self.get_parameter(key)

    def __setitem__(self, key: Union[int, str], parameter: Any) -> None:
        self.set_parameter(key, parameter)

    def __delitem__(self, key: Union[int, str]) -> None:
        self.remove_at(key)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({[item.name for item in self._items]!r})"
