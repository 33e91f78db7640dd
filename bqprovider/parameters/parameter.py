"""The query parameter bound to a BigQuery command."""

from typing import Any, Optional

from mypy_extensions import mypyc_attr

from bqprovider.exceptions import InvalidArgumentError
from bqprovider.parameters.types import BigQueryDbType, ParameterDirection, infer_db_type, is_value_compatible

__all__ = ("BigQueryParameter",)


@mypyc_attr(allow_interpreted_subclasses=True)
class BigQueryParameter:
    """A named, typed value bound to a placeholder in a query.

    Parameters compare by identity: two instances holding the same name, value
    and type are still distinct members of a collection. All attributes stay
    mutable after the parameter is added so callers can adjust them up to
    validation.
    """

    __slots__ = ("_name", "db_type", "direction", "value")

    def __init__(
        self,
        name: Optional[str] = None,
        db_type: Optional[BigQueryDbType] = None,
        value: Any = None,
        direction: ParameterDirection = ParameterDirection.INPUT,
    ) -> None:
        self._name = name or ""
        self.value = value
        if db_type is None:
            self.db_type = infer_db_type(value)
        else:
            try:
                self.db_type = BigQueryDbType(db_type)
            except ValueError as e:
                msg = f"Unsupported BigQuery parameter type: {db_type!r}"
                raise InvalidArgumentError(msg) from e
        self.direction = direction

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: Optional[str]) -> None:
        self._name = value or ""

    def validate(self) -> None:
        """Check the parameter can be sent to BigQuery.

        Raises:
            InvalidArgumentError: If the name is empty, the direction is not
                input, or the value does not fit the declared type.
        """
        if not self._name:
            msg = "Parameter name can't be empty"
            raise InvalidArgumentError(msg)
        if self.direction != ParameterDirection.INPUT:
            msg = f"Parameter '{self._name}': only input parameters are supported, got {self.direction}"
            raise InvalidArgumentError(msg)
        if self.value is not None and not is_value_compatible(self.value, self.db_type):
            msg = (
                f"Parameter '{self._name}': value of type {type(self.value).__name__} "
                f"is not compatible with declared type {self.db_type}"
            )
            raise InvalidArgumentError(msg)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join([f'name={self._name!r}', f'db_type={self.db_type!r}', f'direction={self.direction!r}', f'value={self.value!r}'])})"
