from typing import Any

__all__ = (
    "BQProviderError",
    "DuplicateParameterNameError",
    "ImproperConfigurationError",
    "InvalidArgumentError",
    "InvalidOperationError",
    "ParameterError",
    "ParameterIndexError",
)


class BQProviderError(Exception):
    """Base exception class from which all bqprovider exceptions inherit."""

    detail: str

    def __init__(self, *args: Any, detail: str = "") -> None:
        """Initialize ``BQProviderError``.

        Args:
            *args: args are converted to :class:`str` before passing to :class:`Exception`
            detail: detail of the exception.
        """
        str_args = [str(arg) for arg in args if arg]
        if not detail:
            if str_args:
                detail, *str_args = str_args
            elif hasattr(self, "detail"):
                detail = self.detail
        self.detail = detail
        super().__init__(*str_args)

    def __repr__(self) -> str:
        if self.detail:
            return f"{self.__class__.__name__} - {self.detail}"
        return self.__class__.__name__

    def __str__(self) -> str:
        return " ".join((*self.args, self.detail)).strip()


class ImproperConfigurationError(BQProviderError):
    """Improper Configuration error.

    Raised when a configuration object is built from values it cannot work with.
    """


# -- Parameter Errors --
class ParameterError(BQProviderError):
    """Base class for parameter-related errors."""

    def __init__(self, message: str) -> None:
        super().__init__(detail=message)


class InvalidArgumentError(ParameterError, ValueError):
    """Raised when a call receives an argument it cannot accept.

    Covers items that are not parameters, missing items, unknown parameter
    names and parameters that fail their own validation.
    """


class InvalidOperationError(ParameterError):
    """Raised when an operation is not valid for the current collection state."""


class ParameterIndexError(ParameterError, IndexError):
    """Raised when a position or name does not resolve to a collection member."""


class DuplicateParameterNameError(ParameterError):
    """Raised by validation when two parameters share a name."""

    name: str

    def __init__(self, name: str) -> None:
        super().__init__(f"Parameter collection contains duplicate parameters with name '{name}'")
        self.name = name
