"""Tests for BigQueryParameter and the declared parameter types."""

import datetime
from decimal import Decimal
from typing import Any

import pytest

from bqprovider.exceptions import BQProviderError, InvalidArgumentError
from bqprovider.parameters import (
    BigQueryDbType,
    BigQueryParameter,
    BigQueryParameterCollection,
    ParameterDirection,
    infer_db_type,
)
from bqprovider.parameters.types import is_value_compatible


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (True, BigQueryDbType.BOOL),
        (1, BigQueryDbType.INT64),
        (1.5, BigQueryDbType.FLOAT64),
        (Decimal("1.5"), BigQueryDbType.BIGNUMERIC),
        ("text", BigQueryDbType.STRING),
        (b"raw", BigQueryDbType.BYTES),
        (datetime.date(2024, 1, 1), BigQueryDbType.DATE),
        (datetime.time(12, 30), BigQueryDbType.TIME),
        (datetime.datetime(2024, 1, 1, 12, 0), BigQueryDbType.DATETIME),
        (datetime.datetime(2024, 1, 1, 12, 0, tzinfo=datetime.timezone.utc), BigQueryDbType.TIMESTAMP),
        ({"a": 1}, BigQueryDbType.JSON),
        (None, BigQueryDbType.STRING),
        (object(), BigQueryDbType.STRING),
    ],
)
def test_infer_db_type(value: Any, expected: BigQueryDbType) -> None:
    assert infer_db_type(value) is expected


def test_db_type_is_inferred_when_not_declared() -> None:
    assert BigQueryParameter("n", value=10).db_type is BigQueryDbType.INT64
    assert BigQueryParameter("n", BigQueryDbType.FLOAT64, 10).db_type is BigQueryDbType.FLOAT64


def test_db_type_accepts_type_names() -> None:
    param = BigQueryParameter("n", "INT64", 1)  # type: ignore[arg-type]

    assert param.db_type is BigQueryDbType.INT64


def test_unknown_db_type_name_is_rejected() -> None:
    with pytest.raises(InvalidArgumentError, match="INTEGER") as exc_info:
        BigQueryParameter("n", "INTEGER", 1)  # type: ignore[arg-type]

    assert isinstance(exc_info.value.__cause__, ValueError)


def test_add_parameter_with_unknown_type_raises_package_error() -> None:
    params = BigQueryParameterCollection()

    with pytest.raises(BQProviderError):
        params.add_parameter("n", "INTEGER")  # type: ignore[arg-type]

    assert params.count == 0


def test_name_defaults_to_empty_string() -> None:
    param = BigQueryParameter()

    assert param.name == ""
    param.name = None  # type: ignore[assignment]
    assert param.name == ""
    param.name = "p"
    assert param.name == "p"


def test_parameters_compare_by_identity() -> None:
    a = BigQueryParameter("p", BigQueryDbType.INT64, 1)
    b = BigQueryParameter("p", BigQueryDbType.INT64, 1)

    assert a != b
    assert a == a
    assert len({a, b}) == 2


def test_validate_accepts_well_formed_parameter() -> None:
    BigQueryParameter("n", BigQueryDbType.NUMERIC, Decimal("3.14")).validate()
    BigQueryParameter("n", BigQueryDbType.STRING, None).validate()


def test_validate_requires_name() -> None:
    with pytest.raises(InvalidArgumentError, match="name"):
        BigQueryParameter(value=1).validate()


@pytest.mark.parametrize(
    "direction", [ParameterDirection.OUTPUT, ParameterDirection.INPUT_OUTPUT, ParameterDirection.RETURN_VALUE]
)
def test_validate_rejects_non_input_direction(direction: ParameterDirection) -> None:
    param = BigQueryParameter("out", BigQueryDbType.INT64, 1, direction=direction)

    with pytest.raises(InvalidArgumentError, match="input"):
        param.validate()


def test_validate_rejects_incompatible_value() -> None:
    param = BigQueryParameter("n", BigQueryDbType.INT64, "12")

    with pytest.raises(InvalidArgumentError, match="INT64"):
        param.validate()


def test_validate_sees_later_mutations() -> None:
    param = BigQueryParameter("n", BigQueryDbType.INT64, 1)
    param.validate()

    param.db_type = BigQueryDbType.DATE
    with pytest.raises(InvalidArgumentError):
        param.validate()


@pytest.mark.parametrize(
    ("value", "db_type", "expected"),
    [
        (True, BigQueryDbType.BOOL, True),
        (True, BigQueryDbType.INT64, False),
        (1, BigQueryDbType.FLOAT64, True),
        (1.0, BigQueryDbType.INT64, False),
        (datetime.datetime(2024, 1, 1), BigQueryDbType.DATE, False),
        (datetime.datetime(2024, 1, 1), BigQueryDbType.DATETIME, True),
        (datetime.datetime(2024, 1, 1, tzinfo=datetime.timezone.utc), BigQueryDbType.DATETIME, False),
        (datetime.datetime(2024, 1, 1, tzinfo=datetime.timezone.utc), BigQueryDbType.TIMESTAMP, True),
        (datetime.datetime(2024, 1, 1), BigQueryDbType.TIMESTAMP, False),
        (datetime.datetime(2024, 1, 1), BigQueryDbType.STRING, False),
        (bytearray(b"x"), BigQueryDbType.BYTES, True),
        ([1, 2], BigQueryDbType.JSON, True),
    ],
)
def test_is_value_compatible(value: Any, db_type: BigQueryDbType, expected: bool) -> None:
    assert is_value_compatible(value, db_type) is expected


def test_repr() -> None:
    param = BigQueryParameter("n", BigQueryDbType.INT64, 1)

    assert repr(param).startswith("BigQueryParameter(name='n'")


@pytest.mark.parametrize(
    "value",
    [datetime.datetime(2024, 1, 1, 12, 0), datetime.datetime(2024, 1, 1, 12, 0, tzinfo=datetime.timezone.utc)],
)
def test_inferred_datetime_type_validates(value: datetime.datetime) -> None:
    BigQueryParameter("ts", value=value).validate()


def test_validate_rejects_naive_timestamp() -> None:
    param = BigQueryParameter("ts", BigQueryDbType.TIMESTAMP, datetime.datetime(2024, 1, 1))

    with pytest.raises(InvalidArgumentError, match="TIMESTAMP"):
        param.validate()
