"""
Unit tests - Kubernetes quantity parsing.
"""

from decimal import Decimal

import pytest

from k8s_sidecar_injector.core.quantity import parse_quantity
from k8s_sidecar_injector.utils.exceptions import InvalidQuantityError


@pytest.mark.parametrize("text,expected", [
    ("500m", Decimal("0.5")),
    ("1024m", Decimal("1.024")),
    ("2", Decimal(2)),
    ("1.5", Decimal("1.5")),
    ("128Mi", Decimal(128 * 1024 * 1024)),
    ("1Gi", Decimal(1024 ** 3)),
    ("1k", Decimal(1000)),
    ("1e3", Decimal(1000)),
    ("1E3", Decimal(1000)),
    ("5E", Decimal(5) * Decimal(10) ** 18),
])
def test_parses_valid_quantities(text, expected):
    q = parse_quantity(text)
    assert q.value == expected
    assert str(q) == text


@pytest.mark.parametrize("text", ["1024m0", "100MiB", "", "m", "1.2.3", " 500m", "500m\n", "100Mi\n", "five", "1mi"])
def test_rejects_malformed_quantities(text):
    with pytest.raises(InvalidQuantityError) as exc:
        parse_quantity(text)
    assert exc.value.value == text


def test_rejects_non_string():
    with pytest.raises(InvalidQuantityError):
        parse_quantity(None)


def test_formats():
    assert parse_quantity("100Mi").format == "BinarySI"
    assert parse_quantity("500m").format == "DecimalSI"
    assert parse_quantity("1e3").format == "DecimalExponent"


def test_equality_compares_values():
    assert parse_quantity("500m") == parse_quantity("0.5")
    assert parse_quantity("1Ki") == parse_quantity("1024")
    assert parse_quantity("500m") != parse_quantity("501m")
    assert len({parse_quantity("1k"), parse_quantity("1000")}) == 1


@pytest.mark.parametrize("text", ["1e1000000", "5E+99999999"])
def test_rejects_out_of_range_exponents(text):
    with pytest.raises(InvalidQuantityError) as exc:
        parse_quantity(text)
    assert exc.value.value == text
