from decimal import Decimal

import pytest

from hprices.commodity import formatPrice, renderDecimal


def test_currency_after_amount():
    assert formatPrice(Decimal("123.4"), "AAPL", "USD") == "AAPL 123.4 USD"


def test_currency_before_amount():
    assert (
        formatPrice(Decimal("123.4"), "AAPL", "$", currencyBefore=True)
        == "AAPL $123.4"
    )


@pytest.mark.parametrize(
    "value,expected",
    [
        ("123.4000", "123.4"),
        ("100.0000", "100"),
        ("0.0500", "0.05"),
        ("0", "0"),
    ],
)
def test_minimal_rendering(value, expected):
    assert renderDecimal(Decimal(value)) == expected


@pytest.mark.parametrize("digits", [0, 1, 2, 4, 7, 26, 30])
@pytest.mark.parametrize("value", ["123.4", "0.005", "99.99999", "1000"])
def test_fixed_digits(value, digits):
    rendered = renderDecimal(Decimal(value), digits)

    if digits:
        assert len(rendered.split(".")[1]) == digits
    else:
        assert "." not in rendered


def test_fixed_digits_round_half_up():
    assert renderDecimal(Decimal("2.345"), 2) == "2.35"
    assert renderDecimal(Decimal("2.5"), 0) == "3"


@pytest.mark.parametrize("separator", [",", "'", "_"])
def test_separator_replaces_point(separator):
    formatted = formatPrice(Decimal("1234.5678"), "AAPL", "USD", 2, separator)

    assert formatted == f"AAPL 1234{separator}57 USD"
    assert "." not in formatted


def test_separator_without_fraction():
    assert formatPrice(Decimal("12.000"), "AAPL", "EUR", separator=",") == "AAPL 12 EUR"


def test_many_digits_beyond_default_precision():
    formatted = formatPrice(Decimal("123456.5"), "AAPL", "USD", 30, ",")

    assert formatted == f"AAPL 123456,5{'0' * 29} USD"
