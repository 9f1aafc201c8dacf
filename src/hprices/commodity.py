"""Provides commodity price formatting."""

from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import NamedTuple, Optional


class CommodityValue(NamedTuple):
    """Value of 1 unit of a commodity at a particular date."""

    time: str
    name: str
    value: Decimal


def renderDecimal(value: Decimal, digits: Optional[int] = None) -> str:
    """Returns `value` in plain notation, with exactly `digits` fractional digits if given, else as few as needed."""

    if digits is None:
        # normalize() strips trailing zeros but may switch to exponent notation
        return format(value.normalize(), "f")

    with localcontext() as ctx:
        # quantize fails once the result needs more digits than the context precision
        ctx.prec = max(ctx.prec, value.adjusted() + digits + 2)
        return format(value.quantize(Decimal(1).scaleb(-digits), ROUND_HALF_UP), "f")


def formatPrice(
    price: Decimal,
    stock: str,
    currency: str,
    digits: Optional[int] = None,
    separator: str = ".",
    currencyBefore: bool = False,
) -> str:
    """Returns the `stock` amount part of a price directive for `price` denoted in `currency`."""

    amount = renderDecimal(price, digits)
    if separator != ".":
        amount = amount.replace(".", separator)

    if currencyBefore:
        return f"{stock} {currency}{amount}"
    else:
        return f"{stock} {amount} {currency}"
