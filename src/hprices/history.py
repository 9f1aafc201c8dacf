"""Merges fetched stock price history into a price journal."""

from typing import Optional

from hprices import alphavantage
from hprices.alphavantage import AlphaVantage
from hprices.commodity import formatPrice
from hprices.ledger import mergePrices, readPrices, writePrices


def history(
    symbol: str,
    stock: str,
    currency: str,
    path: str,
    digits: Optional[int] = None,
    separator: str = ".",
    currencyBefore: bool = False,
    client: Optional[AlphaVantage] = None,
) -> dict[str, str]:
    """
    Fetches recent closing prices of `symbol` and merges them as `stock` prices in `currency` into the journal at `path`.
    Returns the prices written.
    """

    client = client or alphavantage.client()

    print(f"fetching closing prices for {symbol}...")
    closes = client.dailyCloses(symbol)
    print(f"fetched {len(closes)} closing prices for {symbol}")

    fetched = [
        (
            t.time,
            formatPrice(t.value, stock, currency, digits, separator, currencyBefore),
        )
        for t in closes
    ]

    existing = readPrices(path)
    print(f"found {len(existing)} prices in {path}")

    prices = mergePrices(existing, fetched)

    print(f"writing {len(prices)} prices to {path}")
    writePrices(path, prices)

    return prices
