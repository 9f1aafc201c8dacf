"""Searches stock symbols."""

from typing import Iterable, Optional

from hprices import alphavantage
from hprices.alphavantage import AlphaVantage, SymbolMatch


def formatMatches(matches: Iterable[SymbolMatch]) -> list[str]:
    """Returns a table of `matches`."""

    return [
        f"{'Region':>20} | {'Symbol':>9} – {'Name':20}",
        "",
        *(f"{t.region:>20} | {t.symbol:>9} – {t.name:20}" for t in matches),
    ]


def search(query: str, client: Optional[AlphaVantage] = None) -> list[SymbolMatch]:
    """Prints and returns stocks matching `query`."""

    matches = (client or alphavantage.client()).search(query)
    print("\n".join(formatMatches(matches)))

    return matches
