"""Provides market data from the Alpha Vantage API."""

from decimal import Decimal, InvalidOperation
from os import environ
from typing import Any, NamedTuple

import requests

from hprices import NAME, VERSION
from hprices.commodity import CommodityValue
from hprices.errors import ErrorKind, PriceError

API_KEY_VARIABLE = "HPRICES_API_KEY"
URL = "https://www.alphavantage.co/query"

# keys Alpha Vantage uses to report failures inside an otherwise successful response
_errorKeys = ("Error Message", "Information", "Note")


class SymbolMatch(NamedTuple):
    """A stock matching a symbol search."""

    symbol: str
    name: str
    region: str


class _Object(dict):
    """JSON object that also remembers its raw key-value pairs, including repeated keys."""

    pairs: list[tuple[str, Any]]

    def __init__(self, pairs: list[tuple[str, Any]]) -> None:
        super().__init__(pairs)
        self.pairs = pairs


def apiKey() -> str:
    """Returns the API key configured in the environment."""

    key = environ.get(API_KEY_VARIABLE)
    if not key:
        raise PriceError(
            ErrorKind.CONFIG,
            f"environment variable {API_KEY_VARIABLE} is not set\n"
            "Please set this variable to your Alpha Vantage API key and try again.",
        )
    try:
        key.encode("utf-8")
    except UnicodeEncodeError as e:
        raise PriceError(
            ErrorKind.CONFIG,
            f"environment variable {API_KEY_VARIABLE} is not valid unicode\n"
            "Please recheck whether this variable is indeed set to your API key.",
            e,
        ) from e

    return key


def client() -> "AlphaVantage":
    """Returns a client authenticated with the API key configured in the environment."""

    session = requests.Session()
    session.headers["User-Agent"] = f"{NAME} V{VERSION}"

    return AlphaVantage(apiKey(), session)


class AlphaVantage:
    """Fetches stock data from Alpha Vantage."""

    _key: str
    _session: requests.Session

    def __init__(self, key: str, session: requests.Session) -> None:
        self._key = key
        self._session = session

    def dailyCloses(self, symbol: str) -> list[CommodityValue]:
        """Returns the closing prices of `symbol` for about the last 100 trading days, in API order."""

        payload = self._query("TIME_SERIES_DAILY", symbol=symbol, outputsize="compact")
        try:
            return [
                CommodityValue(time, symbol, Decimal(day["4. close"]))
                for time, day in payload["Time Series (Daily)"].pairs
            ]
        except (KeyError, TypeError, AttributeError, InvalidOperation) as e:
            raise PriceError(
                ErrorKind.API, "unexpected TIME_SERIES_DAILY response", e
            ) from e

    def search(self, query: str) -> list[SymbolMatch]:
        """Returns stocks whose symbol or name matches `query`."""

        payload = self._query("SYMBOL_SEARCH", keywords=query)
        try:
            return [
                SymbolMatch(t["1. symbol"], t["2. name"], t["4. region"])
                for t in payload["bestMatches"]
            ]
        except (KeyError, TypeError) as e:
            raise PriceError(
                ErrorKind.API, "unexpected SYMBOL_SEARCH response", e
            ) from e

    def _query(self, function: str, **params: str) -> _Object:
        try:
            response = self._session.get(
                URL, params={"function": function, **params, "apikey": self._key}
            )
            response.raise_for_status()
            payload = response.json(object_pairs_hook=_Object)
        except (requests.RequestException, ValueError) as e:
            raise PriceError(
                ErrorKind.API, f"Alpha Vantage request {function} failed", e
            ) from e

        if not isinstance(payload, _Object):
            raise PriceError(ErrorKind.API, f"unexpected {function} response")
        for key in _errorKeys:
            if key in payload:
                raise PriceError(
                    ErrorKind.API, f"Alpha Vantage returned error: {payload[key]}"
                )

        return payload
