import json

import pytest
import requests

from hprices.alphavantage import AlphaVantage


class FakeResponse:
    def __init__(self, text: str, status: int = 200) -> None:
        self.text = text
        self.status = status

    def raise_for_status(self):
        if self.status >= 400:
            raise requests.HTTPError(f"{self.status} error")

    def json(self, **kwargs):
        return json.loads(self.text, **kwargs)


class FakeSession:
    """Answers every request with a canned body and records what was asked."""

    def __init__(self, text: str, status: int = 200) -> None:
        self.response = FakeResponse(text, status)
        self.requests = []

    def get(self, url, params=None):
        self.requests.append((url, params))
        return self.response


def dailyBody(*days: tuple[str, str]) -> str:
    series = ", ".join(
        f'"{date}": {{"1. open": "1.0", "4. close": "{close}", "5. volume": "10"}}'
        for date, close in days
    )
    return f'{{"Meta Data": {{"2. Symbol": "AAPL"}}, "Time Series (Daily)": {{{series}}}}}'


@pytest.fixture
def fakeClient():
    def make(text: str, status: int = 200):
        session = FakeSession(text, status)
        return AlphaVantage("key", session), session

    return make
