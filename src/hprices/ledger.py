"""Reads, merges and writes hledger price journals."""

from typing import Iterable

from hprices import NAME, VERSION
from hprices.errors import ErrorKind, PriceError

HEADER = f"; Generated by {NAME} V{VERSION}"


def parsePrice(line: str) -> tuple[str, str]:
    """Returns the `(date, price info)` of a `P <date> <price info>` directive `line`."""

    if " " not in line:
        raise PriceError(ErrorKind.FORMAT, f"contains no space: {line}")
    directive, rest = line.split(" ", 1)
    if directive != "P":
        raise PriceError(ErrorKind.FORMAT, f"{line} is not a market price")
    if " " not in rest:
        raise PriceError(ErrorKind.FORMAT, f"contains only one space: {line}")
    date, info = rest.split(" ", 1)

    return (date, info)


def readPrices(path: str) -> dict[str, str]:
    """Returns price info by date of every price directive in the journal at `path`."""

    try:
        # lines end only at "\n" or "\r\n"
        with open(path, encoding="utf-8", newline="") as f:
            lines = f.read().split("\n")
    except (OSError, UnicodeDecodeError) as e:
        raise PriceError(ErrorKind.IO, f"couldn't read journal file {path}", e) from e

    if lines[-1] == "":
        lines.pop()

    # a repeated date keeps its last directive
    return dict(
        parsePrice(t)
        for t in (line.removesuffix("\r").lstrip() for line in lines)
        if not t.startswith(";")
    )


def mergePrices(
    existing: dict[str, str], fetched: Iterable[tuple[str, str]]
) -> dict[str, str]:
    """Returns `existing` prices updated with `fetched` ones, which win on equal dates."""

    fetched = list(fetched)
    fetchedByDate = dict(fetched)
    if len(fetchedByDate) != len(fetched):
        raise PriceError(
            ErrorKind.INTERNAL,
            f"there are duplicate days in the API response: {len(fetched)} != {len(fetchedByDate)}",
        )

    return {**existing, **fetchedByDate}


def formatPrices(prices: dict[str, str]) -> list[str]:
    """Returns the lines of a journal holding `prices`, newest first."""

    return [
        HEADER,
        *(
            f"P {date} {info}"
            for date, info in sorted(prices.items(), key=lambda t: t[0], reverse=True)
        ),
    ]


def writePrices(path: str, prices: dict[str, str]) -> None:
    """Replaces the journal at `path` with `prices`."""

    try:
        with open(path, "w", encoding="utf-8") as f:
            f.writelines(f"{line}\n" for line in formatPrices(prices))
    except OSError as e:
        raise PriceError(
            ErrorKind.IO, f"failed writing to journal file {path}", e
        ) from e
