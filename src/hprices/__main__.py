import argparse
import sys
from os import environ

from hprices import NAME, VERSION
from hprices.errors import ErrorKind, PriceError
from hprices.history import history
from hprices.search import search


def _digits(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {text}")
    return value


def _char(text: str) -> str:
    if len(text) != 1:
        raise argparse.ArgumentTypeError(f"must be a single character: {text}")
    return text


parser = argparse.ArgumentParser(
    prog=NAME,
    description="Fetches historic stock market prices into hledger price journals",
    formatter_class=argparse.ArgumentDefaultsHelpFormatter,
)
parser.add_argument("--version", action="version", version=f"{NAME} V{VERSION}")
commands = parser.add_subparsers(dest="command", required=True)

searchParser = commands.add_parser(
    "search-stock-symbol",
    help="search for a stock symbol; use this if you don't know the exact symbol of a stock",
)
searchParser.add_argument("query", type=str, help="text to search symbols for")

historyParser = commands.add_parser(
    "history",
    help="merge historic market prices of a stock into a ledger file",
    formatter_class=argparse.ArgumentDefaultsHelpFormatter,
)
historyParser.add_argument(
    "stockSymbol",
    type=str,
    metavar="stock_symbol",
    help="symbol of the stock as given by the `search-stock-symbol` command",
)
historyParser.add_argument(
    "stockName",
    type=str,
    metavar="stock_commodity_name",
    help="commodity name to use for the stock",
)
historyParser.add_argument(
    "currencyName",
    type=str,
    metavar="currency_commodity_name",
    help="commodity name to use for the currency the prices are denoted in",
)
historyParser.add_argument(
    "-f",
    "--file",
    type=str,
    help="ledger file to merge prices into; defaults to $LEDGER_FILE",
)
historyParser.add_argument(
    "-d",
    "--decimal-digits",
    type=_digits,
    help="number of digits after the decimal point",
)
historyParser.add_argument(
    "-s", "--separator", type=_char, default=".", help="decimal separator"
)
historyParser.add_argument(
    "-c",
    "--commodity-symbol-before",
    action="store_true",
    help="place the currency symbol before the amount",
)


def run(args: argparse.Namespace):
    if args.command == "search-stock-symbol":
        search(args.query)
    else:
        path = args.file or environ.get("LEDGER_FILE")
        if not path:
            raise PriceError(
                ErrorKind.CONFIG, "no ledger file given and LEDGER_FILE is not set"
            )

        history(
            args.stockSymbol,
            args.stockName,
            args.currencyName,
            path,
            args.decimal_digits,
            args.separator,
            args.commodity_symbol_before,
        )


def main(argv=None):
    args = parser.parse_args(argv)

    try:
        run(args)
    except PriceError as e:
        print(e.report(), file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
