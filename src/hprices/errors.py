"""Provides the error raised for every unrecoverable failure."""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Broad classification of what went wrong."""

    CONFIG = "configuration"
    API = "market data API"
    IO = "journal file"
    FORMAT = "journal format"
    INTERNAL = "internal"


class PriceError(RuntimeError):
    """An error of some `kind` that ends the current invocation."""

    kind: ErrorKind
    message: str
    cause: Optional[BaseException]

    def __init__(
        self, kind: ErrorKind, message: str, cause: Optional[BaseException] = None
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.cause = cause

    @property
    def unexpected(self) -> bool:
        """Whether this error points at a bug rather than at bad user input."""

        return self.kind in (ErrorKind.API, ErrorKind.IO, ErrorKind.INTERNAL)

    def report(self) -> str:
        """Returns the human-readable diagnostic for this error."""

        if not self.unexpected:
            return f"{self.kind.value} error: {self.message}"

        return "\n".join(
            (
                "An unexpected problem occurred that hprices can't recover from.",
                "",
                "If you believe the invocation of hprices is correct, please file a bug report with the details below.",
                "",
                f"Error message: {self.message}",
                f"Error: {self.cause!r}",
            )
        )
