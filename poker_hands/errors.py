"""Exceptions for malformed hand input."""

from __future__ import annotations


class PokerInputError(ValueError):
    """Raised when a line of input cannot be turned into two hands."""

    def __init__(self, message: str, *, line_number: int | None = None) -> None:
        super().__init__(message)
        self.line_number = line_number

    def __str__(self) -> str:
        msg = super().__str__()
        if self.line_number is not None:
            return f"line {self.line_number}: {msg}"
        return msg


class InvalidCardToken(PokerInputError):
    """Raised when a token is not a two-character card like '9H' or 'TD'."""

    def __init__(self, token: str, *, line_number: int | None = None) -> None:
        super().__init__(f"Invalid card: {token!r}", line_number=line_number)
        self.token = token


class MalformedLineError(PokerInputError):
    """Raised when a line does not hold exactly ten card tokens."""

    def __init__(self, line: str, count: int, *, line_number: int | None = None) -> None:
        super().__init__(f"Expected 10 cards, got {count}: {line!r}", line_number=line_number)
        self.line = line
        self.count = count
