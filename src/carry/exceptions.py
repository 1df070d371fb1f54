"""Custom exceptions for the carry-yield estimator.

Quote-layer and calculator exceptions live here so the server can map
them to responses without importing the fetcher or calculator modules.
"""


class CarryError(Exception):
    """Base exception for all carry-yield errors."""


class QuoteUnavailable(CarryError):
    """Raised when a provider request fails or the expected record is absent or ambiguous."""


class MalformedQuote(CarryError):
    """Raised when a provider record is found but cannot be parsed into a number."""


class InvalidArbRatio(CarryError):
    """Raised when an arithmetic precondition of the yield pipeline is violated."""
