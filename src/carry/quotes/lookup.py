"""Record lookup and numeric parsing shared by every provider."""

import math
from collections.abc import Callable, Iterable
from typing import TypeVar

from carry.exceptions import MalformedQuote, QuoteUnavailable

T = TypeVar("T")


def find_one(records: Iterable[T], predicate: Callable[[T], bool], *, what: str) -> T:
    """Return the single record matching ``predicate``.

    Zero matches and duplicate matches are both errors.

    Args:
        records: Parsed provider records.
        predicate: Match condition, usually a symbol equality check.
        what: Human-readable description of the record, used in the error.

    Raises:
        QuoteUnavailable: If zero or more than one record matches.
    """
    matches = [record for record in records if predicate(record)]
    if len(matches) != 1:
        raise QuoteUnavailable(f"expected exactly one {what}, found {len(matches)}")
    return matches[0]


def parse_rate(raw: str | None, *, field: str) -> float:
    """Parse a string-encoded numeric field as a finite float.

    Raises:
        MalformedQuote: If the value is missing, non-numeric, NaN or infinite.
    """
    if raw is None:
        raise MalformedQuote(f"{field} is missing")
    try:
        value = float(raw)
    except (TypeError, ValueError) as e:
        raise MalformedQuote(f"{field} is not a number: {raw!r}") from e
    if not math.isfinite(value):
        raise MalformedQuote(f"{field} is not finite: {raw!r}")
    return value
