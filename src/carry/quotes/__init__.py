"""Quote fetcher layer -- provider schemas, record lookup, and the HTTP client."""

from carry.quotes.client import QuoteClient
from carry.quotes.http_client import HttpQuoteClient
from carry.quotes.lookup import find_one, parse_rate
from carry.quotes.models import PrimaryQuotes

__all__ = ["HttpQuoteClient", "PrimaryQuotes", "QuoteClient", "find_one", "parse_rate"]
