"""Domain models for the Bridge quote client."""

from .constants import (
    CURRENCIES,
    FIAT_CURRENCIES,
    CRYPTO_CURRENCIES,
    DEFAULT_FROM_CURRENCY,
    DEFAULT_TO_CURRENCY,
)  # re-export
from .quotes import ConversionRequest, ConversionResult, QuoteOutcome, QuoteResult
from .session import Operation, SessionMode, SessionState

__all__ = [
    "CURRENCIES",
    "FIAT_CURRENCIES",
    "CRYPTO_CURRENCIES",
    "DEFAULT_FROM_CURRENCY",
    "DEFAULT_TO_CURRENCY",
    "ConversionRequest",
    "ConversionResult",
    "QuoteOutcome",
    "QuoteResult",
    "Operation",
    "SessionMode",
    "SessionState",
]
