"""Currency registry and selection defaults.

Order matters: it is the order the selectors present, fiat first, then crypto.
"""

from typing import FrozenSet, Tuple

FIAT_CURRENCIES: Tuple[str, ...] = (
    "USD",
    "EUR",
    "GBP",
    "CAD",
    "AUD",
    "JPY",
    "MAD",
    "ZAR",
    "INR",
    "BRL",
    "TRY",
    "HUF",
    "MXN",
    "THB",
    "NGN",
    "COP",
    "PEN",
)
CRYPTO_CURRENCIES: Tuple[str, ...] = (
    "BTC",
    "ETH",
    "USDT",
    "BNB",
    "SOL",
    "ADA",
    "AVAX",
    "XMR",
    "MATIC",
    "TRX",
    "LTC",
    "NEAR",
)
CURRENCIES: Tuple[str, ...] = FIAT_CURRENCIES + CRYPTO_CURRENCIES
_CURRENCY_SET: FrozenSet[str] = frozenset(CURRENCIES)

DEFAULT_FROM_CURRENCY = "BTC"
DEFAULT_TO_CURRENCY = "USD"
DEFAULT_AMOUNT_TEXT = "0"

# Intermediate currency of the unoptimized route shown next to the optimized one
DIRECT_PATH_PIVOT = "USD"


def is_supported(code: str) -> bool:
    """Exact, case-sensitive membership check."""
    return code in _CURRENCY_SET


def is_crypto(code: str) -> bool:
    return code in CRYPTO_CURRENCIES
