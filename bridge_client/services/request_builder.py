"""Turns raw form input into a ConversionRequest.

Amount text is parsed the way a browser number field hands it over: the
longest leading decimal literal wins and anything unparseable becomes NaN.
NaN is forwarded rather than rejected; `validate` is the opt-in gate.
"""

from __future__ import annotations

import math
import re

from bridge_client.core.errors import InvalidAmount, UnsupportedCurrency
from bridge_client.models.constants import is_supported
from bridge_client.models.quotes import ConversionRequest

_DECIMAL_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_amount(raw_amount: str) -> float:
    match = _DECIMAL_PREFIX.match(raw_amount.lstrip())
    if not match:
        return math.nan
    return float(match.group(0).replace("Infinity", "inf"))


def build(
    raw_amount: str, from_currency: str, to_currency: str, *, strict: bool = False
) -> ConversionRequest:
    for code in (from_currency, to_currency):
        if not is_supported(code):
            raise UnsupportedCurrency(code)
    request = ConversionRequest(
        amount=parse_amount(raw_amount),
        from_currency=from_currency,
        to_currency=to_currency,
    )
    return validate(request) if strict else request


def validate(request: ConversionRequest) -> ConversionRequest:
    """Reject non-finite or negative amounts. Zero is allowed."""
    if not math.isfinite(request.amount):
        raise InvalidAmount("amount must be a finite number")
    if request.amount < 0:
        raise InvalidAmount("amount must not be negative")
    return request
