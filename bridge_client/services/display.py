from __future__ import annotations

import math
from typing import Optional

from pydantic import BaseModel

from bridge_client.models.constants import DIRECT_PATH_PIVOT
from bridge_client.models.quotes import ConversionRequest, ConversionResult, QuoteResult
from bridge_client.models.session import SessionState

"""View models built from a SessionState snapshot.

All placeholder substitution for absent response fields happens here, so a
renderer only ever sees strings and never has to branch on missing data.
"""

NOT_AVAILABLE = "N/A"
PATH_SEPARATOR = " → "


def format_number(value: Optional[float]) -> str:
    """Shortest display form: integral values without a trailing .0."""
    if value is None:
        return NOT_AVAILABLE
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


class PreviewView(BaseModel):
    direct_amount: float
    to_currency: str
    label: str


class ConversionView(BaseModel):
    amount_sent: str
    direct_amount: str
    converted_amount: str
    optimized_rate: str
    direct_path: str
    optimized_path: str
    savings: str
    commission: str
    arbitrage: Optional[str] = None


class ErrorView(BaseModel):
    kind: str
    message: str


class ControlsView(BaseModel):
    preview_label: str
    convert_label: str
    buttons_enabled: bool


class SessionView(BaseModel):
    mode: str
    pending: Optional[str] = None
    preview: Optional[PreviewView] = None
    conversion: Optional[ConversionView] = None
    error: Optional[ErrorView] = None
    controls: ControlsView


def preview_view(result: QuoteResult, req: ConversionRequest) -> Optional[PreviewView]:
    # zero or NaN means "nothing to show"
    if not result.direct_amount or math.isnan(result.direct_amount):
        return None
    return PreviewView(
        direct_amount=result.direct_amount,
        to_currency=req.to_currency,
        label=f"{format_number(result.direct_amount)} {req.to_currency}",
    )


def _with_currency(value: Optional[float], currency: str) -> str:
    if value is None:
        return NOT_AVAILABLE
    return f"{format_number(value)} {currency}"


def conversion_view(result: ConversionResult, req: ConversionRequest) -> ConversionView:
    to = req.to_currency
    return ConversionView(
        amount_sent=f"{format_number(req.amount)} {req.from_currency}",
        direct_amount=_with_currency(result.direct_amount, to),
        converted_amount=_with_currency(result.converted_amount, to),
        optimized_rate=(
            format_number(result.optimized_rate)
            if result.optimized_rate and not math.isnan(result.optimized_rate)
            else NOT_AVAILABLE
        ),
        direct_path=PATH_SEPARATOR.join((req.from_currency, DIRECT_PATH_PIVOT, to)),
        optimized_path=(
            PATH_SEPARATOR.join(result.exchange_path)
            if result.exchange_path
            else NOT_AVAILABLE
        ),
        savings=format_number(result.savings),
        commission=format_number(result.commission),
        arbitrage=(
            f"{format_number(result.arbitrage_profit)} {to}"
            if result.has_arbitrage
            else None
        ),
    )


def controls_view(state: SessionState) -> ControlsView:
    if state.loading:
        return ControlsView(
            preview_label="Loading...", convert_label="Converting...", buttons_enabled=False
        )
    return ControlsView(
        preview_label="Get Pre-Quote", convert_label="Convert & Pay", buttons_enabled=True
    )


def session_view(state: SessionState) -> SessionView:
    req = state.last_request
    preview = None
    conversion = None
    if req is not None and state.last_preview is not None:
        preview = preview_view(state.last_preview, req)
    if req is not None and state.last_conversion is not None:
        conversion = conversion_view(state.last_conversion, req)
    error = None
    if state.last_error is not None:
        error = ErrorView(**state.last_error.as_dict())
    return SessionView(
        mode=state.mode.value,
        pending=state.pending.value if state.pending else None,
        preview=preview,
        conversion=conversion,
        error=error,
        controls=controls_view(state),
    )
