from __future__ import annotations

from typing import Union

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, Field

from bridge_client.core.config import Settings
from bridge_client.core.errors import Busy
from bridge_client.models.constants import (
    DEFAULT_AMOUNT_TEXT,
    DEFAULT_FROM_CURRENCY,
    DEFAULT_TO_CURRENCY,
)
from bridge_client.models.quotes import QuoteOutcome
from bridge_client.services import request_builder
from bridge_client.services.display import SessionView, session_view
from bridge_client.services.session import QuoteSession

"""Session router: JSON presentation of the quote session.

Endpoints:
    - GET    /session            -> current view
    - POST   /session/prequote   -> run a preview, return the view
    - POST   /session/convert    -> run a conversion, return the view
    - DELETE /session            -> clear results

Quote failures are part of the view (`error`), not HTTP errors. Only a
request that arrives while another is in flight gets a 409.
"""

router = APIRouter(prefix="/session", tags=["session"])


def get_quote_session(request: Request) -> QuoteSession:
    return request.app.state.quote_session


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


class QuoteFormIn(BaseModel):
    amount: Union[str, float] = Field(
        DEFAULT_AMOUNT_TEXT, description="Amount as typed by the user, or a JSON number"
    )
    from_currency: str = Field(DEFAULT_FROM_CURRENCY, description="Buyer currency")
    to_currency: str = Field(DEFAULT_TO_CURRENCY, description="Seller currency")


def _raise_if_busy(outcome: QuoteOutcome) -> None:
    if isinstance(outcome.error, Busy):
        raise outcome.error


@router.get("", response_model=SessionView, summary="Current session view")
async def get_session(session: QuoteSession = Depends(get_quote_session)):
    return session_view(session.state)


@router.post("/prequote", response_model=SessionView, summary="Request a pre-quote")
async def prequote(
    payload: QuoteFormIn,
    session: QuoteSession = Depends(get_quote_session),
    settings: Settings = Depends(get_app_settings),
):
    req = request_builder.build(
        str(payload.amount),
        payload.from_currency,
        payload.to_currency,
        strict=settings.strict_amount_validation,
    )
    _raise_if_busy(await session.start_preview(req))
    return session_view(session.state)


@router.post("/convert", response_model=SessionView, summary="Convert & pay")
async def convert(
    payload: QuoteFormIn,
    session: QuoteSession = Depends(get_quote_session),
    settings: Settings = Depends(get_app_settings),
):
    req = request_builder.build(
        str(payload.amount),
        payload.from_currency,
        payload.to_currency,
        strict=settings.strict_amount_validation,
    )
    _raise_if_busy(await session.start_conversion(req))
    return session_view(session.state)


@router.delete("", response_model=SessionView, summary="Clear quote results")
async def reset_session(session: QuoteSession = Depends(get_quote_session)):
    return session_view(session.reset())
