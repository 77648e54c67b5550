from __future__ import annotations

from typing import List

from fastapi import APIRouter
from pydantic import BaseModel

from bridge_client.models.constants import (
    CURRENCIES,
    DEFAULT_AMOUNT_TEXT,
    DEFAULT_FROM_CURRENCY,
    DEFAULT_TO_CURRENCY,
    is_crypto,
)

router = APIRouter(prefix="/currencies", tags=["currencies"])


class CurrencyOut(BaseModel):
    code: str
    crypto: bool


class CurrencyListOut(BaseModel):
    currencies: List[CurrencyOut]
    default_from: str
    default_to: str
    default_amount: str


@router.get("", response_model=CurrencyListOut, summary="Supported currencies in selector order")
async def list_currencies() -> CurrencyListOut:
    return CurrencyListOut(
        currencies=[CurrencyOut(code=c, crypto=is_crypto(c)) for c in CURRENCIES],
        default_from=DEFAULT_FROM_CURRENCY,
        default_to=DEFAULT_TO_CURRENCY,
        default_amount=DEFAULT_AMOUNT_TEXT,
    )
