from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from bridge_client.core.errors import QuoteError
from .constants import is_supported


class ConversionRequest(BaseModel):
    """Validated input for both quote operations.

    `amount` is deliberately unconstrained: zero, negative and NaN values are
    forwarded to the quote service as-is.
    """

    model_config = ConfigDict(frozen=True)

    amount: float
    from_currency: str
    to_currency: str

    @field_validator("from_currency", "to_currency")
    @classmethod
    def valid_currency(cls, v: str) -> str:
        if not is_supported(v):
            raise ValueError(f"unsupported currency '{v}'")
        return v

    def to_payload(self) -> Dict[str, Any]:
        """Wire body; non-finite amounts go out as null."""
        amount: Optional[float] = self.amount if math.isfinite(self.amount) else None
        return {
            "amount": amount,
            "from_currency": self.from_currency,
            "to_currency": self.to_currency,
        }


class QuoteResult(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    direct_amount: float


class ConversionResult(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    direct_amount: Optional[float] = None
    converted_amount: Optional[float] = None
    optimized_rate: Optional[float] = None
    exchange_path: Optional[List[str]] = None
    savings: Optional[float] = None
    commission: Optional[float] = None
    arbitrage_profit: Optional[float] = None

    @classmethod
    def from_response(cls, data: Any) -> "ConversionResult":
        """Lenient normalization: anything that does not fit is treated as absent."""
        if not isinstance(data, dict):
            return cls()
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            bad = {err["loc"][0] for err in e.errors() if err["loc"]}
            return cls.model_validate({k: v for k, v in data.items() if k not in bad})

    @property
    def has_arbitrage(self) -> bool:
        return self.arbitrage_profit is not None and self.arbitrage_profit > 0


T = TypeVar("T")


@dataclass(frozen=True)
class QuoteOutcome(Generic[T]):
    """Either a value or a QuoteError, never both."""

    value: Optional[T] = None
    error: Optional[QuoteError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "QuoteOutcome[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: QuoteError) -> "QuoteOutcome[T]":
        return cls(error=error)
