from __future__ import annotations

import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from bridge_client.core.config import Settings, get_settings
from bridge_client.core.errors import MalformedResponse, QuoteError
from bridge_client.models.quotes import (
    ConversionRequest,
    ConversionResult,
    QuoteOutcome,
    QuoteResult,
)
from .http_client import make_async_client, post_json

"""Quote service client.

Two operations, both single-attempt POSTs with the same body:
    - pre_quote -> /api/prequote, requires `direct_amount` in the response.
    - convert   -> /api/convert, accepts any JSON; a non-object body or a
      wrongly typed field normalizes to an absent field.

Failures come back inside a QuoteOutcome; nothing is raised to the caller.
The client keeps no state between calls beyond the pooled HTTP connection.
"""

PREQUOTE_PATH = "/api/prequote"
CONVERT_PATH = "/api/convert"

logger = logging.getLogger("bridge_client.quote_client")


def _require_object(data: Any, path: str) -> dict:
    if not isinstance(data, dict):
        raise MalformedResponse(
            f"expected a JSON object from {path}, got {type(data).__name__}"
        )
    return data


class QuoteClient:
    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        http: Optional[httpx.AsyncClient] = None,
    ):
        self._settings = settings or get_settings()
        self._http = http or make_async_client(self._settings, transport)

    async def pre_quote(self, req: ConversionRequest) -> QuoteOutcome[QuoteResult]:
        try:
            data = _require_object(
                await post_json(self._http, PREQUOTE_PATH, req.to_payload()), PREQUOTE_PATH
            )
            if "direct_amount" not in data:
                raise MalformedResponse("pre-quote response has no direct_amount")
            result = QuoteResult.model_validate(data)
        except ValidationError as e:
            return self._failed("pre_quote", MalformedResponse(str(e), cause=e))
        except QuoteError as e:
            return self._failed("pre_quote", e)
        return QuoteOutcome.success(result)

    async def convert(self, req: ConversionRequest) -> QuoteOutcome[ConversionResult]:
        try:
            data = await post_json(self._http, CONVERT_PATH, req.to_payload())
        except QuoteError as e:
            return self._failed("convert", e)
        return QuoteOutcome.success(ConversionResult.from_response(data))

    def _failed(self, operation: str, error: QuoteError) -> QuoteOutcome:
        logger.debug(
            "%s failed: %s",
            operation,
            error.message,
            extra={"operation": operation, "error_kind": error.kind},
        )
        return QuoteOutcome.failure(error)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "QuoteClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
