import json
from typing import Any, Dict, List

import httpx
import pytest

from bridge_client.core.config import Settings
from bridge_client.models.quotes import ConversionRequest
from bridge_client.services.quote_client import QuoteClient

BASE_URL = "http://quotes.test"

CONVERT_BODY = {
    "direct_amount": 60000,
    "converted_amount": 60500,
    "savings": 500,
    "commission": 50,
    "exchange_path": ["BTC", "USD"],
}


@pytest.fixture
def anyio_backend():
    return "asyncio"


class StubQuoteService:
    """Canned responses per path; records every request body it receives."""

    def __init__(self) -> None:
        self.responses: Dict[str, httpx.Response] = {}
        self.requests: List[httpx.Request] = []

    def respond(self, path: str, body: Any = None, status_code: int = 200, text: str | None = None) -> None:
        if text is not None:
            self.responses[path] = httpx.Response(status_code, text=text)
        else:
            self.responses[path] = httpx.Response(status_code, json=body)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        resp = self.responses.get(request.url.path)
        if resp is None:
            return httpx.Response(404, json={"detail": "Not Found"})
        return httpx.Response(resp.status_code, content=resp.content, headers=resp.headers)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def bodies(self) -> List[Dict[str, Any]]:
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture
def settings() -> Settings:
    return Settings(quote_service_base_url=BASE_URL, http_timeout_seconds=2.0)


@pytest.fixture
def stub() -> StubQuoteService:
    return StubQuoteService()


@pytest.fixture
def quote_client(settings, stub) -> QuoteClient:
    return QuoteClient(settings, transport=stub.transport)


@pytest.fixture
def btc_usd() -> ConversionRequest:
    return ConversionRequest(amount=1.0, from_currency="BTC", to_currency="USD")
