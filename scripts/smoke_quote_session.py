import json
import os
import sys

import httpx
from fastapi.testclient import TestClient

"""Smoke run of the session endpoints against an in-process fake quote service.

Runs a pre-quote, then a conversion with an arbitrage profit, then a failing
conversion, printing the session view after each step.
"""


def fake_quote_service(request: httpx.Request) -> httpx.Response:
    body = json.loads(request.content)
    amount = body["amount"] or 0
    if body["from_currency"] == body["to_currency"]:
        return httpx.Response(503, json={"detail": "no route"})
    if request.url.path == "/api/prequote":
        return httpx.Response(200, json={"direct_amount": amount * 60000})
    return httpx.Response(
        200,
        json={
            "direct_amount": amount * 60000,
            "converted_amount": amount * 60500,
            "optimized_rate": 60500,
            "exchange_path": [body["from_currency"], "USDT", body["to_currency"]],
            "savings": amount * 500,
            "commission": amount * 50,
            "arbitrage_profit": amount * 25,
        },
    )


def run():
    from bridge_client.core.config import Settings
    from bridge_client.main import create_app

    settings = Settings(quote_service_base_url="http://quotes.local")
    app = create_app(settings_override=settings, transport=httpx.MockTransport(fake_quote_service))
    with TestClient(app) as client:
        steps = {
            "prequote": client.post("/session/prequote", json={"amount": "2"}),
            "convert": client.post("/session/convert", json={"amount": "2"}),
            "convert_same_currency": client.post(
                "/session/convert",
                json={"amount": "1", "from_currency": "USD", "to_currency": "USD"},
            ),
        }
        print(json.dumps({k: v.json() for k, v in steps.items()}, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    sys.path.append(os.getcwd())
    run()
