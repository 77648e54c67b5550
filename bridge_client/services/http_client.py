from __future__ import annotations

"""Single-attempt JSON POST over a shared httpx.AsyncClient.

Every failure mode (connect error, timeout, non-2xx status, body that is not
JSON) is collapsed into TransportError carrying the original exception.
"""
import logging
from typing import Any, Dict, Optional

import httpx

from bridge_client.core.config import Settings
from bridge_client.core.errors import TransportError

logger = logging.getLogger("bridge_client.http")


def make_async_client(
    settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None
) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=settings.quote_service_base_url,
        timeout=settings.http_timeout_seconds,
        headers={"Content-Type": "application/json"},
        transport=transport,
    )


async def post_json(client: httpx.AsyncClient, path: str, payload: Dict[str, Any]) -> Any:
    try:
        resp = await client.post(path, json=payload)
        resp.raise_for_status()
        return resp.json()
    except httpx.HTTPStatusError as e:
        logger.info(
            "quote service returned HTTP %s",
            e.response.status_code,
            extra={"status_code": e.response.status_code, "url": str(e.request.url)},
        )
        raise TransportError(
            f"HTTP {e.response.status_code} for {e.request.url}", cause=e
        ) from e
    except (httpx.HTTPError, ValueError) as e:  # ValueError for JSON decode
        raise TransportError(f"Failed to post JSON to {path}: {e!r}", cause=e) from e
