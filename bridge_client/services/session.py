from __future__ import annotations

import logging
from typing import Awaitable, Callable, Optional, Protocol

from bridge_client.core.errors import Busy, QuoteError
from bridge_client.core.logging import new_request_id, request_id_ctx
from bridge_client.models.quotes import (
    ConversionRequest,
    ConversionResult,
    QuoteOutcome,
    QuoteResult,
)
from bridge_client.models.session import Operation, SessionMode, SessionState

"""Quote session state machine.

States: IDLE and LOADING. Starting a preview or a conversion clears both
previous results, moves to LOADING and awaits the quote client; completion
(success or failure) returns to IDLE with at most one result slot filled.

Overlap policy: a start issued while LOADING is rejected with Busy and does
not touch state or the network. The check and the LOADING transition happen
with no await in between, so only one request is ever in flight.
"""

logger = logging.getLogger("bridge_client.session")


class SupportsQuotes(Protocol):
    async def pre_quote(self, req: ConversionRequest) -> QuoteOutcome[QuoteResult]: ...

    async def convert(self, req: ConversionRequest) -> QuoteOutcome[ConversionResult]: ...


ErrorReporter = Callable[[Operation, QuoteError], None]


def log_error_reporter(operation: Operation, error: QuoteError) -> None:
    logger.warning(
        "%s failed: %s",
        operation.value,
        error.message,
        extra={"operation": operation.value, "error_kind": error.kind},
    )


class QuoteSession:
    """Owns the SessionState for one user; readers get immutable snapshots."""

    def __init__(self, client: SupportsQuotes, reporter: Optional[ErrorReporter] = None):
        self._client = client
        self._report = reporter or log_error_reporter
        self._state = SessionState()

    @property
    def state(self) -> SessionState:
        return self._state

    async def start_preview(self, req: ConversionRequest) -> QuoteOutcome[QuoteResult]:
        return await self._run(Operation.PREVIEW, req, self._client.pre_quote)

    async def start_conversion(
        self, req: ConversionRequest
    ) -> QuoteOutcome[ConversionResult]:
        return await self._run(Operation.CONVERSION, req, self._client.convert)

    def reset(self) -> SessionState:
        if self._state.loading:
            raise Busy()
        self._state = SessionState()
        return self._state

    async def _run(
        self,
        operation: Operation,
        req: ConversionRequest,
        call: Callable[[ConversionRequest], Awaitable[QuoteOutcome]],
    ) -> QuoteOutcome:
        if self._state.loading:
            busy = Busy()
            self._report(operation, busy)
            return QuoteOutcome.failure(busy)

        self._state = SessionState(
            mode=SessionMode.LOADING, pending=operation, last_request=req
        )
        token = request_id_ctx.set(request_id_ctx.get() or new_request_id())
        outcome: Optional[QuoteOutcome] = None
        try:
            logger.debug("%s started", operation.value, extra={"operation": operation.value})
            outcome = await call(req)
        finally:
            # a cancelled call still lands back in IDLE with no result
            self._state = self._completed(operation, req, outcome)
            try:
                if outcome is not None and not outcome.ok:
                    self._report(operation, outcome.error)  # type: ignore[arg-type]
            finally:
                request_id_ctx.reset(token)
        logger.info(
            "%s completed", operation.value, extra={"operation": operation.value}
        )
        return outcome

    @staticmethod
    def _completed(
        operation: Operation, req: ConversionRequest, outcome: Optional[QuoteOutcome]
    ) -> SessionState:
        if outcome is None:
            return SessionState(last_request=req)
        if not outcome.ok:
            return SessionState(last_request=req, last_error=outcome.error)
        if operation is Operation.PREVIEW:
            return SessionState(last_request=req, last_preview=outcome.value)
        return SessionState(last_request=req, last_conversion=outcome.value)
