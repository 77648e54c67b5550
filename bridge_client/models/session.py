from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from bridge_client.core.errors import QuoteError
from .quotes import ConversionRequest, ConversionResult, QuoteResult


class SessionMode(str, Enum):
    IDLE = "idle"
    LOADING = "loading"


class Operation(str, Enum):
    PREVIEW = "preview"
    CONVERSION = "conversion"


@dataclass(frozen=True)
class SessionState:
    """Immutable snapshot of a quote session.

    At most one of last_preview / last_conversion is set, and pending is set
    exactly while mode is LOADING.
    """

    mode: SessionMode = SessionMode.IDLE
    pending: Optional[Operation] = None
    last_request: Optional[ConversionRequest] = None
    last_preview: Optional[QuoteResult] = None
    last_conversion: Optional[ConversionResult] = None
    last_error: Optional[QuoteError] = None

    def __post_init__(self) -> None:
        if self.last_preview is not None and self.last_conversion is not None:
            raise ValueError("preview and conversion results are mutually exclusive")
        if (self.mode is SessionMode.LOADING) != (self.pending is not None):
            raise ValueError("pending operation must be set exactly while loading")

    @property
    def loading(self) -> bool:
        return self.mode is SessionMode.LOADING
