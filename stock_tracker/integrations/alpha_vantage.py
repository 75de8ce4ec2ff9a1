from __future__ import annotations

from typing import Any, Optional

import requests
from pydantic import ValidationError

from stock_tracker.config.settings import DEFAULT_ALPHA_VANTAGE_BASE_URL
from stock_tracker.errors import UpstreamTransportError
from stock_tracker.schemas.quote import RawQuote
from stock_tracker.schemas.upstream import (
    EmptyQuote,
    ErrorMarker,
    Malformed,
    RateLimited,
    UpstreamResult,
    WellFormedQuote,
)

ERROR_MARKER_KEY = "Error Message"
RATE_LIMIT_MARKER_KEY = "Note"
QUOTE_KEY = "Global Quote"


def _describe_validation_error(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(item) for item in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts)


def parse_global_quote(payload: Any) -> UpstreamResult:
    """Decode an Alpha Vantage GLOBAL_QUOTE payload into one tagged result."""
    if not isinstance(payload, dict):
        return Malformed(reason="payload must be a JSON object")

    error_message = payload.get(ERROR_MARKER_KEY)
    if error_message:
        return ErrorMarker(message=str(error_message))

    note = payload.get(RATE_LIMIT_MARKER_KEY)
    if note:
        return RateLimited(note=str(note))

    quote = payload.get(QUOTE_KEY)
    if not quote:
        return EmptyQuote()
    if not isinstance(quote, dict):
        return Malformed(reason=f"{QUOTE_KEY} must be an object")

    try:
        return WellFormedQuote(quote=RawQuote.model_validate(quote))
    except ValidationError as exc:
        return Malformed(reason=_describe_validation_error(exc))


class AlphaVantageClient:
    """Single-shot GLOBAL_QUOTE client; the API key is passed per call."""

    def __init__(
        self,
        base_url: str = DEFAULT_ALPHA_VANTAGE_BASE_URL,
        timeout: float = 10.0,
        session: Optional[Any] = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self.session = session or requests

    @staticmethod
    def _redact(message: str, api_key: str) -> str:
        if not api_key:
            return message
        return message.replace(api_key, "***")

    def fetch_global_quote(self, symbol: str, *, api_key: str) -> Any:
        try:
            response = self.session.get(
                self.base_url,
                params={"function": "GLOBAL_QUOTE", "symbol": symbol, "apikey": api_key},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise UpstreamTransportError(self._redact(str(exc), api_key)) from exc

        if not response.ok:
            raise UpstreamTransportError(f"Alpha Vantage API responded with {response.status_code}")

        try:
            return response.json()
        except ValueError as exc:
            raise UpstreamTransportError(
                self._redact(f"invalid JSON from Alpha Vantage: {exc}", api_key)
            ) from exc
