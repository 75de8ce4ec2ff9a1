from __future__ import annotations

from typing import Callable

from stock_tracker.config.settings import Settings, get_settings
from stock_tracker.errors import (
    InvalidSymbolError,
    MissingServerConfigError,
    NoDataForSymbolError,
    UnexpectedUpstreamShapeError,
    UpstreamRateLimitedError,
    UpstreamTransportError,
)
from stock_tracker.integrations.alpha_vantage import parse_global_quote
from stock_tracker.schemas.quote import NormalizedQuote
from stock_tracker.schemas.upstream import (
    EmptyQuote,
    ErrorMarker,
    Malformed,
    RateLimited,
    WellFormedQuote,
)
from stock_tracker.services.quote_format import normalize_quote


class QuoteGatewayService:
    """Resolves one symbol against the upstream provider; no cache, no retry."""

    def __init__(
        self,
        *,
        upstream_client,
        get_settings: Callable[[], Settings] = get_settings,
    ) -> None:
        self.upstream_client = upstream_client
        self.get_settings = get_settings

    def get_quote(self, symbol: str) -> NormalizedQuote:
        settings = self.get_settings()
        if not settings.api_key_configured:
            raise MissingServerConfigError()

        print(f"[GATEWAY][fetch] symbol={symbol}", flush=True)
        try:
            payload = self.upstream_client.fetch_global_quote(
                symbol, api_key=settings.ALPHA_VANTAGE_API_KEY
            )
        except UpstreamTransportError as exc:
            print(f"[GATEWAY][upstream_error] symbol={symbol} error={exc.details}", flush=True)
            raise

        result = parse_global_quote(payload)
        if isinstance(result, WellFormedQuote):
            return normalize_quote(result.quote)

        print(f"[GATEWAY][upstream_rejected] symbol={symbol} kind={result.kind}", flush=True)
        if isinstance(result, ErrorMarker):
            raise InvalidSymbolError()
        if isinstance(result, RateLimited):
            raise UpstreamRateLimitedError()
        if isinstance(result, EmptyQuote):
            raise NoDataForSymbolError()
        if isinstance(result, Malformed):
            raise UnexpectedUpstreamShapeError(result.reason)
        raise UnexpectedUpstreamShapeError(f"unhandled upstream result: {result.kind}")
