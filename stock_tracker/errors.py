from __future__ import annotations


class GatewayError(Exception):
    """Terminal failure for one /api/stock request, rendered as a JSON body."""

    status_code = 500
    message = "Internal server error"

    def __init__(self, details: str | None = None) -> None:
        super().__init__(details or self.message)
        self.details = details

    def to_body(self) -> dict[str, str]:
        body = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class MethodNotAllowedError(GatewayError):
    status_code = 405
    message = "Method not allowed"


class MissingSymbolError(GatewayError):
    status_code = 400
    message = "Stock symbol is required"


class MissingServerConfigError(GatewayError):
    status_code = 500
    message = "API key not configured on server"


class UpstreamTransportError(GatewayError):
    status_code = 500
    message = "Failed to fetch stock data"

    def __init__(self, details: str) -> None:
        super().__init__(details)


class UnexpectedUpstreamShapeError(UpstreamTransportError):
    pass


class InvalidSymbolError(GatewayError):
    status_code = 404
    message = "Invalid stock symbol"


class UpstreamRateLimitedError(GatewayError):
    status_code = 429
    message = "API rate limit exceeded. Please try again later."


class NoDataForSymbolError(GatewayError):
    status_code = 404
    message = "No data found for this symbol"
