from __future__ import annotations

from typing import Any, Dict, Optional

import requests

DEFAULT_GATEWAY_URL = "http://127.0.0.1:8000"


class StockApiError(Exception):
    """Any failed call to the quote gateway; str(exc) is the text shown to the user."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class StockApiClient:
    def __init__(
        self,
        base_url: str = DEFAULT_GATEWAY_URL,
        timeout: float = 15.0,
        session: Optional[Any] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests

    @staticmethod
    def _error_message(response: Any) -> str:
        try:
            body = response.json()
        except ValueError as exc:
            return str(exc)
        if isinstance(body, dict) and body.get("error"):
            return str(body["error"])
        return "Backend error"

    def fetch_quote(self, symbol: str) -> Dict[str, Any]:
        try:
            response = self.session.get(
                f"{self.base_url}/api/stock",
                params={"symbol": symbol},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise StockApiError(str(exc)) from exc

        if not response.ok:
            raise StockApiError(self._error_message(response), status_code=response.status_code)

        try:
            return response.json()
        except ValueError as exc:
            raise StockApiError(str(exc), status_code=response.status_code) from exc
