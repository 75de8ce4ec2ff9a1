from __future__ import annotations

from typing import Any, Dict

from pydantic import ValidationError

from stock_tracker.client.gateway_client import StockApiClient, StockApiError
from stock_tracker.client.view import (
    DisplayQuote,
    PageElements,
    UiEvent,
    render_error_banner,
    render_stock_card,
)

EMPTY_SYMBOL_MESSAGE = "Please enter a stock symbol"
UNEXPECTED_RESPONSE_MESSAGE = "Unexpected response from server"


def _parse_float(value: Any) -> float | None:
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def format_backend_data(data: Dict[str, Any]) -> DisplayQuote:
    """Map a gateway quote onto the card fields, adding the sign to `change`."""
    change = _parse_float(data.get("change"))
    sign = "+" if change is not None and change >= 0 else ""
    return DisplayQuote(
        symbol=data.get("symbol"),
        name=data.get("name") or data.get("symbol"),
        price=data.get("price"),
        change=f"{sign}{data.get('change')}",
        change_percent=data.get("changePercent"),
        volume=data.get("volume"),
        high=data.get("high"),
        low=data.get("low"),
        open=data.get("open"),
    )


class StockTrackerController:
    """Drives the loading / error / result regions for one search at a time."""

    def __init__(self, elements: PageElements, api_client: StockApiClient | None = None) -> None:
        self.elements = elements
        self.api_client = api_client or StockApiClient()
        self.in_flight = False
        self._bind_events()

    def _bind_events(self) -> None:
        self.elements.form.add_event_listener("submit", self._on_submit)
        self.elements.symbol_input.add_event_listener("keypress", self._on_key_press)

    def _on_submit(self, event: UiEvent) -> None:
        event.prevent_default()
        self.handle_search()

    def _on_key_press(self, event: UiEvent) -> None:
        # swallowing the default keeps the browser from also submitting the form
        if event.key == "Enter":
            event.prevent_default()
            self.handle_search()

    @property
    def view_state(self) -> str:
        if self.in_flight:
            return "loading"
        if self.elements.error.display == "block":
            return "error"
        if self.elements.result.inner_html:
            return "result"
        return "idle"

    def handle_search(self) -> None:
        if self.in_flight:
            return

        symbol = self.elements.symbol_input.value.strip().upper()
        if not symbol:
            self.elements.result.inner_html = ""
            self.show_error(EMPTY_SYMBOL_MESSAGE)
            return

        print(f"[CLIENT][search] symbol={symbol}", flush=True)
        self.show_loading()
        self.hide_error()
        try:
            quote = self.fetch_stock_data(symbol)
            print(f"[CLIENT][search_result] symbol={quote.symbol}", flush=True)
            self.display_stock_data(quote)
        except StockApiError as exc:
            print(f"[CLIENT][search_error] error={exc.message}", flush=True)
            self.show_error(exc.message)
        except Exception as exc:
            print(f"[CLIENT][search_error] error={exc!r}", flush=True)
            self.show_error(str(exc) or UNEXPECTED_RESPONSE_MESSAGE)
        finally:
            self.hide_loading()

    def fetch_stock_data(self, symbol: str) -> DisplayQuote:
        data = self.api_client.fetch_quote(symbol)
        if not isinstance(data, dict):
            raise StockApiError(UNEXPECTED_RESPONSE_MESSAGE)
        try:
            return format_backend_data(data)
        except ValidationError as exc:
            raise StockApiError(UNEXPECTED_RESPONSE_MESSAGE) from exc

    def display_stock_data(self, quote: DisplayQuote) -> None:
        change = _parse_float(quote.change)
        is_positive = change is not None and change >= 0
        self.elements.result.inner_html = render_stock_card(quote, is_positive=is_positive)

    def show_loading(self) -> None:
        self.in_flight = True
        self.elements.loading.display = "block"
        self.elements.result.inner_html = ""
        self.elements.submit_button.disabled = True

    def hide_loading(self) -> None:
        self.in_flight = False
        self.elements.loading.display = "none"
        self.elements.submit_button.disabled = False

    def show_error(self, message: str) -> None:
        self.elements.error.inner_html = render_error_banner(message)
        self.elements.error.display = "block"

    def hide_error(self) -> None:
        self.elements.error.display = "none"
