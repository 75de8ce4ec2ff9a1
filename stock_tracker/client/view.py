from __future__ import annotations

from html import escape
from typing import Callable

from pydantic import BaseModel, ConfigDict

POSITIVE_ICON = "📈"
NEGATIVE_ICON = "📉"
ERROR_ICON = "❌"


class UiEvent:
    def __init__(self, type: str, key: str | None = None) -> None:
        self.type = type
        self.key = key
        self.default_prevented = False

    def prevent_default(self) -> None:
        self.default_prevented = True


class ElementHandle:
    """In-process stand-in for a DOM node: value, disabled flag, display and markup."""

    def __init__(self, element_id: str, *, value: str = "", display: str = "none") -> None:
        self.element_id = element_id
        self.value = value
        self.disabled = False
        self.display = display
        self.inner_html = ""
        self._listeners: dict[str, list[Callable[[UiEvent], None]]] = {}

    def add_event_listener(self, event_type: str, handler: Callable[[UiEvent], None]) -> None:
        self._listeners.setdefault(event_type, []).append(handler)

    def dispatch(self, event: UiEvent) -> UiEvent:
        for handler in list(self._listeners.get(event.type, [])):
            handler(event)
        return event


class PageElements(BaseModel):
    """Regions of the host page the controller reads from and writes into."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    form: ElementHandle
    symbol_input: ElementHandle
    submit_button: ElementHandle
    loading: ElementHandle
    error: ElementHandle
    result: ElementHandle

    @classmethod
    def create(cls) -> "PageElements":
        return cls(
            form=ElementHandle("stockForm", display="block"),
            symbol_input=ElementHandle("stockSymbol", display="block"),
            submit_button=ElementHandle("searchBtn", display="block"),
            loading=ElementHandle("loadingContainer"),
            error=ElementHandle("errorContainer"),
            result=ElementHandle("stockContainer", display="block"),
        )


class DisplayQuote(BaseModel):
    symbol: str
    name: str
    price: str
    change: str
    change_percent: str
    volume: str
    high: str
    low: str
    open: str


def _detail(label: str, value: str, css_class: str = "") -> str:
    value_class = f"detail-value {css_class}".strip()
    return (
        '<div class="detail-item">'
        f'<div class="detail-label">{label}</div>'
        f'<div class="{value_class}">{value}</div>'
        "</div>"
    )


def render_stock_card(quote: DisplayQuote, *, is_positive: bool) -> str:
    change_class = "positive" if is_positive else "negative"
    change_icon = POSITIVE_ICON if is_positive else NEGATIVE_ICON
    details = "".join(
        [
            _detail("Change", f"{change_icon} {escape(quote.change)}", change_class),
            _detail("Change %", escape(quote.change_percent), change_class),
            _detail("Volume", escape(quote.volume)),
            _detail("Day High", f"${escape(quote.high)}"),
            _detail("Day Low", f"${escape(quote.low)}"),
            _detail("Open", f"${escape(quote.open)}"),
        ]
    )
    return (
        '<div class="stock-card">'
        '<div class="stock-header">'
        "<div>"
        f'<div class="stock-symbol">{escape(quote.symbol)}</div>'
        f'<div class="stock-name">{escape(quote.name)}</div>'
        "</div>"
        f'<div class="stock-price {change_class}">${escape(quote.price)}</div>'
        "</div>"
        f'<div class="stock-details">{details}</div>'
        "</div>"
    )


def render_error_banner(message: str) -> str:
    return f'<div class="error">{ERROR_ICON} {escape(message)}</div>'
