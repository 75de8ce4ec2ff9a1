from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from stock_tracker.api.routes import method_not_allowed_handler, router
from stock_tracker.config.settings import Settings, get_settings
from stock_tracker.integrations.alpha_vantage import AlphaVantageClient
from stock_tracker.services.quote_gateway import QuoteGatewayService


def _bind_runtime_clients(app: FastAPI, settings: Settings) -> None:
    app.state.quote_gateway_service.upstream_client = AlphaVantageClient(
        base_url=settings.ALPHA_VANTAGE_BASE_URL,
        timeout=settings.UPSTREAM_TIMEOUT_SEC,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = app.state.get_settings()
    _bind_runtime_clients(app, settings)
    print(
        "[GATEWAY][startup] "
        f"api_key_configured={settings.api_key_configured} "
        f"base_url={settings.ALPHA_VANTAGE_BASE_URL}",
        flush=True,
    )
    yield


app = FastAPI(title="Stock Tracker Gateway", version="0.1.0", lifespan=lifespan)
app.include_router(router, prefix="/api")
app.add_exception_handler(StarletteHTTPException, method_not_allowed_handler)

# NOTE: lazy-loaded so app import does not require env during tests.
app.state.get_settings = get_settings
app.state.quote_gateway_service = QuoteGatewayService(
    upstream_client=AlphaVantageClient(),
    get_settings=lambda: app.state.get_settings(),
)
