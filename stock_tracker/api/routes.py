from fastapi import APIRouter, Request, Response
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from stock_tracker.errors import GatewayError, MethodNotAllowedError, MissingSymbolError

router = APIRouter()

CORS_HEADERS = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Headers': 'Content-Type',
    'Access-Control-Allow-Methods': 'GET, OPTIONS',
    'Content-Type': 'application/json',
}

_ALLOWED_METHODS = {'GET', 'OPTIONS'}
# every other verb is routed here too so it can be answered with 405 + CORS
_ROUTED_METHODS = ['GET', 'OPTIONS', 'POST', 'PUT', 'PATCH', 'DELETE', 'HEAD', 'TRACE', 'CONNECT']


def _json_response(status_code: int, body: dict) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body, headers=CORS_HEADERS)


def _error_response(exc: GatewayError) -> JSONResponse:
    return _json_response(exc.status_code, exc.to_body())


async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
    # custom verbs never reach the route; the router rejects them with 405 first
    if exc.status_code == 405:
        return _error_response(MethodNotAllowedError())
    return await http_exception_handler(request, exc)


@router.api_route('/stock', methods=_ROUTED_METHODS)
def get_stock(request: Request):
    if request.method not in _ALLOWED_METHODS:
        return _error_response(MethodNotAllowedError())

    if request.method == 'OPTIONS':
        return Response(status_code=200, content=b'', headers=CORS_HEADERS)

    symbol = request.query_params.get('symbol')
    if not symbol:
        return _error_response(MissingSymbolError())

    service = request.app.state.quote_gateway_service
    try:
        quote = service.get_quote(symbol)
    except GatewayError as exc:
        return _error_response(exc)
    return _json_response(200, quote.model_dump(by_alias=True))
