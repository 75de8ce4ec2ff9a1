from typing import Literal, Union

from pydantic import BaseModel

from stock_tracker.schemas.quote import RawQuote


class WellFormedQuote(BaseModel):
    kind: Literal["quote"] = "quote"
    quote: RawQuote


class ErrorMarker(BaseModel):
    kind: Literal["error_marker"] = "error_marker"
    message: str


class RateLimited(BaseModel):
    kind: Literal["rate_limited"] = "rate_limited"
    note: str


class EmptyQuote(BaseModel):
    kind: Literal["empty_quote"] = "empty_quote"


class Malformed(BaseModel):
    kind: Literal["malformed"] = "malformed"
    reason: str


UpstreamResult = Union[WellFormedQuote, ErrorMarker, RateLimited, EmptyQuote, Malformed]
