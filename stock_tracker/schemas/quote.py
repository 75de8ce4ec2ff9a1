import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


class RawQuote(BaseModel):
    """One `Global Quote` object as returned by Alpha Vantage."""

    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    symbol: str = Field(alias="01. symbol", min_length=1)
    open: float = Field(alias="02. open")
    high: float = Field(alias="03. high")
    low: float = Field(alias="04. low")
    price: float = Field(alias="05. price")
    volume: int = Field(alias="06. volume")
    latest_trading_day: str = Field(alias="07. latest trading day")
    previous_close: float | None = Field(default=None, alias="08. previous close")
    change: float = Field(alias="09. change")
    change_percent: float = Field(alias="10. change percent")

    @field_validator("volume", mode="before")
    @classmethod
    def parse_volume(cls, value):
        # integer part only, e.g. "1234.9" -> 1234
        if isinstance(value, str):
            match = _LEADING_INT.match(value)
            if match is None:
                raise ValueError(f"invalid volume: {value!r}")
            return int(match.group(1))
        return value

    @field_validator("change_percent", mode="before")
    @classmethod
    def strip_percent_sign(cls, value):
        if isinstance(value, str):
            return value.replace("%", "", 1)
        return value


class NormalizedQuote(BaseModel):
    """Stable response contract of GET /api/stock."""

    model_config = ConfigDict(populate_by_name=True)

    symbol: str
    name: str
    price: str
    change: str
    change_percent: str = Field(alias="changePercent")
    volume: str
    high: str
    low: str
    open: str
    last_updated: str = Field(alias="lastUpdated")
