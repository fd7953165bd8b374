from pydantic import BaseModel, Field, field_validator

from .domain.parsing import format_price
from .domain.types import Deal


class FindDealsRequest(BaseModel):
    query: str | None = None
    location: str | None = None
    max_price: str | None = Field(default=None, alias="maxPrice")

    @field_validator("query", "location", mode="before")
    @classmethod
    def _scalar_as_text(cls, v):
        # 123 is a usable query; 0 and false count as missing, like an empty string
        if isinstance(v, (bool, int, float)):
            return str(v) if v else None
        return v

    @field_validator("max_price", mode="before")
    @classmethod
    def _max_price_as_text(cls, v):
        # clients send both "300" and 300
        if v is None or isinstance(v, str):
            return v
        return str(v)


class DealOut(BaseModel):
    title: str
    price: str
    location: str
    condition: str
    dealScore: int = Field(..., ge=0, le=10)
    reasoning: str
    url: str

    @classmethod
    def from_deal(cls, d: Deal) -> "DealOut":
        price = format_price(d.price) if isinstance(d.price, int) else str(d.price or "")
        condition = getattr(d.condition, "value", d.condition)
        return cls(
            title=d.title,
            price=price,
            location=d.location,
            condition=str(condition or ""),
            dealScore=d.deal_score,
            reasoning=d.reasoning,
            url=d.url,
        )


class FindDealsResponse(BaseModel):
    deals: list[DealOut]


class ErrorOut(BaseModel):
    error: str
