"""Pydantic schemas for jp_jackpot API responses."""

from decimal import Decimal

from pydantic import BaseModel

from src.jp_common.money import money_to_display
from src.jp_jackpot.domain.models import JackpotBalance


class JackpotBalanceOut(BaseModel):
    venue_id: int
    venue_name: str
    variant: str
    amount: Decimal          # rounded to cents, never negative
    amount_display: str

    @classmethod
    def from_domain(cls, b: JackpotBalance) -> "JackpotBalanceOut":
        return cls(
            venue_id=b.venue_id,
            venue_name=b.venue_name,
            variant=b.variant.value,
            amount=b.amount,
            amount_display=money_to_display(b.amount),
        )


class JackpotBalanceListResponse(BaseModel):
    items: list[JackpotBalanceOut]
