"""Pydantic schemas for jp_venue API responses."""

from decimal import Decimal

from pydantic import BaseModel

from src.jp_common.money import money_to_display
from src.jp_venue.domain.models import Venue


class VenueOut(BaseModel):
    id: int
    name: str
    standard_withdrawal: Decimal
    standard_withdrawal_display: str

    @classmethod
    def from_domain(cls, venue: Venue) -> "VenueOut":
        return cls(
            id=venue.id,
            name=venue.name,
            standard_withdrawal=venue.standard_withdrawal,
            standard_withdrawal_display=money_to_display(venue.standard_withdrawal),
        )


class VenueListResponse(BaseModel):
    items: list[VenueOut]
