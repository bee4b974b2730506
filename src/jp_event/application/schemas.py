"""Pydantic schemas for jp_event API."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from src.jp_common.datetime_utils import iso_or_none
from src.jp_common.money import money_to_display
from src.jp_common.schemas import MoneyIn, VenueIdIn
from src.jp_event.domain.models import EventWithdrawal, EventWriteOff
from src.jp_venue.application.schemas import VenueOut


class CreateWriteOffRequest(BaseModel):
    venue_id: VenueIdIn
    amount: MoneyIn
    note: str | None = Field(None, max_length=500)
    occurred_at: datetime | None = None


class EventWithdrawalOut(BaseModel):
    contribution_id: int
    occurred_at: str
    venue_id: int
    venue_name: str
    withheld_amount: Decimal
    withheld_amount_display: str

    @classmethod
    def from_domain(cls, w: EventWithdrawal) -> "EventWithdrawalOut":
        return cls(
            contribution_id=w.contribution_id,
            occurred_at=w.occurred_at.isoformat(),
            venue_id=w.venue_id,
            venue_name=w.venue_name,
            withheld_amount=w.withheld_amount,
            withheld_amount_display=money_to_display(w.withheld_amount),
        )


class EventWithdrawalListResponse(BaseModel):
    items: list[EventWithdrawalOut]


class EventWriteOffOut(BaseModel):
    id: int
    occurred_at: str
    venue_id: int
    amount: Decimal
    amount_display: str
    note: str | None
    venue: VenueOut | None
    created_at: str | None

    @classmethod
    def from_domain(cls, w: EventWriteOff) -> "EventWriteOffOut":
        return cls(
            id=w.id,
            occurred_at=w.occurred_at.isoformat(),
            venue_id=w.venue_id,
            amount=w.amount,
            amount_display=money_to_display(w.amount),
            note=w.note,
            venue=VenueOut.from_domain(w.venue) if w.venue else None,
            created_at=iso_or_none(w.created_at),
        )


class EventWriteOffListResponse(BaseModel):
    items: list[EventWriteOffOut]
