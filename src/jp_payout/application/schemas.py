"""Pydantic schemas for jp_payout API."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from src.jp_common.datetime_utils import iso_or_none
from src.jp_common.money import money_to_display
from src.jp_common.schemas import (
    HandLabelStr,
    ManagerStr,
    TableLabelStr,
    VariantIn,
    VenueIdIn,
)
from src.jp_payout.domain.models import Payout, PayoutRule
from src.jp_venue.application.schemas import VenueOut

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class CreatePayoutRequest(BaseModel):
    venue_id: VenueIdIn
    variant: VariantIn
    table_label: TableLabelStr = Field(..., description="Blind level, e.g. '1-2', '5-10'")
    hand_label: HandLabelStr = Field(..., description="e.g. 'Quadra', 'Straight Flush'")
    manager: ManagerStr
    player_label: str | None = Field(None, max_length=120)
    done: bool = False
    occurred_at: datetime | None = Field(None, description="ISO8601; defaults to now")
    time_of_day: str | None = Field(None, max_length=16, description="Free text, e.g. '21:40'")


class UpdatePayoutRequest(BaseModel):
    variant: VariantIn | None = None
    table_label: str | None = Field(None, max_length=32)
    hand_label: str | None = Field(None, max_length=64)

    def is_empty(self) -> bool:
        return self.variant is None and self.table_label is None and self.hand_label is None


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class PayoutResponse(BaseModel):
    id: int
    occurred_at: str
    time_of_day: str | None
    venue_id: int
    variant: str
    table_label: str
    hand_label: str
    player_label: str
    applied_percentage: Decimal | None
    payout_amount: Decimal
    payout_amount_display: str
    done: bool
    manager: str
    venue: VenueOut | None
    created_at: str | None
    updated_at: str | None

    @classmethod
    def from_domain(cls, p: Payout) -> "PayoutResponse":
        return cls(
            id=p.id,
            occurred_at=p.occurred_at.isoformat(),
            time_of_day=p.time_of_day,
            venue_id=p.venue_id,
            variant=p.variant.value,
            table_label=p.table_label,
            hand_label=p.hand_label,
            player_label=p.player_label,
            applied_percentage=p.applied_percentage,
            payout_amount=p.payout_amount,
            payout_amount_display=money_to_display(p.payout_amount),
            done=p.done,
            manager=p.manager,
            venue=VenueOut.from_domain(p.venue) if p.venue else None,
            created_at=iso_or_none(p.created_at),
            updated_at=iso_or_none(p.updated_at),
        )


class PayoutListResponse(BaseModel):
    items: list[PayoutResponse]


class PayoutRuleOut(BaseModel):
    id: int
    variant: str
    table_label: str
    hand_label: str
    kind: str
    value: Decimal

    @classmethod
    def from_domain(cls, rule: PayoutRule) -> "PayoutRuleOut":
        return cls(
            id=rule.id,
            variant=rule.key.variant.value,
            table_label=rule.key.table_label,
            hand_label=rule.key.hand_label,
            kind=rule.kind.value,
            value=rule.value,
        )


class PayoutRuleListResponse(BaseModel):
    items: list[PayoutRuleOut]
