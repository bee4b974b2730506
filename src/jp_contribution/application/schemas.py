"""Pydantic schemas for jp_contribution API."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from src.jp_common.datetime_utils import iso_or_none
from src.jp_common.money import money_to_display
from src.jp_common.schemas import ManagerStr, MoneyIn, VariantIn, VenueIdIn
from src.jp_contribution.domain.models import Contribution
from src.jp_venue.application.schemas import VenueOut

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class CreateContributionRequest(BaseModel):
    venue_id: VenueIdIn
    variant: VariantIn
    gross_amount: MoneyIn
    manager: ManagerStr
    occurred_at: datetime | None = Field(None, description="ISO8601; defaults to now")


class UpdateContributionRequest(BaseModel):
    variant: VariantIn | None = None
    gross_amount: MoneyIn | None = None

    def is_empty(self) -> bool:
        return self.variant is None and self.gross_amount is None


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class ContributionResponse(BaseModel):
    id: int
    occurred_at: str
    venue_id: int
    variant: str
    gross_amount: Decimal
    gross_amount_display: str
    withheld_amount: Decimal
    withheld_amount_display: str
    jackpot_contribution: Decimal
    jackpot_contribution_display: str
    manager: str
    venue: VenueOut | None
    created_at: str | None
    updated_at: str | None

    @classmethod
    def from_domain(cls, c: Contribution) -> "ContributionResponse":
        return cls(
            id=c.id,
            occurred_at=c.occurred_at.isoformat(),
            venue_id=c.venue_id,
            variant=c.variant.value,
            gross_amount=c.gross_amount,
            gross_amount_display=money_to_display(c.gross_amount),
            withheld_amount=c.withheld_amount,
            withheld_amount_display=money_to_display(c.withheld_amount),
            jackpot_contribution=c.jackpot_contribution,
            jackpot_contribution_display=money_to_display(c.jackpot_contribution),
            manager=c.manager,
            venue=VenueOut.from_domain(c.venue) if c.venue else None,
            created_at=iso_or_none(c.created_at),
            updated_at=iso_or_none(c.updated_at),
        )


class ContributionListResponse(BaseModel):
    items: list[ContributionResponse]
