"""Domain models for jp_contribution - pure dataclasses, no business logic."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from src.jp_common.enums import GameVariant
from src.jp_venue.domain.models import Venue


@dataclass
class Contribution:
    id: int
    occurred_at: datetime
    venue_id: int
    variant: GameVariant
    gross_amount: Decimal           # as collected, unrounded
    withheld_amount: Decimal        # kept by the venue (<= standard_withdrawal)
    jackpot_contribution: Decimal   # fed into the (venue, variant) pool
    manager: str
    venue: Venue | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
