"""Domain models for jp_event - the venue side of each contribution.

The amount withheld from every contribution stays with the venue to pay
for events; write-offs record what was spent from it. Neither touches the
jackpot pools.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from src.jp_venue.domain.models import Venue


@dataclass
class EventWithdrawal:
    contribution_id: int
    occurred_at: datetime
    venue_id: int
    venue_name: str
    withheld_amount: Decimal


@dataclass
class EventWriteOff:
    id: int
    occurred_at: datetime
    venue_id: int
    amount: Decimal
    note: str | None
    venue: Venue | None = None
    created_at: datetime | None = None
