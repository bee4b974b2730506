"""Domain models for jp_venue - pure dataclasses, no SQLAlchemy dependency."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass
class Venue:
    id: int
    name: str
    standard_withdrawal: Decimal   # withheld from every contribution before the jackpot
    created_at: datetime | None = None
