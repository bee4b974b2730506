"""Domain models for jp_payout - pure dataclasses.

A payout rule's prize is a tagged variant, FixedPrize(amount) or
PercentagePrize(fraction), rather than a kind string plus an overloaded
value column.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from src.jp_common.enums import GameVariant, RuleKind
from src.jp_venue.domain.models import Venue

DEFAULT_PLAYER_LABEL = "PREMIADO"


@dataclass(frozen=True)
class FixedPrize:
    amount: Decimal

    @property
    def kind(self) -> RuleKind:
        return RuleKind.FIXED

    @property
    def value(self) -> Decimal:
        return self.amount


@dataclass(frozen=True)
class PercentagePrize:
    fraction: Decimal   # 0.025 == 2.5% of the current pool

    @property
    def kind(self) -> RuleKind:
        return RuleKind.PERCENTAGE

    @property
    def value(self) -> Decimal:
        return self.fraction


Prize = FixedPrize | PercentagePrize


@dataclass(frozen=True)
class RuleKey:
    """Composite key of the rule table; lookups are exact on all three parts."""

    variant: GameVariant
    table_label: str
    hand_label: str

    @classmethod
    def of(cls, variant: object, table_label: str, hand_label: str) -> "RuleKey":
        return cls(
            variant=GameVariant.normalize(variant),
            table_label=table_label.strip(),
            hand_label=hand_label.strip(),
        )


@dataclass(frozen=True)
class PayoutRule:
    id: int
    key: RuleKey
    prize: Prize

    @property
    def kind(self) -> RuleKind:
        return self.prize.kind

    @property
    def value(self) -> Decimal:
        return self.prize.value


@dataclass
class Payout:
    id: int
    occurred_at: datetime
    time_of_day: str | None
    venue_id: int
    variant: GameVariant
    table_label: str
    hand_label: str
    player_label: str
    applied_percentage: Decimal | None   # set only for percentage rules
    payout_amount: Decimal
    done: bool
    manager: str
    venue: Venue | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
