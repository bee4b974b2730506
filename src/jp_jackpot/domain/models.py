"""Domain models for jp_jackpot."""

from dataclasses import dataclass
from decimal import Decimal

from src.jp_common.enums import GameVariant


@dataclass(frozen=True)
class LedgerLine:
    """One signed movement of a (venue, variant) pool.

    Contributions are positive, payouts negative. The bulk query may hand
    over lines that are already partial sums; the fold does not care.
    """

    venue_id: int
    variant: GameVariant
    amount: Decimal | None
    venue_name: str = ""


@dataclass(frozen=True)
class JackpotBalance:
    venue_id: int
    venue_name: str
    variant: GameVariant
    amount: Decimal
