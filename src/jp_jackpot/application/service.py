"""JackpotApplicationService - "current balance" read surface.

Read-only; no transaction needed.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from src.jp_common.enums import GameVariant
from src.jp_common.money import clamp_non_negative, round_currency
from src.jp_jackpot.application.schemas import JackpotBalanceListResponse, JackpotBalanceOut
from src.jp_jackpot.domain.aggregator import BalanceAggregator
from src.jp_jackpot.domain.models import JackpotBalance
from src.jp_venue.application.service import VenueApplicationService


class JackpotApplicationService:
    def __init__(
        self,
        aggregator: BalanceAggregator | None = None,
        venues: VenueApplicationService | None = None,
    ) -> None:
        self._aggregator = aggregator or BalanceAggregator()
        self._venues = venues or VenueApplicationService()

    async def list_current(self, db: AsyncSession) -> JackpotBalanceListResponse:
        balances = await self._aggregator.all_balances(db)
        return JackpotBalanceListResponse(
            items=[JackpotBalanceOut.from_domain(b) for b in balances]
        )

    async def get_current(
        self, db: AsyncSession, venue_id: int, variant: object
    ) -> JackpotBalanceOut:
        venue = await self._venues.get_venue(db, venue_id)
        normalized = GameVariant.normalize(variant)
        balance = await self._aggregator.current_balance(db, venue_id, normalized)
        return JackpotBalanceOut.from_domain(
            JackpotBalance(
                venue_id=venue.id,
                venue_name=venue.name,
                variant=normalized,
                amount=clamp_non_negative(round_currency(balance)),
            )
        )
