"""PayoutApplicationService - create, recompute and list payouts.

Both writes run inside `async with db.begin()` with the venue row locked
before the balance is read, so the pool a percentage payout is computed
from cannot change between the read and the insert/update.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from src.jp_common.datetime_utils import ensure_aware
from src.jp_common.errors import BlankFieldError, NothingToUpdateError, PayoutNotFoundError
from src.jp_jackpot.domain.aggregator import BalanceAggregator
from src.jp_payout.application.schemas import (
    CreatePayoutRequest,
    PayoutListResponse,
    PayoutResponse,
    PayoutRuleListResponse,
    PayoutRuleOut,
    UpdatePayoutRequest,
)
from src.jp_payout.domain.models import DEFAULT_PLAYER_LABEL
from src.jp_payout.domain.repository import (
    PayoutRepositoryProtocol,
    PayoutRuleRepositoryProtocol,
)
from src.jp_payout.domain.resolver import BalanceSource, PayoutResolver
from src.jp_payout.infrastructure.persistence import PayoutRepository, PayoutRuleRepository
from src.jp_venue.application.service import VenueApplicationService

logger = logging.getLogger(__name__)

LATEST_PAYOUTS_LIMIT = 5
_UPDATABLE_FIELDS = ("variant", "table_label", "hand_label")


class PayoutApplicationService:
    def __init__(
        self,
        repo: PayoutRepositoryProtocol | None = None,
        rules: PayoutRuleRepositoryProtocol | None = None,
        balances: BalanceSource | None = None,
        venues: VenueApplicationService | None = None,
    ) -> None:
        self._repo: PayoutRepositoryProtocol = repo or PayoutRepository()
        self._rules: PayoutRuleRepositoryProtocol = rules or PayoutRuleRepository()
        self._resolver = PayoutResolver(self._rules, balances or BalanceAggregator())
        self._venues = venues or VenueApplicationService()

    async def create_payout(
        self, db: AsyncSession, req: CreatePayoutRequest
    ) -> PayoutResponse:
        async with db.begin():
            venue = await self._venues.lock_venue(db, req.venue_id)
            quote = await self._resolver.resolve(
                db, req.variant, req.table_label, req.hand_label, venue.id
            )
            player = (req.player_label or "").strip() or DEFAULT_PLAYER_LABEL
            payout = await self._repo.insert_payout(
                db,
                venue_id=venue.id,
                occurred_at=ensure_aware(req.occurred_at),
                time_of_day=req.time_of_day or None,
                variant=req.variant,
                table_label=req.table_label,
                hand_label=req.hand_label,
                player_label=player,
                applied_percentage=quote.applied_percentage,
                payout_amount=quote.payout_amount,
                done=req.done,
                manager=req.manager,
            )
        logger.info(
            "Payout %s recorded: venue=%s variant=%s table=%s hand=%s kind=%s amount=%s",
            payout.id,
            venue.id,
            payout.variant.value,
            payout.table_label,
            payout.hand_label,
            quote.kind.value,
            quote.payout_amount,
        )
        return PayoutResponse.from_domain(payout)

    async def update_payout(
        self, db: AsyncSession, payout_id: int, req: UpdatePayoutRequest
    ) -> PayoutResponse:
        if req.is_empty():
            raise NothingToUpdateError(_UPDATABLE_FIELDS)

        async with db.begin():
            current = await self._repo.get_payout_by_id(db, payout_id, for_update=True)
            if current is None:
                raise PayoutNotFoundError(payout_id)

            variant = req.variant if req.variant is not None else current.variant
            table_label = (
                req.table_label if req.table_label is not None else current.table_label
            ).strip()
            if not table_label:
                raise BlankFieldError("table_label")
            hand_label = (
                req.hand_label if req.hand_label is not None else current.hand_label
            ).strip()
            if not hand_label:
                raise BlankFieldError("hand_label")

            await self._venues.lock_venue(db, current.venue_id)
            # Recompute against the pool without this payout's stale amount.
            quote = await self._resolver.resolve(
                db,
                variant,
                table_label,
                hand_label,
                current.venue_id,
                exclude_payout_id=payout_id,
            )
            updated = await self._repo.update_payout(
                db,
                payout_id,
                variant=variant,
                table_label=table_label,
                hand_label=hand_label,
                applied_percentage=quote.applied_percentage,
                payout_amount=quote.payout_amount,
            )
        logger.info(
            "Payout %s recomputed: %s -> %s (kind=%s)",
            payout_id,
            current.payout_amount,
            quote.payout_amount,
            quote.kind.value,
        )
        return PayoutResponse.from_domain(updated)

    async def list_payouts(self, db: AsyncSession) -> PayoutListResponse:
        payouts = await self._repo.list_payouts(db)
        return PayoutListResponse(items=[PayoutResponse.from_domain(p) for p in payouts])

    async def list_latest_payouts(self, db: AsyncSession) -> PayoutListResponse:
        payouts = await self._repo.list_payouts(db, limit=LATEST_PAYOUTS_LIMIT)
        return PayoutListResponse(items=[PayoutResponse.from_domain(p) for p in payouts])

    async def list_payouts_by_venue(
        self, db: AsyncSession, venue_id: int
    ) -> PayoutListResponse:
        payouts = await self._repo.list_payouts(db, venue_id=venue_id)
        return PayoutListResponse(items=[PayoutResponse.from_domain(p) for p in payouts])

    async def list_rules(self, db: AsyncSession) -> PayoutRuleListResponse:
        rules = await self._rules.list_rules(db)
        return PayoutRuleListResponse(items=[PayoutRuleOut.from_domain(r) for r in rules])
