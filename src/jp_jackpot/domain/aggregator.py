"""BalanceAggregator - store-backed wrapper around the pure folds."""

from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from src.jp_common.enums import GameVariant
from src.jp_jackpot.domain.balance import aggregate_balances, fold_balance
from src.jp_jackpot.domain.models import JackpotBalance
from src.jp_jackpot.domain.repository import JackpotRepositoryProtocol
from src.jp_jackpot.infrastructure.persistence import JackpotRepository


class BalanceAggregator:
    """Read-only; safe to share across requests."""

    def __init__(self, repo: JackpotRepositoryProtocol | None = None) -> None:
        self._repo: JackpotRepositoryProtocol = repo or JackpotRepository()

    async def current_balance(
        self,
        db: AsyncSession,
        venue_id: int,
        variant: GameVariant,
        exclude_payout_id: int | None = None,
    ) -> Decimal:
        """Unrounded, never-negative pool of one (venue, variant) key."""
        lines = await self._repo.list_ledger_lines(
            db, venue_id, GameVariant.normalize(variant), exclude_payout_id
        )
        return fold_balance(lines)

    async def all_balances(self, db: AsyncSession) -> list[JackpotBalance]:
        lines = await self._repo.list_all_ledger_lines(db)
        return aggregate_balances(lines)
