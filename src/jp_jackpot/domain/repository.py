"""Repository Protocol - dependency inversion for testability."""

from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from src.jp_common.enums import GameVariant
from src.jp_jackpot.domain.models import LedgerLine


class JackpotRepositoryProtocol(Protocol):
    async def list_ledger_lines(
        self,
        db: AsyncSession,
        venue_id: int,
        variant: GameVariant,
        exclude_payout_id: int | None = None,
    ) -> list[LedgerLine]: ...

    async def list_all_ledger_lines(self, db: AsyncSession) -> list[LedgerLine]: ...
