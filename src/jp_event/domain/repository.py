"""Repository Protocol - dependency inversion for testability."""

from datetime import datetime
from decimal import Decimal
from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from src.jp_event.domain.models import EventWithdrawal, EventWriteOff


class EventRepositoryProtocol(Protocol):
    async def list_withdrawals(self, db: AsyncSession) -> list[EventWithdrawal]: ...

    async def list_write_offs(self, db: AsyncSession) -> list[EventWriteOff]: ...

    async def insert_write_off(
        self,
        db: AsyncSession,
        venue_id: int,
        occurred_at: datetime,
        amount: Decimal,
        note: str | None,
    ) -> EventWriteOff: ...
