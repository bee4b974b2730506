"""EventApplicationService - event withdrawals and write-offs."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from src.jp_common.datetime_utils import ensure_aware
from src.jp_event.application.schemas import (
    CreateWriteOffRequest,
    EventWithdrawalListResponse,
    EventWithdrawalOut,
    EventWriteOffListResponse,
    EventWriteOffOut,
)
from src.jp_event.domain.repository import EventRepositoryProtocol
from src.jp_event.infrastructure.persistence import EventRepository
from src.jp_venue.application.service import VenueApplicationService

logger = logging.getLogger(__name__)


class EventApplicationService:
    def __init__(
        self,
        repo: EventRepositoryProtocol | None = None,
        venues: VenueApplicationService | None = None,
    ) -> None:
        self._repo: EventRepositoryProtocol = repo or EventRepository()
        self._venues = venues or VenueApplicationService()

    async def list_withdrawals(self, db: AsyncSession) -> EventWithdrawalListResponse:
        rows = await self._repo.list_withdrawals(db)
        return EventWithdrawalListResponse(items=[EventWithdrawalOut.from_domain(w) for w in rows])

    async def list_write_offs(self, db: AsyncSession) -> EventWriteOffListResponse:
        rows = await self._repo.list_write_offs(db)
        return EventWriteOffListResponse(items=[EventWriteOffOut.from_domain(w) for w in rows])

    async def create_write_off(
        self, db: AsyncSession, req: CreateWriteOffRequest
    ) -> EventWriteOffOut:
        note = (req.note or "").strip() or None
        async with db.begin():
            venue = await self._venues.lock_venue(db, req.venue_id)
            write_off = await self._repo.insert_write_off(
                db,
                venue_id=venue.id,
                occurred_at=ensure_aware(req.occurred_at),
                amount=req.amount,
                note=note,
            )
        logger.info(
            "Event write-off %s recorded: venue=%s amount=%s", write_off.id, venue.id, req.amount
        )
        return EventWriteOffOut.from_domain(write_off)
