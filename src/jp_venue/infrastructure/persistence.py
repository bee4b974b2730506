"""VenueRepository - concrete implementation of VenueRepositoryProtocol.

Venues are seeded by migration and read-only here. `lock_venue` takes a
row lock (SELECT ... FOR UPDATE) and is the serialization point for every
ledger write on that venue; the caller must already be inside
`async with db.begin()`.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.jp_common.money import to_decimal
from src.jp_venue.domain.models import Venue
from src.jp_venue.infrastructure.db_models import VenueModel


def _to_domain(model: VenueModel) -> Venue:
    return Venue(
        id=model.id,
        name=model.name,
        standard_withdrawal=to_decimal(model.standard_withdrawal),
        created_at=model.created_at,
    )


class VenueRepository:
    async def get_venue_by_id(self, db: AsyncSession, venue_id: int) -> Venue | None:
        result = await db.execute(select(VenueModel).where(VenueModel.id == venue_id))
        model = result.scalar_one_or_none()
        return _to_domain(model) if model else None

    async def lock_venue(self, db: AsyncSession, venue_id: int) -> Venue | None:
        result = await db.execute(
            select(VenueModel).where(VenueModel.id == venue_id).with_for_update()
        )
        model = result.scalar_one_or_none()
        return _to_domain(model) if model else None

    async def list_venues(self, db: AsyncSession) -> list[Venue]:
        result = await db.execute(select(VenueModel).order_by(VenueModel.name))
        return [_to_domain(m) for m in result.scalars().all()]
