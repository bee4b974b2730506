"""VenueApplicationService - read-only lookups used by the API and by the
ledger services that need a venue before writing."""

from sqlalchemy.ext.asyncio import AsyncSession

from src.jp_common.errors import VenueNotFoundError
from src.jp_venue.application.schemas import VenueListResponse, VenueOut
from src.jp_venue.domain.models import Venue
from src.jp_venue.domain.repository import VenueRepositoryProtocol
from src.jp_venue.infrastructure.persistence import VenueRepository


class VenueApplicationService:
    def __init__(self, repo: VenueRepositoryProtocol | None = None) -> None:
        self._repo: VenueRepositoryProtocol = repo or VenueRepository()

    async def list_venues(self, db: AsyncSession) -> VenueListResponse:
        venues = await self._repo.list_venues(db)
        return VenueListResponse(items=[VenueOut.from_domain(v) for v in venues])

    async def get_venue(self, db: AsyncSession, venue_id: int) -> VenueOut:
        venue = await self._repo.get_venue_by_id(db, venue_id)
        if venue is None:
            raise VenueNotFoundError(venue_id)
        return VenueOut.from_domain(venue)

    async def lock_venue(self, db: AsyncSession, venue_id: int) -> Venue:
        """Row-lock the venue for the current transaction or raise VenueNotFoundError."""
        venue = await self._repo.lock_venue(db, venue_id)
        if venue is None:
            raise VenueNotFoundError(venue_id)
        return venue
