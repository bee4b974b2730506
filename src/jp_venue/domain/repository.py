"""Repository Protocol - dependency inversion for testability.

Unit tests inject a mock that conforms to this Protocol.
Infrastructure layer provides the real implementation.
"""

from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from src.jp_venue.domain.models import Venue


class VenueRepositoryProtocol(Protocol):
    async def get_venue_by_id(self, db: AsyncSession, venue_id: int) -> Venue | None: ...

    async def lock_venue(self, db: AsyncSession, venue_id: int) -> Venue | None: ...

    async def list_venues(self, db: AsyncSession) -> list[Venue]: ...
