"""ContributionApplicationService - create/update/list contributions.

Writes run inside `async with db.begin()` and row-lock the venue first, so
every ledger write on a venue is serialized (see VenueRepository.lock_venue).
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from src.jp_common.datetime_utils import ensure_aware
from src.jp_common.errors import ContributionNotFoundError, NothingToUpdateError
from src.jp_contribution.application.schemas import (
    ContributionListResponse,
    ContributionResponse,
    CreateContributionRequest,
    UpdateContributionRequest,
)
from src.jp_contribution.domain.repository import ContributionRepositoryProtocol
from src.jp_contribution.domain.splitter import split_contribution
from src.jp_contribution.infrastructure.persistence import ContributionRepository
from src.jp_venue.application.service import VenueApplicationService

logger = logging.getLogger(__name__)

_UPDATABLE_FIELDS = ("variant", "gross_amount")


class ContributionApplicationService:
    def __init__(
        self,
        repo: ContributionRepositoryProtocol | None = None,
        venues: VenueApplicationService | None = None,
    ) -> None:
        self._repo: ContributionRepositoryProtocol = repo or ContributionRepository()
        self._venues = venues or VenueApplicationService()

    async def create_contribution(
        self, db: AsyncSession, req: CreateContributionRequest
    ) -> ContributionResponse:
        async with db.begin():
            venue = await self._venues.lock_venue(db, req.venue_id)
            split = split_contribution(req.gross_amount, venue.standard_withdrawal)
            contribution = await self._repo.insert_contribution(
                db,
                venue_id=venue.id,
                occurred_at=ensure_aware(req.occurred_at),
                variant=req.variant,
                gross_amount=req.gross_amount,
                split=split,
                manager=req.manager,
            )
        logger.info(
            "Contribution %s recorded: venue=%s variant=%s gross=%s withheld=%s jackpot=%s",
            contribution.id,
            venue.id,
            contribution.variant.value,
            split.gross_amount,
            split.withheld_amount,
            split.jackpot_contribution,
        )
        return ContributionResponse.from_domain(contribution)

    async def update_contribution(
        self, db: AsyncSession, contribution_id: int, req: UpdateContributionRequest
    ) -> ContributionResponse:
        if req.is_empty():
            raise NothingToUpdateError(_UPDATABLE_FIELDS)

        async with db.begin():
            current = await self._repo.get_contribution_by_id(
                db, contribution_id, for_update=True
            )
            if current is None:
                raise ContributionNotFoundError(contribution_id)
            venue = await self._venues.lock_venue(db, current.venue_id)

            variant = req.variant if req.variant is not None else current.variant
            gross = req.gross_amount if req.gross_amount is not None else current.gross_amount
            split = split_contribution(gross, venue.standard_withdrawal)
            updated = await self._repo.update_contribution(
                db, contribution_id, variant=variant, gross_amount=gross, split=split
            )
        logger.info(
            "Contribution %s updated: variant=%s gross=%s jackpot=%s",
            contribution_id,
            variant.value,
            gross,
            split.jackpot_contribution,
        )
        return ContributionResponse.from_domain(updated)

    async def list_contributions(self, db: AsyncSession) -> ContributionListResponse:
        contributions = await self._repo.list_contributions(db)
        return ContributionListResponse(
            items=[ContributionResponse.from_domain(c) for c in contributions]
        )
