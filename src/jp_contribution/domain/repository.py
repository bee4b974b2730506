"""Repository Protocol - dependency inversion for testability.

Unit tests inject a mock that conforms to this Protocol.
Infrastructure layer provides the real implementation.
"""

from datetime import datetime
from decimal import Decimal
from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from src.jp_common.enums import GameVariant
from src.jp_contribution.domain.models import Contribution
from src.jp_contribution.domain.splitter import ContributionSplit


class ContributionRepositoryProtocol(Protocol):
    async def insert_contribution(
        self,
        db: AsyncSession,
        venue_id: int,
        occurred_at: datetime,
        variant: GameVariant,
        gross_amount: Decimal,
        split: ContributionSplit,
        manager: str,
    ) -> Contribution: ...

    async def get_contribution_by_id(
        self,
        db: AsyncSession,
        contribution_id: int,
        for_update: bool = False,
    ) -> Contribution | None: ...

    async def update_contribution(
        self,
        db: AsyncSession,
        contribution_id: int,
        variant: GameVariant,
        gross_amount: Decimal,
        split: ContributionSplit,
    ) -> Contribution: ...

    async def list_contributions(self, db: AsyncSession) -> list[Contribution]: ...
