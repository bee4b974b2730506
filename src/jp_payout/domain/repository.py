"""Repository Protocols - dependency inversion for testability.

Unit tests inject mocks that conform to these Protocols.
Infrastructure layer provides the real implementations.
"""

from datetime import datetime
from decimal import Decimal
from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from src.jp_common.enums import GameVariant
from src.jp_payout.domain.models import Payout, PayoutRule, RuleKey


class PayoutRuleRepositoryProtocol(Protocol):
    async def get_rule(self, db: AsyncSession, key: RuleKey) -> PayoutRule | None: ...

    async def list_rules(self, db: AsyncSession) -> list[PayoutRule]: ...


class PayoutRepositoryProtocol(Protocol):
    async def insert_payout(
        self,
        db: AsyncSession,
        venue_id: int,
        occurred_at: datetime,
        time_of_day: str | None,
        variant: GameVariant,
        table_label: str,
        hand_label: str,
        player_label: str,
        applied_percentage: Decimal | None,
        payout_amount: Decimal,
        done: bool,
        manager: str,
    ) -> Payout: ...

    async def get_payout_by_id(
        self, db: AsyncSession, payout_id: int, for_update: bool = False
    ) -> Payout | None: ...

    async def update_payout(
        self,
        db: AsyncSession,
        payout_id: int,
        variant: GameVariant,
        table_label: str,
        hand_label: str,
        applied_percentage: Decimal | None,
        payout_amount: Decimal,
    ) -> Payout: ...

    async def list_payouts(
        self, db: AsyncSession, venue_id: int | None = None, limit: int | None = None
    ) -> list[Payout]: ...
