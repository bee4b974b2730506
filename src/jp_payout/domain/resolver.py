"""Payout resolution: rule lookup + fixed/percentage policy.

    fixed       -> payout = amount (stored precision), no applied percentage
    percentage  -> payout = round_currency(current_balance * fraction),
                   applied percentage = fraction

The rule is looked up before any balance is read, so an unknown
(variant, table, hand) combination fails with RuleNotFoundError and nothing
else happens. When an existing payout is being recomputed its own id is
passed as `exclude_payout_id` so the balance does not include its stale
prior amount.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from src.jp_common.enums import GameVariant, RuleKind
from src.jp_common.errors import RuleNotFoundError
from src.jp_common.money import round_currency, to_decimal
from src.jp_payout.domain.models import FixedPrize, PayoutRule, RuleKey

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PayoutQuote:
    rule: PayoutRule
    balance: Decimal | None          # pool used for percentage rules
    payout_amount: Decimal
    applied_percentage: Decimal | None

    @property
    def kind(self) -> RuleKind:
        return self.rule.kind

    @property
    def value(self) -> Decimal:
        return self.rule.value


class RuleLookup(Protocol):
    async def get_rule(self, db: AsyncSession, key: RuleKey) -> PayoutRule | None: ...


class BalanceSource(Protocol):
    async def current_balance(
        self,
        db: AsyncSession,
        venue_id: int,
        variant: GameVariant,
        exclude_payout_id: int | None = None,
    ) -> Decimal: ...


def quote_payout(rule: PayoutRule, balance: Decimal | None = None) -> PayoutQuote:
    """Pure part of the resolver. `balance` is only read for percentage rules."""
    if isinstance(rule.prize, FixedPrize):
        return PayoutQuote(
            rule=rule,
            balance=None,
            payout_amount=rule.prize.amount,
            applied_percentage=None,
        )
    pool = to_decimal(balance)
    fraction = rule.prize.fraction
    return PayoutQuote(
        rule=rule,
        balance=pool,
        payout_amount=round_currency(pool * fraction),
        applied_percentage=fraction,
    )


class PayoutResolver:
    def __init__(self, rules: RuleLookup, balances: BalanceSource) -> None:
        self._rules = rules
        self._balances = balances

    async def resolve(
        self,
        db: AsyncSession,
        variant: object,
        table_label: str,
        hand_label: str,
        venue_id: int,
        exclude_payout_id: int | None = None,
    ) -> PayoutQuote:
        key = RuleKey.of(variant, table_label, hand_label)
        rule = await self._rules.get_rule(db, key)
        if rule is None:
            raise RuleNotFoundError(key.variant.value, key.table_label, key.hand_label)

        if rule.kind is RuleKind.FIXED:
            return quote_payout(rule)

        balance = await self._balances.current_balance(
            db, venue_id, key.variant, exclude_payout_id=exclude_payout_id
        )
        quote = quote_payout(rule, balance)
        logger.debug(
            "Percentage payout: venue=%s variant=%s balance=%s fraction=%s -> %s",
            venue_id,
            key.variant.value,
            balance,
            quote.applied_percentage,
            quote.payout_amount,
        )
        return quote
