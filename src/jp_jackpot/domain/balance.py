"""Jackpot balance folds.

    balance(venue, variant) = max(sum(contributions) - sum(payouts), 0)

Both functions are pure and order independent: balances are recomputed
from the records on every read, never kept as running counters.

`aggregate_balances` is the whole-table form (one balance per key, rounded
to cents, then clamped). `fold_balance` is the same fold over the lines of a
single key and stays unrounded because percentage payouts multiply it first.
"""

from collections.abc import Iterable
from decimal import Decimal

from src.jp_common.enums import GameVariant
from src.jp_common.money import ZERO, clamp_non_negative, round_currency, to_decimal
from src.jp_jackpot.domain.models import JackpotBalance, LedgerLine


def fold_balance(lines: Iterable[LedgerLine]) -> Decimal:
    total = sum((to_decimal(line.amount) for line in lines), ZERO)
    return clamp_non_negative(total)


def aggregate_balances(lines: Iterable[LedgerLine]) -> list[JackpotBalance]:
    totals: dict[tuple[int, GameVariant], Decimal] = {}
    names: dict[int, str] = {}
    for line in lines:
        variant = GameVariant.normalize(line.variant)
        key = (line.venue_id, variant)
        totals[key] = totals.get(key, ZERO) + to_decimal(line.amount)
        if line.venue_name:
            names[line.venue_id] = line.venue_name

    balances = [
        JackpotBalance(
            venue_id=venue_id,
            venue_name=names.get(venue_id, ""),
            variant=variant,
            amount=clamp_non_negative(round_currency(total)),
        )
        for (venue_id, variant), total in totals.items()
    ]
    balances.sort(key=lambda b: (b.venue_name, b.venue_id, b.variant.value))
    return balances
