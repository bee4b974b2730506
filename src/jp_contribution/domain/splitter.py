"""Contribution split: how much of a collected amount the venue keeps and how
much funds the jackpot.

    gross'     = max(coerce(gross), 0)
    threshold' = max(coerce(standard_withdrawal), 0)
    withheld   = min(gross', threshold')
    jackpot    = max(gross' - withheld, 0)

Total over any input: negative or non-numeric values count as zero.
"""

from dataclasses import dataclass
from decimal import Decimal

from src.jp_common.money import ZERO, clamp_non_negative, to_decimal


@dataclass(frozen=True)
class ContributionSplit:
    gross_amount: Decimal
    withheld_amount: Decimal
    jackpot_contribution: Decimal


def split_contribution(gross_amount: object, standard_withdrawal: object) -> ContributionSplit:
    gross = clamp_non_negative(to_decimal(gross_amount))
    threshold = clamp_non_negative(to_decimal(standard_withdrawal))

    withheld = min(gross, threshold)
    jackpot = max(gross - withheld, ZERO)
    return ContributionSplit(
        gross_amount=gross,
        withheld_amount=withheld,
        jackpot_contribution=jackpot,
    )
