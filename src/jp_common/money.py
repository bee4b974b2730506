"""Decimal money helpers for the jackpot ledger.

All amounts are decimal.Decimal (BRL). Nothing here raises: invalid input
collapses to zero, which is the clamp-to-zero policy the splitter and the
aggregator rely on.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

ZERO = Decimal("0")
CENT = Decimal("0.01")


def to_decimal(value: object) -> Decimal:
    """Coerce a number-like value to Decimal; None, garbage, NaN and inf become 0."""
    if value is None or isinstance(value, bool):
        return ZERO
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except (InvalidOperation, ValueError):
            return ZERO
    if not result.is_finite():
        return ZERO
    return result


def clamp_non_negative(value: Decimal) -> Decimal:
    return value if value > ZERO else ZERO


def round_currency(value: Decimal) -> Decimal:
    """Round half away from zero to 2 decimal places."""
    return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def money_to_display(value: Decimal | None) -> str:
    """Format as BRL: Decimal("1234.5") -> 'R$ 1.234,50', negatives -> '-R$ 12,00'."""
    amount = round_currency(to_decimal(value))
    sign = "-" if amount < ZERO else ""
    grouped = f"{abs(amount):,.2f}"  # 1,234.50
    swapped = grouped.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}R$ {swapped}"
