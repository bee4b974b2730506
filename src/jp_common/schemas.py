"""Reusable pydantic field types for request schemas."""

from decimal import Decimal
from typing import Annotated

from fastapi import Path
from pydantic import AfterValidator, BeforeValidator, Field

from src.jp_common.enums import GameVariant

# BIGINT / BIGSERIAL upper bound
MAX_DB_ID = 2**63 - 1


def _coerce_variant(value: object) -> GameVariant:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValueError("variant is required")
    return GameVariant.normalize(value)


def _not_blank(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("must not be blank")
    return value


# Only "Omaha" maps to Omaha; any other non-empty value is Texas.
VariantIn = Annotated[GameVariant, BeforeValidator(_coerce_variant)]

NonBlankStr = Annotated[str, AfterValidator(_not_blank)]

# Column widths in alembic/versions
ManagerStr = Annotated[NonBlankStr, Field(max_length=120)]
TableLabelStr = Annotated[NonBlankStr, Field(max_length=32)]
HandLabelStr = Annotated[NonBlankStr, Field(max_length=64)]

VenueIdIn = Annotated[int, Field(gt=0, le=MAX_DB_ID)]
IdPath = Annotated[int, Path(le=MAX_DB_ID)]

MoneyIn = Annotated[Decimal, Field(ge=0, allow_inf_nan=False, max_digits=18)]
