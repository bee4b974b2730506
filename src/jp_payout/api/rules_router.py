"""Read-only view of the payout rule table.

GET /payout-rules   - every (variant, table, hand) rule with its kind and value
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.jp_common.database import get_db_session
from src.jp_common.response import ApiResponse, success_response
from src.jp_payout.api.router import _service

router = APIRouter(prefix="/payout-rules", tags=["payout-rules"])


@router.get("")
async def list_rules(
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ApiResponse:
    data = await _service.list_rules(db)
    return success_response(
        data.model_dump(), request_id=getattr(request.state, "request_id", None)
    )
