"""jp_jackpot REST endpoints.

GET /jackpot/current                  - every (venue, variant) pool
GET /jackpot/current/{venue_id}       - one pool, ?variant=Texas|Omaha
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.jp_common.database import get_db_session
from src.jp_common.response import ApiResponse, success_response
from src.jp_common.schemas import IdPath
from src.jp_jackpot.application.service import JackpotApplicationService

router = APIRouter(prefix="/jackpot", tags=["jackpot"])

_service = JackpotApplicationService()


@router.get("/current")
async def list_current(
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ApiResponse:
    data = await _service.list_current(db)
    return success_response(
        data.model_dump(), request_id=getattr(request.state, "request_id", None)
    )


@router.get("/current/{venue_id}")
async def get_current(
    venue_id: IdPath,
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db_session)],
    variant: str = Query("Texas", description="Anything other than Omaha means Texas"),
) -> ApiResponse:
    data = await _service.get_current(db, venue_id, variant)
    return success_response(
        data.model_dump(), request_id=getattr(request.state, "request_id", None)
    )
