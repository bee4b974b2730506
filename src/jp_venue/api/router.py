"""jp_venue REST endpoints.

GET /venues               - all venues, by name
GET /venues/{venue_id}    - single venue
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.jp_common.database import get_db_session
from src.jp_common.response import ApiResponse, success_response
from src.jp_common.schemas import IdPath
from src.jp_venue.application.service import VenueApplicationService

router = APIRouter(prefix="/venues", tags=["venues"])

_service = VenueApplicationService()


@router.get("")
async def list_venues(
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ApiResponse:
    result = await _service.list_venues(db)
    return success_response(
        result.model_dump(), request_id=getattr(request.state, "request_id", None)
    )


@router.get("/{venue_id}")
async def get_venue(
    venue_id: IdPath,
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ApiResponse:
    result = await _service.get_venue(db, venue_id)
    return success_response(
        result.model_dump(), request_id=getattr(request.state, "request_id", None)
    )
