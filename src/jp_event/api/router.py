"""jp_event REST endpoints.

GET  /events/withdrawals    - amount withheld by the venue on each contribution
GET  /events/write-offs     - recorded event spending, newest first
POST /events/write-offs     - record event spending
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.jp_common.database import get_db_session
from src.jp_common.response import ApiResponse, success_response
from src.jp_event.application.schemas import CreateWriteOffRequest
from src.jp_event.application.service import EventApplicationService

router = APIRouter(prefix="/events", tags=["events"])

_service = EventApplicationService()


def _request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)


@router.get("/withdrawals")
async def list_withdrawals(
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ApiResponse:
    data = await _service.list_withdrawals(db)
    return success_response(data.model_dump(), request_id=_request_id(request))


@router.get("/write-offs")
async def list_write_offs(
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ApiResponse:
    data = await _service.list_write_offs(db)
    return success_response(data.model_dump(), request_id=_request_id(request))


@router.post("/write-offs", status_code=status.HTTP_201_CREATED)
async def create_write_off(
    body: CreateWriteOffRequest,
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ApiResponse:
    data = await _service.create_write_off(db, body)
    return success_response(
        data.model_dump(), request_id=_request_id(request), message="Write-off recorded"
    )
