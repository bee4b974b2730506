"""jp_payout REST endpoints.

POST /payouts                       - record a prize drawn from the pool
GET  /payouts                       - all payouts, newest first
GET  /payouts/latest                - the 5 most recent payouts
GET  /payouts/by-venue/{venue_id}   - payouts of one venue
PUT  /payouts/{payout_id}           - change variant/table/hand; prize recomputed
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.jp_common.database import get_db_session
from src.jp_common.response import ApiResponse, success_response
from src.jp_common.schemas import IdPath
from src.jp_payout.application.schemas import CreatePayoutRequest, UpdatePayoutRequest
from src.jp_payout.application.service import PayoutApplicationService

router = APIRouter(prefix="/payouts", tags=["payouts"])

_service = PayoutApplicationService()


def _request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_payout(
    body: CreatePayoutRequest,
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ApiResponse:
    data = await _service.create_payout(db, body)
    return success_response(
        data.model_dump(), request_id=_request_id(request), message="Payout recorded"
    )


@router.get("")
async def list_payouts(
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ApiResponse:
    data = await _service.list_payouts(db)
    return success_response(data.model_dump(), request_id=_request_id(request))


@router.get("/latest")
async def list_latest_payouts(
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ApiResponse:
    data = await _service.list_latest_payouts(db)
    return success_response(data.model_dump(), request_id=_request_id(request))


@router.get("/by-venue/{venue_id}")
async def list_payouts_by_venue(
    venue_id: IdPath,
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ApiResponse:
    data = await _service.list_payouts_by_venue(db, venue_id)
    return success_response(data.model_dump(), request_id=_request_id(request))


@router.put("/{payout_id}")
async def update_payout(
    payout_id: IdPath,
    body: UpdatePayoutRequest,
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ApiResponse:
    data = await _service.update_payout(db, payout_id, body)
    return success_response(
        data.model_dump(), request_id=_request_id(request), message="Payout recomputed"
    )
