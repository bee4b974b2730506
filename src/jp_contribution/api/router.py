"""jp_contribution REST endpoints.

POST /contributions         - record money collected from an event
GET  /contributions         - all contributions, newest first
PUT  /contributions/{id}    - change variant and/or gross amount (split recomputed)
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.jp_common.database import get_db_session
from src.jp_common.response import ApiResponse, success_response
from src.jp_common.schemas import IdPath
from src.jp_contribution.application.schemas import (
    CreateContributionRequest,
    UpdateContributionRequest,
)
from src.jp_contribution.application.service import ContributionApplicationService

router = APIRouter(prefix="/contributions", tags=["contributions"])

_service = ContributionApplicationService()


def _request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_contribution(
    body: CreateContributionRequest,
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ApiResponse:
    data = await _service.create_contribution(db, body)
    return success_response(
        data.model_dump(), request_id=_request_id(request), message="Contribution recorded"
    )


@router.get("")
async def list_contributions(
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ApiResponse:
    data = await _service.list_contributions(db)
    return success_response(data.model_dump(), request_id=_request_id(request))


@router.put("/{contribution_id}")
async def update_contribution(
    contribution_id: IdPath,
    body: UpdateContributionRequest,
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ApiResponse:
    data = await _service.update_contribution(db, contribution_id, body)
    return success_response(
        data.model_dump(), request_id=_request_id(request), message="Contribution updated"
    )
