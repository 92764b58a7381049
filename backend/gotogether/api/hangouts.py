"""
Hangouts API - Hangout events and visibility controls

Implements:
- Filtered, paginated hangout listing
- Hangout CRUD
- Visibility grants (contact category or single user)
"""
from datetime import datetime
from typing import List, Literal, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from gotogether.config.constants import HANGOUTS_DEFAULT_PAGE_SIZE, HANGOUTS_MAX_PAGE_SIZE
from gotogether.models.database import get_db
from gotogether.services.exceptions import NotFoundError, ValidationError
from gotogether.services.hangout_service import hangout_service
from gotogether.schemas.hangout import (
    AddVisibilityRequest,
    CreateHangoutRequest,
    HangoutDetailResponse,
    HangoutFilters,
    HangoutResponse,
    UpdateHangoutRequest,
    VisibilityResponse,
)

router = APIRouter()


def hangout_filters(
    user_id: Optional[str] = Query(None, alias="userId"),
    title: Optional[str] = Query(None),
    is_public: Optional[bool] = Query(None, alias="isPublic"),
    starts_at_from: Optional[datetime] = Query(None, alias="startsAtFrom"),
    starts_at_to: Optional[datetime] = Query(None, alias="startsAtTo"),
    ends_at_from: Optional[datetime] = Query(None, alias="endsAtFrom"),
    ends_at_to: Optional[datetime] = Query(None, alias="endsAtTo"),
    lat_min: Optional[float] = Query(None, alias="latMin"),
    lat_max: Optional[float] = Query(None, alias="latMax"),
    lng_min: Optional[float] = Query(None, alias="lngMin"),
    lng_max: Optional[float] = Query(None, alias="lngMax"),
    interest_id: Optional[str] = Query(None, alias="interestId"),
    order_by: Literal["startsAt", "endsAt", "createdAt", "title"] = Query("startsAt", alias="orderBy"),
    order_dir: Literal["asc", "desc"] = Query("asc", alias="orderDir"),
    page: int = Query(1, ge=1),
    limit: int = Query(HANGOUTS_DEFAULT_PAGE_SIZE, ge=1, le=HANGOUTS_MAX_PAGE_SIZE),
) -> HangoutFilters:
    return HangoutFilters(
        user_id=user_id,
        title=title,
        is_public=is_public,
        starts_at_from=starts_at_from,
        starts_at_to=starts_at_to,
        ends_at_from=ends_at_from,
        ends_at_to=ends_at_to,
        lat_min=lat_min,
        lat_max=lat_max,
        lng_min=lng_min,
        lng_max=lng_max,
        interest_id=interest_id,
        order_by=order_by,
        order_dir=order_dir,
        page=page,
        limit=limit,
    )


@router.get("/hangouts", response_model=List[HangoutResponse])
async def list_hangouts(
    filters: HangoutFilters = Depends(hangout_filters),
    db: AsyncSession = Depends(get_db),
):
    return await hangout_service.list_hangouts(db, filters)


@router.get("/hangouts/{hangout_id}", response_model=HangoutDetailResponse)
async def get_hangout(hangout_id: str, db: AsyncSession = Depends(get_db)):
    try:
        return await hangout_service.get_or_fail(db, hangout_id, with_visibility=True)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/hangouts", response_model=HangoutResponse, status_code=201)
async def create_hangout(req: CreateHangoutRequest, db: AsyncSession = Depends(get_db)):
    fields = req.model_dump(exclude={"user_id"})
    try:
        return await hangout_service.create(db, req.user_id, **fields)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/hangouts/{hangout_id}", response_model=HangoutResponse)
async def update_hangout(hangout_id: str, req: UpdateHangoutRequest, db: AsyncSession = Depends(get_db)):
    try:
        return await hangout_service.update(db, hangout_id, **req.model_dump(exclude_unset=True))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/hangouts/{hangout_id}", status_code=204)
async def delete_hangout(hangout_id: str, db: AsyncSession = Depends(get_db)):
    try:
        await hangout_service.delete(db, hangout_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/hangouts/{hangout_id}/visibility", response_model=List[VisibilityResponse])
async def list_visibility(hangout_id: str, db: AsyncSession = Depends(get_db)):
    return await hangout_service.list_visibility(db, hangout_id)


@router.post("/hangouts/{hangout_id}/visibility", response_model=VisibilityResponse, status_code=201)
async def add_visibility(hangout_id: str, req: AddVisibilityRequest, db: AsyncSession = Depends(get_db)):
    try:
        return await hangout_service.add_visibility(
            db, hangout_id, category_id=req.category_id, user_id=req.user_id
        )
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/hangouts/{hangout_id}/visibility/{visibility_id}", status_code=204)
async def remove_visibility(hangout_id: str, visibility_id: str, db: AsyncSession = Depends(get_db)):
    try:
        await hangout_service.remove_visibility(db, hangout_id, visibility_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
